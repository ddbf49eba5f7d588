"""
➡️ But : Définir les endpoints de l’API des tâches.

C’est la couche la plus proche du web :

Réceptionne les requêtes HTTP (GET, POST, PUT, DELETE)

Appelle le TaskService

Traduit ValidationError → 400 et NotFoundError → 404 (StoreError → 500 est géré dans app.main)

Chaque fonction représente une route. Aucune requête SQL ici.
"""

from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from app.api.v1.dependencies import get_task_service
from app.core.errors import NotFoundError, ValidationError
from app.db.models.tasks import TaskFilter
from app.features.tasks.schemas import (
    ErrorOut,
    TaskCreateIn,
    TaskDeleteOut,
    TaskOut,
    TaskUpdateIn,
)
from app.features.tasks.services import TaskService

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
    responses={
        400: {"model": ErrorOut, "description": "Bad Request"},
        500: {"model": ErrorOut, "description": "Internal Server Error"},
    },
)

_NOT_FOUND = {404: {"model": ErrorOut, "description": "Not Found"}}


@router.post(
    "",
    summary="Créer une tâche",
    status_code=status.HTTP_201_CREATED,
    response_model=TaskOut,
)
def create_task(payload: TaskCreateIn, svc: TaskService = Depends(get_task_service)):
    try:
        return svc.create(title=payload.title, description=payload.description)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get(
    "",
    summary="Lister les tâches",
    description="Plus récentes d'abord. `completed=true|false` filtre par état ; absent = toutes.",
    response_model=List[TaskOut],
)
def list_tasks(
    completed: Optional[Literal["true", "false"]] = Query(None, description="Filtre par état"),
    svc: TaskService = Depends(get_task_service),
):
    return svc.list(TaskFilter.from_query(completed))


@router.get(
    "/{task_id}",
    summary="Récupérer une tâche",
    response_model=TaskOut,
    responses=_NOT_FOUND,
)
def get_task(task_id: int = Path(...), svc: TaskService = Depends(get_task_service)):
    try:
        return svc.get(task_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put(
    "/{task_id}",
    summary="Mettre à jour une tâche",
    description="Remplacement complet : title, description et completed sont tous fournis.",
    response_model=TaskOut,
    responses=_NOT_FOUND,
)
def update_task(
    payload: TaskUpdateIn,
    task_id: int = Path(...),
    svc: TaskService = Depends(get_task_service),
):
    try:
        return svc.update(
            task_id,
            title=payload.title,
            description=payload.description,
            completed=payload.completed,
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete(
    "/{task_id}",
    summary="Supprimer une tâche",
    response_model=TaskDeleteOut,
    responses=_NOT_FOUND,
)
def delete_task(task_id: int = Path(...), svc: TaskService = Depends(get_task_service)):
    try:
        task = svc.delete(task_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return TaskDeleteOut(message="Task deleted", task=TaskOut.model_validate(task))
