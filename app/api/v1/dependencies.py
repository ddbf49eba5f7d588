"""
➡️ But : Centraliser les dépendances réutilisables des routes.

get_task_repository() : crée un TaskRepository à partir d’une session DB.

get_task_service() : crée un TaskService à partir du repository.

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Remplaçables dans les tests via app.dependency_overrides (repo factice, base en mémoire).
"""

from fastapi import Depends
from sqlmodel import Session

from app.db.session import get_session
from app.db.repositories.tasks import TaskRepository
from app.features.tasks.services import TaskService


# -----------------------------
# Repositories
# -----------------------------
def get_task_repository(session: Session = Depends(get_session)) -> TaskRepository:
    return TaskRepository(session)


# -----------------------------
# Task service
# -----------------------------
def get_task_service(
    task_repo: TaskRepository = Depends(get_task_repository),
) -> TaskService:
    return TaskService(repo=task_repo)
