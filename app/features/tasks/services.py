"""
➡️ But : Contenir la logique métier : orchestrer le repo, appliquer les règles, signaler les erreurs.

TaskService : vérifie le titre avant toute écriture, transforme "pas de ligne" en NotFoundError.

Les erreurs de la base remontent en StoreError (levée par le repository) ; la traduction
HTTP est faite par les routers / handlers, jamais ici.

🔹 Avantages :

Code métier découplé du web.

Test unitaire possible sans FastAPI ni base réelle (repo factice).
"""

import logging
from typing import Optional, Sequence

from app.core.errors import NotFoundError, ValidationError
from app.db.models.tasks import Task, TaskFilter
from app.db.repositories.tasks import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, repo: TaskRepository):
        self.repo = repo

    @staticmethod
    def _require_title(title: Optional[str]) -> str:
        if not title or not title.strip():
            raise ValidationError("Task title is required")
        return title

    def create(self, *, title: Optional[str], description: Optional[str] = None) -> Task:
        title = self._require_title(title)
        task = self.repo.insert(title=title, description=description)
        logger.info("Task %s created", task.id)
        return task

    def list(self, task_filter: TaskFilter = TaskFilter.ALL) -> Sequence[Task]:
        return self.repo.list_all(task_filter)

    def get(self, task_id: int) -> Task:
        task = self.repo.get_by_id(task_id)
        if task is None:
            raise NotFoundError("Task not found")
        return task

    def update(
        self,
        task_id: int,
        *,
        title: Optional[str],
        description: Optional[str],
        completed: bool,
    ) -> Task:
        title = self._require_title(title)
        task = self.repo.update(task_id, title=title, description=description, completed=completed)
        if task is None:
            raise NotFoundError("Task not found")
        logger.info("Task %s updated (completed=%s)", task_id, completed)
        return task

    def delete(self, task_id: int) -> Task:
        task = self.repo.delete_by_id(task_id)
        if task is None:
            raise NotFoundError("Task not found")
        logger.info("Task %s deleted", task_id)
        return task
