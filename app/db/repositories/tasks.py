# app/db/repositories/tasks.py
from typing import Optional, Sequence
from sqlalchemy import delete, update
from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.db.models.tasks import MAX_TASK_ID, Task, TaskFilter

class TaskRepository(BaseRepository[Task]):
    """
    CRUD Tasks. Requêtes paramétrées uniquement (jamais de SQL concaténé).
    update/delete = une seule instruction ... RETURNING (atomique côté base).
    """
    model = Task

    # ---------- CREATE ----------

    def insert(self, *, title: str, description: Optional[str] = None) -> Task:
        """Insère une tâche ; id, created_at et completed=False sont générés."""
        return self.create(title=title, description=description)

    # ---------- READ ----------

    def list_all(self, task_filter: TaskFilter = TaskFilter.ALL) -> Sequence[Task]:
        """
        Liste des tâches, plus récentes d'abord.
        - ALL        : aucune restriction
        - COMPLETED  : completed = true
        - INCOMPLETE : completed = false
        """
        stmt = select(Task)

        if task_filter is TaskFilter.COMPLETED:
            stmt = stmt.where(Task.completed.is_(True))
        elif task_filter is TaskFilter.INCOMPLETE:
            stmt = stmt.where(Task.completed.is_(False))

        # id en départage quand deux created_at sont égaux
        stmt = stmt.order_by(Task.created_at.desc(), Task.id.desc())

        with self._store_errors("list_all"):
            return self.session.exec(stmt).all()

    @staticmethod
    def _in_range(task_id: int) -> bool:
        # un id hors colonne INTEGER ne peut exister : pas de requête
        return 1 <= task_id <= MAX_TASK_ID

    def get_by_id(self, task_id: int) -> Optional[Task]:
        if not self._in_range(task_id):
            return None
        return self.get(task_id)

    # ---------- UPDATE ----------

    def update(
        self,
        task_id: int,
        *,
        title: str,
        description: Optional[str],
        completed: bool,
    ) -> Optional[Task]:
        """Remplace title/description/completed. None si l'id n'existe pas."""
        if not self._in_range(task_id):
            return None
        stmt = (
            update(Task)
            .where(Task.id == task_id)
            .values(title=title, description=description, completed=completed)
            .returning(Task)
        )
        with self._store_errors("update"):
            task = self.session.exec(stmt).scalars().first()
            self.session.commit()
        return task

    # ---------- DELETE ----------

    def delete_by_id(self, task_id: int) -> Optional[Task]:
        """Supprime et renvoie la tâche supprimée. None si l'id n'existe pas."""
        if not self._in_range(task_id):
            return None
        stmt = delete(Task).where(Task.id == task_id).returning(Task)
        with self._store_errors("delete"):
            task = self.session.exec(stmt).scalars().first()
            self.session.commit()
        # la ligne n'existe plus : l'objet ne doit pas rester dans la session
        if task is not None and task in self.session:
            self.session.expunge(task)
        return task
