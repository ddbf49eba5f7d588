from enum import Enum
from typing import Optional
from sqlmodel import Field

from .base import BaseModelDB

# Plus grand id représentable (INTEGER 32 bits côté Postgres)
MAX_TASK_ID = 2**31 - 1


class TaskFilter(str, Enum):
    ALL = "all"
    COMPLETED = "completed"
    INCOMPLETE = "incomplete"

    @classmethod
    def from_query(cls, completed: Optional[str]) -> "TaskFilter":
        """'true' → COMPLETED, 'false' → INCOMPLETE, absent → ALL."""
        if completed is None:
            return cls.ALL
        return cls.COMPLETED if completed == "true" else cls.INCOMPLETE


class Task(BaseModelDB, table=True):
    __tablename__ = "tasks"
    # AUTOINCREMENT : SQLite ne réutilise jamais un id supprimé
    __table_args__ = {"sqlite_autoincrement": True}

    title: str = Field(nullable=False)
    description: Optional[str] = Field(default=None)
    completed: bool = Field(default=False, nullable=False, index=True)
