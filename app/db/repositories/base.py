import logging
from contextlib import contextmanager
from typing import Any, Generic, Iterator, Optional, Type, TypeVar
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, Session

from app.core.errors import StoreError

# Type générique pour le modèle (Task, ...)
ModelT = TypeVar("ModelT", bound=SQLModel)

logger = logging.getLogger(__name__)

class BaseRepository(Generic[ModelT]):
    """
    Repository de base pour les opérations CRUD standards.

    👉 Ne contient aucune logique métier.
    👉 Gère la persistance générique : create, get.
    👉 Toute erreur SQLAlchemy est convertie en StoreError (après rollback).
    👉 Les repositories concrets définissent `model = MaClasseSQLModel`.
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    # ---------- ERREURS ----------

    @contextmanager
    def _store_errors(self, operation: str) -> Iterator[None]:
        """Rollback + StoreError chaînée sur toute erreur de la base."""
        try:
            yield
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.debug("%s.%s failed: %s", self.model.__name__, operation, e)
            raise StoreError(f"{self.model.__name__}.{operation} failed") from e

    # ---------- READ ----------

    def get(self, id_: Any) -> Optional[ModelT]:
        """Retourne un enregistrement par son identifiant, ou None."""
        with self._store_errors("get"):
            return self.session.get(self.model, id_)

    # ---------- CREATE ----------

    def create(self, **fields) -> ModelT:
        """Crée et persiste un nouvel enregistrement (valeurs générées incluses)."""
        entity = self.model(**fields)
        with self._store_errors("create"):
            self.session.add(entity)
            self.session.commit()
            self.session.refresh(entity)
        return entity
