"""
➡️ But : Configurer la base (Postgres ou SQLite) et gérer les sessions de base de données.

engine : pool de connexions construit depuis settings.DATABASE_URL.

init_db() : crée les tables à partir des modèles SQLModel.

get_session() : dépendance FastAPI qui ouvre une session, la fournit aux routes, puis la ferme proprement.

🔹 Avantages :

Un seul endroit pour gérer les connexions DB.

Réutilisable par injection (Depends(get_session)) et remplaçable dans les tests.
"""

from typing import Dict, Any, Optional
from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy.engine import Engine

# Import all models for creating all tables
from app.db.models.tasks import Task

from app.core.config import Settings, settings

def build_engine(cfg: Settings = settings) -> Engine:
    url = cfg.DATABASE_URL
    assert url, "DATABASE_URL must be set"

    connect_args: Dict[str, Any] = {}
    pool_args: Dict[str, Any] = {}
    if cfg.is_sqlite:
        # Requis pour SQLite quand utilisé dans un app serveur (multi-threads)
        connect_args["check_same_thread"] = False
    else:
        # Pool borné partagé par toutes les requêtes
        pool_args = {
            "pool_size": cfg.DB_POOL_SIZE,
            "max_overflow": cfg.DB_MAX_OVERFLOW,
            "pool_timeout": cfg.DB_POOL_TIMEOUT,
            "pool_pre_ping": True,
        }

    return create_engine(
        url,
        echo=cfg.SQL_ECHO,
        connect_args=connect_args,
        **pool_args,
    )

engine: Engine = build_engine()

def init_db(bind: Optional[Engine] = None) -> None:
    """
    Crée les tables si elles n'existent pas.
    Pas de migrations : le schéma se limite à la table task.
    """
    SQLModel.metadata.create_all(bind or engine)


def get_session():
    """
    Dépendance FastAPI : fournit une session par requête.
    expire_on_commit=False : les objets renvoyés restent lisibles après commit
    (indispensable pour renvoyer une tâche supprimée).
    """
    with Session(engine, expire_on_commit=False) as session:
        yield session
