"""
➡️ But : Centraliser tous les paramètres configurables (nom d’app, base de données, port, CORS, logs).

Utilise pydantic-settings pour charger automatiquement les variables d’environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from app.core.config import settings
print(settings.APP_NAME)


🔹 Avantages :

Plus propre que des constantes éparpillées dans le code.

Facilite le passage entre environnements (dev / prod / test).
"""

from typing import List, Optional

from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Task-Manager"
    ENV: str = "dev"  # dev | prod | test
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    API_PREFIX: str = ""  # ex: "/api" si le front passe par un proxy

    # -----------------------------
    # DB
    # -----------------------------
    # Postgres si DB_HOST est défini, sinon fallback SQLite (dev).
    DB_HOST: Optional[str] = None
    DB_PORT: int = 5432
    DB_USER: Optional[str] = None
    DB_PASSWORD: Optional[str] = None
    DB_DATABASE: Optional[str] = None

    SQLITE_PATH: str = "tasks.db"
    # Prioritaire sur tout le reste si défini dans l'env.
    DATABASE_URL: Optional[str] = None

    # Pool de connexions (ignoré pour SQLite)
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 0
    DB_POOL_TIMEOUT: float = 30.0

    SQL_ECHO: bool = False

    # -----------------------------
    # HTTP / Logs
    # -----------------------------
    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }

    # -----------------------------
    # Post-process values
    # -----------------------------
    def model_post_init(self, __context): # appelée automatiquement
        if not self.DATABASE_URL:
            object.__setattr__(self, "DATABASE_URL", self._default_database_url())

    def _default_database_url(self) -> str:
        if self.DB_HOST:
            # URL.create échappe user/password (caractères spéciaux)
            url = URL.create(
                "postgresql+psycopg2",
                username=self.DB_USER,
                password=self.DB_PASSWORD,
                host=self.DB_HOST,
                port=self.DB_PORT,
                database=self.DB_DATABASE,
            )
            return url.render_as_string(hide_password=False)
        return f"sqlite:///{self.SQLITE_PATH}"

    @property
    def is_sqlite(self) -> bool:
        return bool(self.DATABASE_URL) and self.DATABASE_URL.startswith("sqlite:")


# Instance globale importable partout
settings = Settings()
