# app/core/logging_setup.py

import logging
import sys

_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", *, sql_echo: bool = False) -> None:
    """
    Configure le logging racine : un seul handler stderr, format horodaté.

    À appeler UNE fois, au démarrage (avant le premier logger.info).
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    # Évite les doublons si appelé plusieurs fois (reload uvicorn, tests)
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
    root.addHandler(handler)

    # SQLAlchemy est très bavard : INFO seulement si SQL_ECHO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if sql_echo else logging.WARNING)

    logging.captureWarnings(True)
