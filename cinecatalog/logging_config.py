"""
Configuration du logging de l'application via loguru.

Fournit un logging structuré avec :
- Sortie console : lisible par l'humain, colorée, pour la surveillance en temps réel
- Sortie fichier : sérialisée en JSON, avec rotation, pour l'analyse historique

Les loggers de la bibliothèque standard utilisés par uvicorn, FastAPI et
SQLAlchemy sont redirigés vers loguru : accès HTTP, erreurs serveur et
requêtes SQL (si sql_echo) arrivent dans les mêmes sinks que les logs métier.
"""

import inspect
import logging
import sys

from loguru import logger

from .config import Settings

# Loggers stdlib redirigés vers loguru
INTERCEPTED_LOGGERS = (
    "uvicorn",
    "uvicorn.error",
    "uvicorn.access",
    "fastapi",
)


class InterceptHandler(logging.Handler):
    """Handler stdlib qui republie chaque enregistrement dans loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Remonter la pile jusqu'à l'appelant réel (hors module logging)
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def intercept_standard_logging(level: str = "INFO", sql_echo: bool = False) -> None:
    """
    Remplace les handlers des loggers uvicorn/FastAPI/SQLAlchemy par InterceptHandler.

    SQLAlchemy journalise chaque requete au niveau INFO : son logger reste
    en WARNING sauf si sql_echo est active.
    """
    handler = InterceptHandler()
    levels = {name: level for name in INTERCEPTED_LOGGERS}
    levels["sqlalchemy.engine"] = "INFO" if sql_echo else "WARNING"
    for name, logger_level in levels.items():
        std_logger = logging.getLogger(name)
        std_logger.handlers = [handler]
        std_logger.propagate = False
        std_logger.setLevel(logger_level)


def configure_logging(settings: Settings) -> None:
    """Configure le logging de l'application à partir des Settings.

    Utilise log_level (console), log_file, log_rotation_size et
    log_retention_count (fichier JSON), puis redirige les loggers stdlib.
    """
    # Supprime le handler par défaut
    logger.remove()

    # Handler console - lisible par l'humain
    logger.add(
        sys.stderr,
        level=settings.log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    # Handler fichier - JSON, contient les traces des erreurs de persistance
    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,  # Thread-safe (handlers exécutés dans le threadpool)
    )

    intercept_standard_logging(settings.log_level, sql_echo=settings.sql_echo)

    logger.debug(
        "Logging configuré",
        log_file=str(settings.log_file),
        rotation=settings.log_rotation_size,
    )
