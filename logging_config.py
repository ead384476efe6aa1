"""
cosme-review-api/logging_config.py
Configuration du logging (console colorée optionnelle, fichier optionnel)
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

APP_LOGGER = "cosme_review"

# Loggers tiers redirigés vers nos handlers
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


class ColoredFormatter(logging.Formatter):
    """Colore le niveau de log pour le terminal"""

    LEVEL_COLORS = {
        logging.DEBUG: "36",      # cyan
        logging.INFO: "32",       # vert
        logging.WARNING: "33",    # jaune
        logging.ERROR: "31",      # rouge
        logging.CRITICAL: "1;31", # rouge gras
    }

    def formatMessage(self, record):
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().formatMessage(record)
        # Copie : le même record passe aussi par le handler fichier
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"\033[{color}m{record.levelname}\033[0m"
        return super().formatMessage(colored)


def _plain_formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None, colored: bool = False):
    """Configure le logging racine et retourne le logger de l'application"""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(
        ColoredFormatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT) if colored else _plain_formatter()
    )
    handlers = [console]

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(_plain_formatter())
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.setLevel(level)
        uvicorn_logger.propagate = True

    # Requêtes SQL visibles uniquement en DEBUG
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if level <= logging.DEBUG else logging.WARNING
    )
    # passlib signale bruyamment la version de bcrypt
    logging.getLogger("passlib").setLevel(logging.ERROR)

    logger = logging.getLogger(APP_LOGGER)
    logger.info(f"✅ Logging configured (level={logging.getLevelName(level)}, colored={colored})")
    return logger


def get_uvicorn_log_config(log_level: str = "INFO"):
    """dictConfig pour uvicorn.run : même format que l'application"""
    level = log_level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT, "datefmt": LOG_DATE_FORMAT},
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            name: {"handlers": ["default"], "level": level, "propagate": False}
            for name in UVICORN_LOGGERS
        },
    }
