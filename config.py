"""
cosme-review-api/config.py
Configuration de l'application (variables d'environnement)
"""

import os
from typing import List


class ConfigError(RuntimeError):
    """Configuration invalide ou incomplète (erreur fatale au démarrage)"""


def _get_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _get_list(name: str, default: str) -> List[str]:
    value = os.getenv(name, default)
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    """Configuration chargée depuis l'environnement"""

    def __init__(self):
        # JWT
        self.jwt_secret_key: str = os.getenv("JWT_SECRET", "")
        if not self.jwt_secret_key:
            raise ConfigError("JWT_SECRET environment variable is required")
        self.jwt_algorithm: str = os.getenv("JWT_ALGORITHM", "HS256")
        # 24 heures
        self.jwt_expire_minutes: int = int(os.getenv("JWT_EXPIRE_MINUTES", "1440"))

        # Base de données
        self.database_url: str = os.getenv("DATABASE_URL", "sqlite:///./cosme_review.db")
        self.seed_demo_data: bool = _get_bool("SEED_DEMO_DATA", False)

        # HTTP
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = int(os.getenv("PORT", "8000"))
        self.reload: bool = _get_bool("RELOAD", False)
        self.cors_origins: List[str] = _get_list("CORS_ORIGINS", "*")

        # Logging
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")
        self.log_colored: bool = _get_bool("LOG_COLORED", False)
        self.log_file_enabled: bool = _get_bool("LOG_FILE_ENABLED", False)
        self.log_file_path: str = os.getenv("LOG_FILE_PATH", "logs/cosme-review-api.log")
