"""
Configuration de l'application - Settings Pydantic.

Responsabilite unique:
----------------------
Charger et valider la configuration depuis les variables d'environnement
et le fichier .env (lu au demarrage).

Variables:
----------
- DATABASE_URL: Chaine de connexion SQLAlchemy (defaut: SQLite local)
- LOG_LEVEL: Niveau de log (DEBUG, INFO, WARNING, ERROR)
- JSON_LOGS: Logs JSON (production) au lieu de la console
- SEED_DATA: Inserer des donnees de demonstration si la base est vide
- API_PREFIX: Prefixe des routes (defaut: /api/v1)
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Configuration du portail.

    Chargee depuis les variables d'environnement puis le fichier .env.

    Example:
        >>> settings = Settings(database_url="sqlite://", log_level="debug")
        >>> settings.log_level
        'DEBUG'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Persistance
    database_url: str = "sqlite:///./portal.db"
    seed_data: bool = True

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    # API
    api_title: str = "Contributor Portal API"
    api_version: str = "1.0.0"
    api_prefix: str = "/api/v1"

    # CORS
    cors_origins: list[str] = ["*"]

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level invalide: '{value}' ({', '.join(VALID_LOG_LEVELS)})"
            )
        return level


@lru_cache
def get_settings() -> Settings:
    """Retourne la configuration (cached)."""
    return Settings()
