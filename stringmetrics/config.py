"""Configuration de la bibliothèque de métriques."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Configuration de l'application."""

    # Métrique utilisée quand aucun nom n'est fourni à get_metric()
    DEFAULT_METRIC: str = "levenshtein"

    # Logs
    LOG_LEVEL: str = "WARNING"
    LOG_TO_FILE: bool = False
    LOG_DIR: str = "logs"
    LOG_RETENTION: str = "30 days"

    class Config:
        env_file = ".env"
        env_prefix = "STRINGMETRICS_"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
