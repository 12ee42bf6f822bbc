"""
Configuration management for SocialQL backend
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = Field(
        default=4000,
        validation_alias=AliasChoices("SOCIALQL_API_PORT", "PORT"),
    )
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # GraphQL
    graphiql: bool = True  # Interactive explorer mounted at /graphql

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "SOCIALQL_"
        case_sensitive = False
        populate_by_name = True
        extra = "ignore"


# Global settings instance
settings = Settings()

# Debug: Log settings initialization (only in debug mode)
if settings.debug:
    from .logging import get_logger

    _logger = get_logger(__name__)
    _logger.debug(
        "Settings initialized",
        api_port=settings.api_port,
        environment=settings.environment,
    )
