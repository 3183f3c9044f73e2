"""
Configuration management for GeoQL
"""

from pydantic_settings import BaseSettings

from .database.models import ReferentialPolicy


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]
    graphiql: bool = True  # GraphiQL explorer at /graphql

    # Store
    referential_policy: ReferentialPolicy = ReferentialPolicy.ALLOW_DANGLING
    seed_data: bool = True

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "GEOQL_"
        case_sensitive = False


# Global settings instance
settings = Settings()

if settings.debug:
    from .logging import get_logger

    _logger = get_logger(__name__)
    _logger.debug(
        "Settings initialized",
        environment=settings.environment,
        referential_policy=settings.referential_policy.value,
    )
