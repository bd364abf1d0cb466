"""
Configuration management for the Catstronomy API
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Track catalogue REST API
    tracks_api_url: str = "https://odyssey-lift-off-rest-api.herokuapp.com/"
    http_timeout: float = 10.0  # seconds, applies to every outgoing fetch

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]
    graphiql: bool = True

    # Environment
    debug: bool = True
    log_level: str | None = None  # e.g. "warning"; unset means DEBUG when debug else INFO

    class Config:
        env_file = ".env"
        env_prefix = "CATSTRONOMY_"
        case_sensitive = False


# Global settings instance
settings = Settings()
