"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Calculator defaults and logging configuration from environment variables."""

    default_tax_year: int = 2025
    default_province: str = "ON"
    log_level: str = "INFO"

    model_config = {"env_prefix": "CANTAX_", "env_file": ".env", "extra": "ignore"}


settings = Settings()
