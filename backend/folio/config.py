"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # Holdings view defaults
    default_value_in: str = "PORTFOLIO"
    default_group_by: str = "ASSET_CLASS"
    hide_empty: bool = False

    # Raise instead of warn when contributors to one total disagree on currency
    strict_currency: bool = False

    # Application
    log_level: str = "INFO"
    debug: bool = False

    # CORS
    allowed_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )


settings = Settings()
