from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    min_gestational_weeks: int = 28
    max_gestational_weeks: int = 42

    date_display_format: str = "%m/%d/%Y"
    time_display_format: str = "%I:%M:%S %p"
