"""Application configuration."""

from os import getenv

from pydantic import BaseModel


class Settings(BaseModel):
    """Runtime settings for the menu board service."""

    app_name: str = "menuboard API"
    app_env: str = getenv("APP_ENV", "dev")
    debug: bool = getenv("DEBUG", "0") == "1"
    log_level: str = getenv("LOG_LEVEL", "INFO")
    database_url: str = getenv("DATABASE_URL", "sqlite:///./menuboard.db")
    menu_config_path: str = getenv("MENU_CONFIG_PATH", "config/config.json")
    menu_fallback_csv_path: str = getenv("MENU_FALLBACK_CSV_PATH", "config/fallback_data.csv")
    menu_source_url: str = getenv("MENU_SOURCE_URL", "")
    menu_fetch_timeout_seconds: float = float(getenv("MENU_FETCH_TIMEOUT_SECONDS", "10"))


settings: Settings = Settings()
