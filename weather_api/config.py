"""
Application settings from environment variables (prefixed WEATHER_).
"""
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

RESOURCES_DIR = Path(__file__).parent / "resources"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WEATHER_")

    # Data
    data_path: Path = RESOURCES_DIR / "seattle-weather.csv"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["*"]


settings = Settings()
