"""
This module contains configuration settings for the application.
"""

from functools import lru_cache
from typing import Optional, List

from pydantic_settings import BaseSettings, SettingsConfigDict

from cwa_weather.definitions.data_sources import DEFAULT_DATASET_ID


class Settings(BaseSettings):
    """
    Application configuration using Pydantic BaseSettings.

    Loaded once from the environment (and an optional ``.env`` file) and
    frozen afterwards, so the same instance can be handed to every client.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", frozen=True
    )

    # Application settings
    app_name: str = "CWA Weather Proxy API"
    app_version: str = "1.0.0"
    environment: str = "development"
    log_level: str = "INFO"

    # Server settings
    host: str = "0.0.0.0"
    port: int = 3000

    # CWA open data API settings
    cwa_api_key: Optional[str] = None
    cwa_api_base_url: str = "https://opendata.cwa.gov.tw/api"
    cwa_dataset_id: str = DEFAULT_DATASET_ID
    cwa_api_timeout: int = 10

    # Error reporting
    collapse_error_status: bool = False

    # CORS settings
    cors_origins: List[str] = ["*"]
    cors_allow_credentials: bool = False
    cors_allow_methods: List[str] = ["*"]
    cors_allow_headers: List[str] = ["*"]

    @property
    def forecast_url(self) -> str:
        """
        Full URL of the forecast dataset endpoint.
        """
        base_url = self.cwa_api_base_url.rstrip("/")
        return f"{base_url}/v1/rest/datastore/{self.cwa_dataset_id}"


@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings.
    """
    return Settings()
