from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Process-wide configuration for the marketplace service.

    Loaded once from environment variables and an optional ``.env`` file.
    A missing ``ORS_API_KEY`` is allowed: delivery estimates then degrade to
    the fixed fallback response instead of failing.
    """

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Application
    app_env: str = "development"
    log_level: Optional[str] = None
    log_dir: str = "logs"

    # Routing provider (OpenRouteService walking directions)
    routing_adapter: str = "openrouteservice"
    ors_api_key: Optional[str] = None
    ors_base_url: str = "https://api.openrouteservice.org/v2/directions/foot-walking/geojson"

    # Checkout defaults
    default_campus: str = "ADMU"
    default_pickup: str = "Gate 2.5"

    # Catalogue
    product_page_size: int = 60

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Return the AppConfig instance (singleton pattern)."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config


def set_config_for_test(**kwargs) -> AppConfig:
    """For testing only: override the AppConfig instance with new values."""
    global _config
    _config = AppConfig(**kwargs)
    return _config
