from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional

from formbridge.core.errors import ConfigurationError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Webflow credentials - must be provided via environment variables
    webflow_api_token: Optional[str] = None
    webflow_collection_id: Optional[str] = None
    webflow_api_base_url: str = "https://api.webflow.com/v2"

    log_level: str = "INFO"

    @property
    def webflow_configured(self) -> bool:
        return bool(self.webflow_api_token and self.webflow_collection_id)

    def require_webflow(self) -> tuple[str, str]:
        """Get the (api token, collection id) pair, raising if either is missing"""
        if not self.webflow_configured:
            raise ConfigurationError("Missing Webflow API configuration")
        return self.webflow_api_token, self.webflow_collection_id


@lru_cache
def get_settings():
    return Settings()
