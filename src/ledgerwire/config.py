"""Client configuration loaded from environment variables."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.increase.com"
SANDBOX_BASE_URL = "https://sandbox.increase.com"


class ClientSettings(BaseSettings):
    """IncreaseClient settings (INCREASE_API_KEY, INCREASE_BASE_URL, ...)."""

    model_config = SettingsConfigDict(
        env_prefix="INCREASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL

    # HTTP
    timeout_seconds: float = 60.0
    user_agent: str = "ledgerwire"
