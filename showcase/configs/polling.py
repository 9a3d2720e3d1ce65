"""
Upload client configuration.

Settings for the client-side upload orchestrator: where the API lives
and how the status endpoint is polled.

Dependencies: pydantic_settings
System role: Client polling policy configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PollingSettings(BaseSettings):
    """Polling policy for the upload orchestrator."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="POLLING_",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(
        default="http://localhost:8000",
        description="Base URL of the showcase API",
    )
    interval_seconds: float = Field(
        default=2.5,
        gt=0,
        description="Delay between the end of one status check and the next",
    )
    max_attempts: int = Field(
        default=20,
        ge=1,
        description="Maximum status checks before giving up",
    )
    success_reset_delay: float = Field(
        default=2.0,
        ge=0,
        description="Seconds the success state is shown before returning to idle",
    )
    request_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Per-request HTTP timeout in seconds",
    )
