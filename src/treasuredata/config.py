"""Client settings for the Treasure Data Postback API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ENDPOINT = "https://in.treasuredata.com"
WRITE_KEY_HEADER = "X-TD-Write-Key"


class TreasureDataConfig(BaseModel):
    """Configuration for posting records to the Treasure Data Postback API."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(..., description="Treasure Data write-only API key")
    endpoint: str = Field(default=DEFAULT_ENDPOINT, description="Postback API host")
    debug: bool = Field(default=False, description="Log request/response lifecycle events")
    timeout: float = Field(default=30.0, description="Transport timeout (seconds)")

    @property
    def headers(self) -> dict[str, str]:
        """Headers sent with every postback request (a fresh dict per call)."""
        return {
            "Content-Type": "application/json",
            WRITE_KEY_HEADER: self.api_key,
        }

    @field_validator("api_key")
    def validate_api_key(cls, v: str) -> str:
        """Validate api key is set (not empty/placeholder)."""
        if not v or v == "your_td_write_key_here":
            raise ValueError("TD_API_KEY is required. Please set it in your .env file.")
        return v

    @field_validator("timeout")
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"timeout must be > 0. Got: {v}")
        return v
