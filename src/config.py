"""Environment-driven configuration for the demo entrypoint.

`load_config()` reads `.env` (existing process variables win) and the
`TD_*` environment variables into a validated `Config`. The client settings
model itself lives in `treasuredata.config` so the library never depends on
a top-level `config` module.
"""

import os

import dotenv
from pydantic import BaseModel, Field

from treasuredata.config import DEFAULT_ENDPOINT, TreasureDataConfig

_TRUE_WORDS = {"true", "1", "yes", "y", "on"}
_FALSE_WORDS = {"false", "0", "no", "n", "off"}


def _get_required_env(name: str) -> str:
    """Return a non-empty, non-placeholder env var or raise ValueError."""
    value = os.getenv(name, "").strip()
    if not value:
        raise ValueError(f"{name} is required. Please set it in your .env file.")
    if value.startswith("your_") and value.endswith("_here"):
        raise ValueError(f"{name} still holds the placeholder from env_example.env.")
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE_WORDS:
        return True
    if raw in _FALSE_WORDS:
        return False
    raise ValueError(f"{name} must be a boolean (true/false). Got: {raw!r}")


def _get_env_float(name: str, default: float) -> float:
    """Read a float env var with a default."""
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a float. Got: {raw!r}") from exc


class Config(BaseModel):
    """Top-level application configuration."""

    treasuredata: TreasureDataConfig = Field(..., description="Treasure Data configuration")


def load_config() -> Config:
    """Build a `Config` from `TD_API_KEY`, `TD_ENDPOINT`, `TD_DEBUG` and `TD_TIMEOUT`.

    Raises `ValueError` naming the offending variable when a value is missing
    or malformed.
    """
    dotenv.load_dotenv()

    treasuredata = TreasureDataConfig(
        api_key=_get_required_env("TD_API_KEY"),
        endpoint=os.getenv("TD_ENDPOINT", "").strip() or DEFAULT_ENDPOINT,
        debug=_get_env_bool("TD_DEBUG", False),
        timeout=_get_env_float("TD_TIMEOUT", 30.0),
    )
    return Config(treasuredata=treasuredata)
