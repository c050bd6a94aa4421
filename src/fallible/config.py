"""Configuration for fault capture.

Controls which values the computation wrapper treats as faults:
- Raised exceptions are always captured (``Exception`` by default)
- Returned exception objects are captured unless disabled
- Captured faults are logged at DEBUG level unless disabled
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class TryConfig(BaseSettings):
    """Fault capture configuration.

    All settings can be overridden via environment variables with the FALLIBLE_ prefix.
    Example: FALLIBLE_CAPTURE_RETURNED_FAULTS=false
    """

    model_config = {"env_prefix": "FALLIBLE_", "frozen": True}

    capture_returned_faults: bool = Field(
        default=True,
        description="Treat a normally returned exception object as a Failure",
    )
    catch_base_exceptions: bool = Field(
        default=False,
        description="Capture BaseException (KeyboardInterrupt, SystemExit) too",
    )
    log_captured_faults: bool = Field(
        default=True, description="Log every captured fault at DEBUG level"
    )


@lru_cache(maxsize=1)
def default_config() -> TryConfig:
    """Return the process-wide configuration read from the environment."""
    return TryConfig()


class StrictConfig:
    """Configuration presets that only treat raised exceptions as faults.

    A returned exception object is then an ordinary Success value.
    """

    @staticmethod
    def default() -> TryConfig:
        """Create a strict configuration."""
        return TryConfig(capture_returned_faults=False)

    @staticmethod
    def with_overrides(**kwargs: object) -> TryConfig:
        """Create strict config with specific overrides."""
        defaults: dict[str, object] = {"capture_returned_faults": False}
        defaults.update(kwargs)
        return TryConfig(**defaults)  # type: ignore[arg-type]
