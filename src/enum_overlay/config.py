"""
Configuration — Process-wide settings read by the overlay accessors.

Settings are read at call time, so changing them affects every bound
attribute immediately.
"""

import os
from contextlib import contextmanager
from typing import Any, Iterator

from pydantic import BaseModel, Field

from enum_overlay.observability.logging import get_logger
from enum_overlay.vocabulary import UnmappedKeyPolicy

logger = get_logger("config")

ENV_USE_NAME_AS_VALUE = "ENUM_OVERLAY_USE_NAME_AS_VALUE"
ENV_UNMAPPED_KEY_POLICY = "ENUM_OVERLAY_UNMAPPED_KEY_POLICY"

_TRUE_VALUES = {"1", "true", "yes", "on"}


class EnumSettings(BaseModel):
    """Settings for enum-aware accessors."""
    
    use_name_as_value: bool = Field(
        default=False,
        description="Bare reads return the display name instead of the raw code"
    )
    
    unmapped_key_policy: UnmappedKeyPolicy = Field(
        default=UnmappedKeyPolicy.STORE_NONE,
        description="Write behaviour for symbolic keys the table does not know"
    )
    
    model_config = {"frozen": True}
    
    @classmethod
    def from_env(cls) -> "EnumSettings":
        """Build settings from ENUM_OVERLAY_* environment variables."""
        fields: dict[str, Any] = {}
        
        raw_flag = os.environ.get(ENV_USE_NAME_AS_VALUE)
        if raw_flag is not None:
            fields["use_name_as_value"] = raw_flag.strip().lower() in _TRUE_VALUES
        
        raw_policy = os.environ.get(ENV_UNMAPPED_KEY_POLICY)
        if raw_policy:
            fields["unmapped_key_policy"] = raw_policy.strip().lower()
        
        return cls(**fields)


_settings = EnumSettings()


def get_settings() -> EnumSettings:
    """Get current process-wide settings."""
    return _settings


def configure(**fields: Any) -> EnumSettings:
    """
    Replace process-wide settings.
    
    Fields not given keep their current value.
    
    Returns:
        The new settings
    """
    global _settings
    _settings = EnumSettings(**{**_settings.model_dump(), **fields})
    logger.debug(f"Settings updated: {_settings.model_dump(mode='json')}")
    return _settings


def reset_settings() -> None:
    """Restore default settings."""
    global _settings
    _settings = EnumSettings()


@contextmanager
def settings_override(**fields: Any) -> Iterator[EnumSettings]:
    """Apply settings for the duration of a block."""
    global _settings
    previous = _settings
    try:
        yield configure(**fields)
    finally:
        _settings = previous
