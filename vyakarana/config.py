"""
Configuration management for Vyakarana library.

Settings are read from environment variables prefixed with ``VYAKARANA_``
and can be overridden at runtime with configure().

Example:
    export VYAKARANA_ACCURATE_TOKENIZATION=true
    export VYAKARANA_MAX_SUGGESTIONS=5
"""

from typing import Any, Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from vyakarana.exceptions import ConfigurationError


class VyakaranaSettings(BaseSettings):
    """
    Runtime settings for the analysis library.

    The phoneme inventory and affix tables are fixed reference data and are
    not configurable.

    Attributes:
        accurate_tokenization: Default conjunct policy for Devanagari tokenization
        unicode_form: Unicode normalization applied to input text
        max_suggestions: Maximum suggestions offered for unknown affixes
        log_level: Level used by configure_logging() when none is given
    """

    model_config = SettingsConfigDict(
        env_prefix="VYAKARANA_",
        extra="forbid",
        validate_assignment=True,
    )

    accurate_tokenization: bool = Field(
        default=False,
        description="Merge virama-joined consonants into one cluster phoneme",
    )
    unicode_form: Literal["NFC", "NFKC"] = Field(
        default="NFC",
        description="Unicode normalization form applied before analysis",
    )
    max_suggestions: int = Field(
        default=3,
        description="Maximum number of nearest-affix suggestions",
        ge=1,
        le=10,
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Default level for configure_logging()",
    )


_settings: VyakaranaSettings | None = None


def get_settings() -> VyakaranaSettings:
    """
    Get the active settings instance.

    Returns:
        Cached VyakaranaSettings built from the environment on first use
    """
    global _settings
    if _settings is None:
        _settings = VyakaranaSettings()
    return _settings


def configure(**overrides: Any) -> VyakaranaSettings:
    """
    Override settings for the current process.

    Args:
        **overrides: Setting names and their new values

    Returns:
        The new active settings instance

    Raises:
        ConfigurationError: If a setting name is unknown or a value is invalid
    """
    for name in overrides:
        if name not in VyakaranaSettings.model_fields:
            raise ConfigurationError(f"Unknown setting: {name}", setting_name=name)

    current = get_settings().model_dump()
    current.update(overrides)

    try:
        settings = VyakaranaSettings(**current)
    except ValidationError as e:
        first = e.errors()[0]
        field = first["loc"][0] if first["loc"] else None
        raise ConfigurationError(
            f"Invalid configuration value: {first['msg']}",
            setting_name=str(field) if field is not None else None,
        ) from e

    global _settings
    _settings = settings
    return settings


def reset_settings() -> None:
    """Drop any overrides and re-read settings from the environment."""
    global _settings
    _settings = None
