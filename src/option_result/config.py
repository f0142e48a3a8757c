"""Configuration for option_result.

Runtime knobs that do not change combinator semantics:
- Whether the type-name heuristic in ``Result.from_value`` warns
- Whether ``Result.try_call`` also captures non-``Exception`` faults
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class ContainerSettings(BaseSettings):
    """Library settings.

    All settings can be overridden via environment variables with the
    OPTION_RESULT_ prefix.
    Example: OPTION_RESULT_WARN_ON_HEURISTIC_FROM=false
    """

    model_config = {"env_prefix": "OPTION_RESULT_"}

    warn_on_heuristic_from: bool = Field(
        default=True,
        description="Emit a DeprecationWarning when Result.from_value classifies by type name",
    )
    capture_base_exceptions: bool = Field(
        default=False,
        description="Let Result.try_call capture BaseException, not only Exception",
    )


class SettingsPresets:
    """Settings presets for tests and embedding applications."""

    @staticmethod
    def default() -> ContainerSettings:
        """Create settings with every default applied."""
        return ContainerSettings()

    @staticmethod
    def with_overrides(**kwargs: object) -> ContainerSettings:
        """Create settings with specific overrides."""
        return ContainerSettings(**kwargs)  # type: ignore[arg-type]


_active: Optional[ContainerSettings] = None


def get_settings() -> ContainerSettings:
    """Return the active settings, reading the environment on first use."""
    global _active
    if _active is None:
        _active = ContainerSettings()
    return _active


def configure(settings: Optional[ContainerSettings] = None) -> ContainerSettings:
    """Install ``settings`` as the active settings.

    Passing ``None`` drops the current settings so the next ``get_settings()``
    call re-reads the environment.
    """
    global _active
    _active = settings
    return get_settings()
