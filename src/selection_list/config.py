"""Configuration system for selection-list.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (SELECTION_LIST_*) -> .env file -> field defaults.

Overrides are applied via resolve_config() which creates a new config
instance without mutating the defaults.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from selection_list.exceptions import ConfigValidationError

LogLevel = Literal["none", "summary", "full"]

# All known config field names (populated after class definition).
_ALL_FIELDS: frozenset[str] = frozenset()


class SelectionListConfig(BaseSettings):
    """Configuration for selection-list.

    Resolution order: init kwargs -> env vars (SELECTION_LIST_*) -> .env file -> defaults.

    Only the host-facing layers read it: the decoders and the transition
    logger. Selection values themselves carry no configuration.
    """

    model_config = SettingsConfigDict(
        env_prefix="SELECTION_LIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Logging ---

    log_level: LogLevel = Field(
        default="summary",
        description="Transition logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all transition records in memory for analysis",
    )

    # --- Decoding ---

    decode_strict: bool = Field(
        default=False,
        description="Validate decoded elements in pydantic strict mode (no coercion)",
    )
    decode_max_items: int = Field(
        default=0,
        description="Maximum number of elements accepted by a decoder (<=0 disables)",
    )


_ALL_FIELDS = frozenset(SelectionListConfig.model_fields.keys())


def resolve_config(
    defaults: SelectionListConfig,
    overrides: dict[str, Any] | None,
) -> SelectionListConfig:
    """Create a new config instance merging defaults with overrides.

    Args:
        defaults: The base configuration, usually loaded from the environment.
        overrides: Field names mapped to new values.

    Returns:
        A new SelectionListConfig with overrides applied, or *defaults*
        itself when there is nothing to override.

    Raises:
        ConfigValidationError: If a key is unknown or a value fails validation.
    """
    if not overrides:
        return defaults

    for key in overrides:
        if key not in _ALL_FIELDS:
            raise ConfigValidationError(f"Unknown config field: '{key}'")

    # model_copy(update=...) skips validation; model_validate coerces and checks.
    merged = defaults.model_dump()
    merged.update(overrides)
    try:
        return SelectionListConfig.model_validate(merged)
    except ValidationError as exc:
        fields = ", ".join(str(err["loc"][0]) for err in exc.errors() if err["loc"])
        raise ConfigValidationError(f"Invalid value for config field(s) {fields}: {exc}") from exc
