"""Tests for selection_list.config.

Covers:
- Default values
- Environment variable loading (monkeypatch os.environ)
- resolve_config merge logic and immutability of the defaults
- Unknown fields and invalid values raise ConfigValidationError
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from selection_list.config import SelectionListConfig, resolve_config
from selection_list.exceptions import ConfigValidationError


class TestSelectionListConfigDefaults:
    """Verify the default values."""

    def test_logging_defaults(self, default_config: SelectionListConfig) -> None:
        assert default_config.log_level == "summary"
        assert default_config.diagnostic_mode is False

    def test_decoding_defaults(self, default_config: SelectionListConfig) -> None:
        assert default_config.decode_strict is False
        assert default_config.decode_max_items == 0

    def test_invalid_log_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SelectionListConfig(_env_file=None, log_level="verbose")


class TestEnvironmentLoading:
    """Environment variables with the SELECTION_LIST_ prefix override defaults."""

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SELECTION_LIST_LOG_LEVEL", "full")
        monkeypatch.setenv("SELECTION_LIST_DECODE_STRICT", "true")
        monkeypatch.setenv("SELECTION_LIST_DECODE_MAX_ITEMS", "10")
        cfg = SelectionListConfig(_env_file=None)
        assert cfg.log_level == "full"
        assert cfg.decode_strict is True
        assert cfg.decode_max_items == 10

    def test_init_kwargs_beat_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SELECTION_LIST_LOG_LEVEL", "full")
        cfg = SelectionListConfig(_env_file=None, log_level="none")
        assert cfg.log_level == "none"

    def test_unprefixed_env_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "full")
        assert SelectionListConfig(_env_file=None).log_level == "summary"


class TestResolveConfig:
    """Tests for resolve_config merge logic."""

    def test_none_overrides_returns_defaults(self, default_config: SelectionListConfig) -> None:
        assert resolve_config(default_config, None) is default_config

    def test_empty_overrides_returns_defaults(self, default_config: SelectionListConfig) -> None:
        assert resolve_config(default_config, {}) is default_config

    def test_override_fields(self, default_config: SelectionListConfig) -> None:
        result = resolve_config(default_config, {"decode_strict": True, "log_level": "none"})
        assert result.decode_strict is True
        assert result.log_level == "none"
        assert result.decode_max_items == default_config.decode_max_items

    def test_returns_new_instance(self, default_config: SelectionListConfig) -> None:
        result = resolve_config(default_config, {"decode_max_items": 5})
        assert result is not default_config
        assert default_config.decode_max_items == 0

    def test_values_are_coerced(self, default_config: SelectionListConfig) -> None:
        result = resolve_config(default_config, {"decode_max_items": "7"})
        assert result.decode_max_items == 7

    def test_unknown_field_rejected(self, default_config: SelectionListConfig) -> None:
        with pytest.raises(ConfigValidationError, match="Unknown config field"):
            resolve_config(default_config, {"no_such_field": 1})

    def test_invalid_value_rejected(self, default_config: SelectionListConfig) -> None:
        with pytest.raises(ConfigValidationError, match="decode_max_items"):
            resolve_config(default_config, {"decode_max_items": "many"})

    def test_invalid_log_level_rejected(self, default_config: SelectionListConfig) -> None:
        with pytest.raises(ConfigValidationError, match="log_level"):
            resolve_config(default_config, {"log_level": "loud"})
