"""Configuration loading, saving, and management."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Callable

import tomli_w

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from clocktime.constants import DEFAULT_TIME_FORMAT
from clocktime.grammar import parse_format


@dataclass
class DisplayDefaults:
    time_format: str = DEFAULT_TIME_FORMAT


@dataclass
class ClockDefaults:
    now_offset_minutes: int = 0


@dataclass
class ClocktimeConfig:
    display: DisplayDefaults = field(default_factory=DisplayDefaults)
    clock: ClockDefaults = field(default_factory=ClockDefaults)

    @classmethod
    def load(cls, config_path: Path | None = None) -> ClocktimeConfig:
        """Load config from TOML file, falling back to defaults for missing keys.

        Raises ValueError when a value in the file fails validation.
        """
        config = cls()
        if config_path is None or not config_path.exists():
            return config

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        for section_field in fields(config):
            section = getattr(config, section_field.name)
            for k, v in data.get(section_field.name, {}).items():
                if hasattr(section, k):
                    config.set(f"{section_field.name}.{k}", v)

        return config

    def save(self, config_path: Path) -> None:
        """Write current config to TOML file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)
        data = self._to_dict()
        with open(config_path, "wb") as f:
            tomli_w.dump(data, f)

    def get(self, key: str) -> Any:
        """Get a config value by dotted key (e.g., 'display.time_format')."""
        obj, name = self._resolve(key)
        return getattr(obj, name)

    def set(self, key: str, value: Any) -> None:
        """Set a config value by dotted key."""
        obj, name = self._resolve(key)

        # Coerce value to match the field type
        current = getattr(obj, name)
        coerced = _coerce_value(value, current, key)
        _validate_value(key, coerced)
        setattr(obj, name, coerced)

    def now_source(self, base: Callable[[], datetime] = datetime.now) -> Callable[[], datetime]:
        """Return a "now" callable shifted by clock.now_offset_minutes."""
        offset = timedelta(minutes=self.clock.now_offset_minutes)
        if not offset:
            return base
        return lambda: base() + offset

    def _resolve(self, key: str) -> tuple[Any, str]:
        section, _, name = key.partition(".")
        if not name:
            raise KeyError(f"Invalid key format: {key!r}. Use 'section.key' (e.g., 'display.time_format')")
        obj = getattr(self, section, None)
        if obj is None or section.startswith("_"):
            raise KeyError(f"Unknown config section: {section!r}")
        if not hasattr(obj, name):
            raise KeyError(f"Unknown config key: {key!r}")
        return obj, name

    def _to_dict(self) -> dict:
        """Convert config to a nested dict for TOML serialization."""
        result = {}
        for section_field in fields(self):
            section_obj = getattr(self, section_field.name)
            section_dict = {}
            for f in fields(section_obj):
                section_dict[f.name] = getattr(section_obj, f.name)
            result[section_field.name] = section_dict
        return result


def _coerce_value(value: Any, current: Any, key: str) -> Any:
    """Coerce a string value to match the type of the current value."""
    if isinstance(value, str) and isinstance(current, int):
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"Cannot convert {value!r} to int for key {key!r}") from None
    return value


def _validate_value(key: str, value: Any) -> None:
    """Validate a config value."""
    if key == "display.time_format" and (not isinstance(value, str) or parse_format(value) is None):
        raise ValueError(f"Invalid time format: {value!r}. Expected something like 'h:mm am'")
    if key == "clock.now_offset_minutes" and (isinstance(value, bool) or not isinstance(value, int)):
        raise ValueError(f"now_offset_minutes must be an integer, got {value!r}")
    if key == "clock.now_offset_minutes" and abs(value) >= 24 * 60:
        raise ValueError(f"now_offset_minutes must be within a day, got {value}")
