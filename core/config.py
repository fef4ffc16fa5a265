# core/config.py
from __future__ import annotations

import logging
from dataclasses import dataclass, asdict, replace
from typing import Any, Optional, Union

from core.units import DISTANCE, RESULT_TIME, TIME, DistanceUnit, ResultTimeUnit, TimeUnit

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(RuntimeError):
    pass


@dataclass(frozen=True)
class FormSettings:
    """Initial selections and labels for the travel-time form."""
    distance_unit: Union[DistanceUnit, str] = DistanceUnit.METER
    input_time_unit: Union[TimeUnit, str] = TimeUnit.SECOND
    output_time_unit: Union[ResultTimeUnit, str] = ResultTimeUnit.SECONDS
    window_title: str = "Time to α Centauri?"
    speed_placeholder: str = "Enter speed..."
    log_level: str = "INFO"

    def __post_init__(self):
        try:
            object.__setattr__(self, "distance_unit", DISTANCE.normalize(self.distance_unit))
            object.__setattr__(self, "input_time_unit", TIME.normalize(self.input_time_unit))
            object.__setattr__(self, "output_time_unit", RESULT_TIME.normalize(self.output_time_unit))
        except ValueError as e:
            raise ConfigError(str(e)) from e

        level = str(self.log_level or "INFO").upper()
        if level not in _LOG_LEVELS:
            raise ConfigError(f"Unknown log level '{self.log_level}'. Options: {list(_LOG_LEVELS)}")
        object.__setattr__(self, "log_level", level)

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    def to_dict(self) -> dict:
        data = asdict(self)
        for key in ("distance_unit", "input_time_unit", "output_time_unit"):
            data[key] = data[key].value
        return data

    @staticmethod
    def from_dict(data: Optional[dict]) -> "FormSettings":
        data = data or {}
        if not isinstance(data, dict):
            raise ConfigError("settings must be a dict.")
        unknown = set(data) - set(FormSettings.__dataclass_fields__)
        if unknown:
            raise ConfigError(f"Unknown settings keys: {sorted(unknown)}")
        return FormSettings(**data)


# Singleton instance
__SETTINGS: Optional[FormSettings] = None

def get_settings() -> FormSettings:
    """Return the global FormSettings instance (creates defaults on first use)."""
    global __SETTINGS
    if __SETTINGS is None:
        __SETTINGS = FormSettings()
    return __SETTINGS

def set_settings(**changes: Any) -> FormSettings:
    """Replace the global settings with a validated copy carrying `changes`."""
    global __SETTINGS
    current = get_settings()
    unknown = set(changes) - set(FormSettings.__dataclass_fields__)
    if unknown:
        raise ConfigError(f"Unknown settings keys: {sorted(unknown)}")
    __SETTINGS = replace(current, **changes)
    return __SETTINGS

def reset_settings() -> FormSettings:
    global __SETTINGS
    __SETTINGS = FormSettings()
    return __SETTINGS
