# core/units.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Tuple, Type, Union


class TimeUnit(str, Enum):
    SECOND = "second"
    HOUR = "hour"
    DAY = "day"
    YEAR = "year"


class ResultTimeUnit(str, Enum):
    SECONDS = "seconds"
    HOURS = "hours"
    DAYS = "days"
    YEARS = "years"


class DistanceUnit(str, Enum):
    METER = "meter"
    KILOMETER = "kilometer"


@dataclass(frozen=True)
class Unit:
    symbol: str
    to_base: float

    def __post_init__(self):
        if not self.to_base > 0:
            raise ValueError(f"Scale factor for '{self.symbol}' must be positive, got {self.to_base}")


UnitKey = Union[Enum, str]


class UnitRegistry:
    """
    Read-only table of scale factors keyed by a closed Enum.
    Every member must have a factor; unknown keys raise instead of defaulting.
    """

    def __init__(self, keys: Type[Enum], factors: Mapping[str, float], *, base_symbol: str):
        self._keys = keys
        units: Dict[Enum, Unit] = {}
        for member in keys:
            if member.value not in factors:
                raise ValueError(f"Missing scale factor for unit '{member.value}'")
            units[member] = Unit(member.value, float(factors[member.value]))
        extra = set(factors) - {m.value for m in keys}
        if extra:
            raise ValueError(f"Unknown unit keys in table: {sorted(extra)}")
        self._units: Mapping[Enum, Unit] = MappingProxyType(units)
        self._base = self.normalize(base_symbol)

    @property
    def keys(self) -> Type[Enum]:
        return self._keys

    @property
    def base(self) -> Enum:
        return self._base

    def normalize(self, u: UnitKey) -> Enum:
        if isinstance(u, self._keys):
            return u
        raw = u.value if isinstance(u, Enum) else u
        try:
            return self._keys(str(raw).strip().lower())
        except ValueError as e:
            raise ValueError(
                f"Unknown unit '{u}'. Options: {[m.value for m in self._keys]}"
            ) from e

    def unit(self, u: UnitKey) -> Unit:
        return self._units[self.normalize(u)]

    def scale(self, u: UnitKey) -> float:
        return self.unit(u).to_base

    def members(self) -> Tuple[Enum, ...]:
        """Members ordered by ascending scale factor (picker order)."""
        return tuple(sorted(self._units, key=lambda m: self._units[m].to_base))

    def symbols(self) -> Tuple[str, ...]:
        return tuple(m.value for m in self.members())

    def __contains__(self, u: object) -> bool:
        try:
            self.normalize(u)  # type: ignore[arg-type]
        except ValueError:
            return False
        return True

    def __len__(self) -> int:
        return len(self._units)


# Time (base: second)
TIME = UnitRegistry(
    TimeUnit,
    {"second": 1, "hour": 3600, "day": 86400, "year": 31_536_000},
    base_symbol="second",
)

# Result time (base: seconds), plural names shown next to the result
RESULT_TIME = UnitRegistry(
    ResultTimeUnit,
    {"seconds": 1, "hours": 3600, "days": 86400, "years": 31_536_000},
    base_symbol="seconds",
)

# Distance (base: meter)
DISTANCE = UnitRegistry(
    DistanceUnit,
    {"meter": 1, "kilometer": 1000},
    base_symbol="meter",
)
