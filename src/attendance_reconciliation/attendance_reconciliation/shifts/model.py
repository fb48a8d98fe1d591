from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from typing import Any, Mapping

from ..common.datetime_utils import parse_clock, parse_iso_date
from ..core import constants
from ..core.exceptions import ConfigurationError
from .interval import ClockInterval, day_segments


@dataclass(frozen=True)
class LunchRule:
    """Unpaid lunch: `minutes` taken somewhere inside [window_start, window_end)."""

    window_start: time = time(12, 0)
    window_end: time = time(15, 0)
    minutes: int = constants.DEFAULT_LUNCH_MINUTES

    def window(self) -> ClockInterval:
        return ClockInterval.between(self.window_start, self.window_end)


@dataclass(frozen=True)
class ShiftConfiguration:
    """Regulatory and scheduling parameters for classification and punctuality.

    Thresholds are expressed in minutes. `tier1_threshold_minutes` and
    `tier2_threshold_minutes` are cumulative minutes of excess over the
    standard shift: excess up to tier 1 is recargo 25%, up to tier 2 is
    suplementario 50%, beyond tier 2 is extraordinario 100%.
    """

    version: str = "default"
    standard_shift_minutes: int = constants.DEFAULT_STANDARD_SHIFT_MINUTES
    tier1_threshold_minutes: int = constants.DEFAULT_TIER1_THRESHOLD_MINUTES
    tier2_threshold_minutes: int = constants.DEFAULT_TIER2_THRESHOLD_MINUTES
    night_start: time = time(22, 0)
    night_end: time = time(6, 0)
    lunch: LunchRule = field(default_factory=LunchRule)
    shift_start: time = time(8, 0)
    shift_end: time = time(17, 0)
    grace_minutes: int = constants.DEFAULT_LATE_GRACE_MINUTES
    rest_weekdays: frozenset[int] = frozenset(constants.DEFAULT_REST_WEEKDAYS)
    holidays: frozenset[date] = frozenset()
    administrative_minimum_minutes: int = constants.DEFAULT_ADMINISTRATIVE_MINIMUM_MINUTES

    def __post_init__(self) -> None:
        if self.standard_shift_minutes <= 0:
            raise ConfigurationError("standard_shift_minutes must be > 0")
        if self.tier1_threshold_minutes < 0:
            raise ConfigurationError("tier1_threshold_minutes must be >= 0")
        if self.tier2_threshold_minutes < self.tier1_threshold_minutes:
            raise ConfigurationError("tier2_threshold_minutes must be >= tier1_threshold_minutes")
        if self.grace_minutes < 0:
            raise ConfigurationError("grace_minutes must be >= 0")
        if self.lunch.minutes < 0:
            raise ConfigurationError("lunch minutes must be >= 0")
        if self.lunch.window_end < self.lunch.window_start:
            raise ConfigurationError("lunch window must not wrap midnight")
        if self.shift_end <= self.shift_start:
            raise ConfigurationError("shift_end must be after shift_start")
        if self.administrative_minimum_minutes < 0:
            raise ConfigurationError("administrative_minimum_minutes must be >= 0")
        bad_days = [d for d in self.rest_weekdays if d not in range(7)]
        if bad_days:
            raise ConfigurationError(f"rest_weekdays out of range: {sorted(bad_days)}")

    def is_rest_day(self, work_date: date) -> bool:
        return work_date.weekday() in self.rest_weekdays or work_date in self.holidays

    def night_segments(self) -> tuple[ClockInterval, ...]:
        return day_segments(self.night_start, self.night_end)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "ShiftConfiguration":
        """Build a configuration from settings (strings accepted for times/dates)."""

        if not data:
            raise ConfigurationError("Shift configuration is missing")

        def _clock(key: str, default: time) -> time:
            value = data.get(key)
            if value is None:
                return default
            if isinstance(value, time):
                return value
            try:
                return parse_clock(str(value))
            except ValueError as exc:
                raise ConfigurationError(f"{key}: invalid clock time {value!r}") from exc

        def _int(key: str, default: int) -> int:
            value = data.get(key, default)
            try:
                return int(value)
            except (TypeError, ValueError) as exc:
                raise ConfigurationError(f"{key}: expected an integer, got {value!r}") from exc

        try:
            holidays = frozenset(
                h if isinstance(h, date) else parse_iso_date(str(h)) for h in data.get("holidays", ())
            )
        except ValueError as exc:
            raise ConfigurationError(f"holidays: {exc}") from exc

        raw_rest = data.get("rest_weekdays", constants.DEFAULT_REST_WEEKDAYS)
        try:
            rest_weekdays = frozenset(int(d) for d in raw_rest)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"rest_weekdays: expected weekday numbers, got {raw_rest!r}") from exc

        lunch = LunchRule(
            window_start=_clock("lunch_window_start", time(12, 0)),
            window_end=_clock("lunch_window_end", time(15, 0)),
            minutes=_int("lunch_minutes", constants.DEFAULT_LUNCH_MINUTES),
        )
        return cls(
            version=str(data.get("version", "default")),
            standard_shift_minutes=_int("standard_shift_minutes", constants.DEFAULT_STANDARD_SHIFT_MINUTES),
            tier1_threshold_minutes=_int("tier1_threshold_minutes", constants.DEFAULT_TIER1_THRESHOLD_MINUTES),
            tier2_threshold_minutes=_int("tier2_threshold_minutes", constants.DEFAULT_TIER2_THRESHOLD_MINUTES),
            night_start=_clock("night_start", time(22, 0)),
            night_end=_clock("night_end", time(6, 0)),
            lunch=lunch,
            shift_start=_clock("shift_start", time(8, 0)),
            shift_end=_clock("shift_end", time(17, 0)),
            grace_minutes=_int("grace_minutes", constants.DEFAULT_LATE_GRACE_MINUTES),
            rest_weekdays=rest_weekdays,
            holidays=holidays,
            administrative_minimum_minutes=_int(
                "administrative_minimum_minutes", constants.DEFAULT_ADMINISTRATIVE_MINIMUM_MINUTES
            ),
        )
