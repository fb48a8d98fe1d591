from __future__ import annotations

from ...shifts.model import ShiftConfiguration
from .base import HourClassifier


class AdministrativeHourClassifier(HourClassifier):
    """Administrative staff: days under the minimum are not counted; any excess is extraordinario 100%."""

    def split(self, worked_seconds: int, *, rest_day: bool, shift: ShiftConfiguration) -> tuple[int, int, int, int]:
        if worked_seconds < shift.administrative_minimum_minutes * 60:
            return 0, 0, 0, 0
        if rest_day:
            return 0, 0, 0, worked_seconds

        regular = min(worked_seconds, shift.standard_shift_minutes * 60)
        return regular, 0, 0, worked_seconds - regular
