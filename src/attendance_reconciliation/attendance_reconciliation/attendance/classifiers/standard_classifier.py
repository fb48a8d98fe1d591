from __future__ import annotations

from ...shifts.model import ShiftConfiguration
from .base import HourClassifier


class StandardHourClassifier(HourClassifier):
    """Regular employees: standard shift, then recargo 25%, suplementario 50%, extraordinario 100%.

    Work on a rest day (weekend or holiday) is entirely extraordinario 100%.
    """

    def split(self, worked_seconds: int, *, rest_day: bool, shift: ShiftConfiguration) -> tuple[int, int, int, int]:
        if rest_day:
            return 0, 0, 0, worked_seconds

        regular = min(worked_seconds, shift.standard_shift_minutes * 60)
        excess = worked_seconds - regular
        tier1 = min(excess, shift.tier1_threshold_minutes * 60)
        tier2 = min(excess, shift.tier2_threshold_minutes * 60)
        return regular, tier1, tier2 - tier1, excess - tier2
