from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from ...attendance.model import HourBuckets
from ...core.exceptions import ValidationError
from .base import PremiumBreakdown, PremiumCalculator

_CENT = Decimal("0.01")


@dataclass(frozen=True)
class PremiumRates:
    """Surcharge over the base hourly rate for each bucket."""

    recargo25: Decimal = Decimal("0.25")
    suplementario50: Decimal = Decimal("0.50")
    extraordinario100: Decimal = Decimal("1.00")
    nocturnas: Decimal = Decimal("0.25")

    def __post_init__(self) -> None:
        for name in ("recargo25", "suplementario50", "extraordinario100", "nocturnas"):
            value = Decimal(str(getattr(self, name)))
            if value < 0:
                raise ValidationError(f"{name} rate must be >= 0")
            object.__setattr__(self, name, value)


class StandardPremiumCalculator(PremiumCalculator):
    """Standard rule: overtime hours earn the base rate plus their tier surcharge;
    night hours earn only the night surcharge since they are already paid in
    another bucket."""

    def __init__(self, rates: PremiumRates | None = None):
        self._rates = rates or PremiumRates()

    def breakdown(self, buckets: HourBuckets, hourly_rate: Decimal) -> PremiumBreakdown:
        rate = Decimal(str(hourly_rate))
        if rate < 0:
            raise ValidationError("hourly_rate must be >= 0")

        def amount(hours: float, factor: Decimal) -> Decimal:
            return (Decimal(str(hours)) * rate * factor).quantize(_CENT, rounding=ROUND_HALF_UP)

        one = Decimal(1)
        return PremiumBreakdown(
            regular=amount(buckets.regular, one),
            recargo25=amount(buckets.recargo25, one + self._rates.recargo25),
            suplementario50=amount(buckets.suplementario50, one + self._rates.suplementario50),
            extraordinario100=amount(buckets.extraordinario100, one + self._rates.extraordinario100),
            nocturnas=amount(buckets.nocturnas, self._rates.nocturnas),
        )
