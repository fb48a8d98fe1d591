from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from ...attendance.model import HourBuckets


@dataclass(frozen=True)
class PremiumBreakdown:
    regular: Decimal
    recargo25: Decimal
    suplementario50: Decimal
    extraordinario100: Decimal
    nocturnas: Decimal

    @property
    def premiums(self) -> Decimal:
        return self.recargo25 + self.suplementario50 + self.extraordinario100 + self.nocturnas

    @property
    def total(self) -> Decimal:
        return self.regular + self.premiums


class PremiumCalculator(ABC):
    """Calculator interface (Strategy Pattern for hour premiums)."""

    @abstractmethod
    def breakdown(self, buckets: HourBuckets, hourly_rate: Decimal) -> PremiumBreakdown:
        raise NotImplementedError
