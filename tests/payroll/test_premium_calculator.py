from decimal import Decimal

import pytest

from src.attendance_reconciliation.attendance_reconciliation.attendance.model import HourBuckets
from src.attendance_reconciliation.attendance_reconciliation.core.exceptions import ValidationError
from src.attendance_reconciliation.attendance_reconciliation.payroll.calculator.standard_calculator import (
    PremiumRates,
    StandardPremiumCalculator,
)


def test_standard_calculator_applies_tier_surcharges():
    buckets = HourBuckets(
        regular=8.0, overtime=1.75, recargo25=1.0, suplementario50=0.5, extraordinario100=0.25, nocturnas=2.0
    )

    calc = StandardPremiumCalculator()
    result = calc.breakdown(buckets, Decimal("10"))

    assert result.regular == Decimal("80.00")
    assert result.recargo25 == Decimal("12.50")
    assert result.suplementario50 == Decimal("7.50")
    assert result.extraordinario100 == Decimal("5.00")
    assert result.nocturnas == Decimal("5.00")
    assert result.premiums == Decimal("30.00")
    assert result.total == Decimal("110.00")


def test_amounts_are_rounded_to_cents_half_up():
    result = StandardPremiumCalculator().breakdown(HourBuckets(regular=8.0, recargo25=1.0), Decimal("3.33"))

    assert result.regular == Decimal("26.64")
    assert result.recargo25 == Decimal("4.16")


def test_custom_rates():
    calc = StandardPremiumCalculator(PremiumRates(nocturnas=Decimal("0.35")))
    result = calc.breakdown(HourBuckets(nocturnas=1.0), Decimal("20"))

    assert result.nocturnas == Decimal("7.00")


def test_negative_rates_are_rejected():
    with pytest.raises(ValidationError):
        StandardPremiumCalculator().breakdown(HourBuckets(), Decimal("-1"))
    with pytest.raises(ValidationError):
        PremiumRates(recargo25=Decimal("-0.25"))
