"""Example: the engine without Flask.

Matches one day of raw punches, classifies the hours and prints the premiums.
"""

import importlib
from datetime import date, datetime
from decimal import Decimal

from config import get_settings_module

from src.attendance_reconciliation.attendance_reconciliation.container import build_container
from src.attendance_reconciliation.attendance_reconciliation.core.enums import MovementType
from src.attendance_reconciliation.attendance_reconciliation.events.model import PunchEvent


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        shift_config=settings.SHIFT_CONFIG,
        duplicate_threshold_minutes=settings.DUPLICATE_THRESHOLD_MINUTES,
        chunk_size=settings.BATCH_CHUNK_SIZE,
    )

    day = date(2024, 3, 4)
    punches = [
        PunchEvent("p1", "E1", "D1", datetime(2024, 3, 4, 7, 58), MovementType.ENTRY),
        PunchEvent("p2", "E1", "D1", datetime(2024, 3, 4, 8, 1), MovementType.ENTRY),
        PunchEvent("p3", "E1", "D1", datetime(2024, 3, 4, 19, 15)),
    ]
    match = container.matcher.match(punches, employee_id="E1", work_date=day)
    classifier = container.classifier_factory.for_placement(None)
    result = classifier.classify(match.pairs, employee_id="E1", work_date=day, shift=container.shift)

    print("pairs:", match.pairs)
    print("notes:", match.summary())
    print("buckets:", result.buckets.as_dict())
    print("premiums:", container.premium_calculator.breakdown(result.buckets, Decimal("4.50")))


if __name__ == "__main__":
    main()
