from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .attendance.factory import ClassifierFactory
from .attendance.repository import EventStore, MasterData, RecordStore
from .consistency.checker import ConsistencyChecker
from .core.constants import DEFAULT_BATCH_CHUNK_SIZE, DEFAULT_DUPLICATE_THRESHOLD_MINUTES
from .events.matcher import EventMatcher
from .payroll.calculator.base import PremiumCalculator
from .payroll.calculator.standard_calculator import StandardPremiumCalculator
from .reconciliation.service import ReconciliationService
from .repair.engine import RepairEngine
from .reports.aggregator import Aggregator
from .shifts.model import ShiftConfiguration


@dataclass(frozen=True)
class Container:
    shift: ShiftConfiguration
    chunk_size: int

    matcher: EventMatcher
    checker: ConsistencyChecker
    repair_engine: RepairEngine
    classifier_factory: ClassifierFactory
    aggregator: Aggregator
    premium_calculator: PremiumCalculator

    def reconciliation_service(
        self,
        *,
        records: RecordStore,
        events: EventStore,
        master_data: MasterData,
        log: Optional[logging.Logger] = None,
    ) -> ReconciliationService:
        """Service bound to the given stores; storage itself lives outside this package."""

        return ReconciliationService(
            records,
            events,
            master_data,
            shift=self.shift,
            matcher=self.matcher,
            checker=self.checker,
            repair_engine=self.repair_engine,
            classifier_factory=self.classifier_factory,
            chunk_size=self.chunk_size,
            log=log,
        )


def build_container(
    *,
    shift_config: Mapping[str, Any],
    duplicate_threshold_minutes: int = DEFAULT_DUPLICATE_THRESHOLD_MINUTES,
    chunk_size: int = DEFAULT_BATCH_CHUNK_SIZE,
) -> Container:
    shift = ShiftConfiguration.from_mapping(shift_config)
    return Container(
        shift=shift,
        chunk_size=int(chunk_size),
        matcher=EventMatcher(duplicate_threshold_minutes=int(duplicate_threshold_minutes)),
        checker=ConsistencyChecker(duplicate_threshold_minutes=int(duplicate_threshold_minutes)),
        repair_engine=RepairEngine(),
        classifier_factory=ClassifierFactory(),
        aggregator=Aggregator(shift),
        premium_calculator=StandardPremiumCalculator(),
    )
