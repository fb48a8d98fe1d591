from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import EmployeeType
from .classifiers.administrative_classifier import AdministrativeHourClassifier
from .classifiers.base import HourClassifier
from .classifiers.standard_classifier import StandardHourClassifier
from .model import EmployeePlacement


@dataclass
class ClassifierFactory:
    """Factory Pattern: choose the hour classifier for an employee."""

    standard: HourClassifier = field(default_factory=StandardHourClassifier)
    administrative: HourClassifier = field(default_factory=AdministrativeHourClassifier)

    def for_employee(self, employee_type: EmployeeType) -> HourClassifier:
        if employee_type == EmployeeType.ADMINISTRATIVE:
            return self.administrative
        return self.standard

    def for_placement(self, placement: Optional[EmployeePlacement]) -> HourClassifier:
        if not placement:
            return self.standard
        return self.for_employee(placement.employee_type)
