# -*- coding: utf-8 -*-
"""
Form Step - shared base for steps that collect a flat record of fields.
"""

from typing import Any, Dict, Optional

from models.onboarding_step import StepEvent, StepOutcome
from services.validation import ValidationFactory
from ui.wizards.framework import BaseStep, StepValidationResult


class FormStep(BaseStep):
    """
    Step backed by a dict of field values.

    Subclasses set:
    - RECORD_CLASS: payload record built from the fields
    - VALIDATION_TYPE: record type registered in ValidationFactory
    """

    RECORD_CLASS = None
    VALIDATION_TYPE: str = ""

    def __init__(self, context, validation: Optional[ValidationFactory] = None, parent=None):
        super().__init__(context, parent)
        self.validation = validation or ValidationFactory()
        self.fields: Dict[str, Any] = {}

    def set_field(self, name: str, value: Any):
        if name not in self.RECORD_CLASS.__dataclass_fields__:
            raise KeyError(f"{self.RECORD_CLASS.__name__} has no field {name!r}")
        self.fields[name] = value.strip() if isinstance(value, str) else value

    def set_fields(self, **values):
        for name, value in values.items():
            self.set_field(name, value)

    def populate_data(self, data: Any):
        """Pre-fill from the record stored the last time the step was completed."""
        self.fields = data.to_dict() if data is not None else {}

    def validate(self) -> StepValidationResult:
        result = self.create_validation_result()
        for error in self.validation.validate(self.fields, self.VALIDATION_TYPE):
            result.add_error(error)
        return result

    def collect_data(self):
        return self.RECORD_CLASS.from_dict(dict(self.fields))

    def next(self) -> Optional[StepOutcome]:
        return self.validated_outcome(StepEvent.NEXT)

    def back(self) -> StepOutcome:
        return self.outcome(StepEvent.BACK)
