# -*- coding: utf-8 -*-
"""
Role Selection Step.
"""

from typing import Optional

from models.onboarding_step import OnboardingStep, StepEvent, StepOutcome
from models.profile import RoleSelection
from services.validation import ValidationFactory
from ui.wizards.framework import BaseStep, StepValidationResult

ROLES = ("founder", "co-founder", "investor", "mentor")


class RoleSelectionStep(BaseStep):
    STEP_ID = OnboardingStep.ROLE_SELECTION
    TITLE = "Choose your role"

    def __init__(self, context, validation: Optional[ValidationFactory] = None, parent=None):
        super().__init__(context, parent)
        self.validation = validation or ValidationFactory()
        self.selected_role: Optional[str] = None

    def populate_data(self, data: Optional[RoleSelection]):
        self.selected_role = data.role if data else None

    def select_role(self, role: str):
        self.selected_role = role

    def validate(self) -> StepValidationResult:
        result = self.create_validation_result()
        for error in self.validation.validate({"role": self.selected_role}, "role_selection"):
            result.add_error(error)
        if self.selected_role and self.selected_role not in ROLES:
            result.add_error(f"Unknown role: {self.selected_role}")
        return result

    def collect_data(self) -> RoleSelection:
        return RoleSelection(role=self.selected_role)

    def confirm(self) -> Optional[StepOutcome]:
        return self.validated_outcome(StepEvent.ROLE_CONFIRMED)
