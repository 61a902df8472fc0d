# -*- coding: utf-8 -*-
"""
Sign Up Step - account creation form.

Creating the account is delegated to an optional injected callable
taking (email, password) and returning True on success.
"""

from typing import Callable, Optional

from models.onboarding_step import OnboardingStep, StepEvent, StepOutcome
from services.validation import ValidationFactory
from ui.wizards.framework import BaseStep, StepValidationResult

AccountCreator = Callable[[str, str], bool]


class SignUpStep(BaseStep):
    STEP_ID = OnboardingStep.SIGNUP
    TITLE = "Sign up"

    def __init__(self, context, account_creator: Optional[AccountCreator] = None,
                 validation: Optional[ValidationFactory] = None, parent=None):
        super().__init__(context, parent)
        self.account_creator = account_creator
        self.validation = validation or ValidationFactory()
        self._form = {}

    def collect_data(self):
        return None

    def validate(self) -> StepValidationResult:
        result = self.create_validation_result()
        for error in self.validation.validate(self._form, "signup"):
            result.add_error(error)
        if self._form.get("password") != self._form.get("confirm_password"):
            result.add_error("Passwords do not match")
        return result

    def choose_forgot_password(self) -> StepOutcome:
        return self.outcome(StepEvent.FORGOT_PASSWORD_CHOSEN)

    def create_account(self, email: str, password: str, confirm_password: str) -> Optional[StepOutcome]:
        self._form = {
            "email": (email or "").strip(),
            "password": password,
            "confirm_password": confirm_password,
        }
        result = self.validate()
        if result.is_valid and self.account_creator is not None:
            if not self.account_creator(self._form["email"], password):
                result.add_error("Account could not be created")

        self.last_validation = result
        self.validation_changed.emit(result.is_valid)
        if not result.is_valid:
            return None
        return self.outcome(StepEvent.ACCOUNT_CREATED)
