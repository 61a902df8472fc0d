# -*- coding: utf-8 -*-
"""
Welcome Back Step - greets a returning user.
"""

from typing import Optional

from models.onboarding_step import OnboardingStep, StepEvent, StepOutcome
from models.profile import UserIdentity
from ui.wizards.framework import BaseStep


class WelcomeBackStep(BaseStep):
    STEP_ID = OnboardingStep.WELCOME_BACK
    TITLE = "Welcome back"

    def __init__(self, context, parent=None):
        super().__init__(context, parent)
        self.user: Optional[UserIdentity] = None

    def populate_data(self, data: Optional[UserIdentity]):
        """Receives the authenticated user rather than stored step data."""
        self.user = data

    @property
    def greeting(self) -> str:
        if self.user and (self.user.display_name or self.user.email):
            return f"Welcome back, {self.user.display_name or self.user.email}!"
        return "Welcome back!"

    def collect_data(self):
        return None

    def proceed(self) -> StepOutcome:
        return self.outcome(StepEvent.PROCEED)
