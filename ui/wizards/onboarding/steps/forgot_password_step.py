# -*- coding: utf-8 -*-
"""
Forgot Password Step.
"""

from models.onboarding_step import OnboardingStep, StepEvent, StepOutcome
from ui.wizards.framework import BaseStep


class ForgotPasswordStep(BaseStep):
    STEP_ID = OnboardingStep.FORGOT_PASSWORD
    TITLE = "Forgot password"

    def collect_data(self):
        return None

    def back_to_login(self) -> StepOutcome:
        return self.outcome(StepEvent.BACK_TO_LOGIN)
