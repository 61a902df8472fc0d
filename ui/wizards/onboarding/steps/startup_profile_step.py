# -*- coding: utf-8 -*-
"""
Startup Profile Step - company name, industry, stage and pitch.
"""

from models.onboarding_step import OnboardingStep
from models.profile import StartupProfile
from .form_step import FormStep

STAGES = ("idea", "mvp", "pre-seed", "seed", "series-a", "growth")


class StartupProfileStep(FormStep):
    STEP_ID = OnboardingStep.STARTUP_PROFILE
    TITLE = "Startup Profile"
    RECORD_CLASS = StartupProfile
    VALIDATION_TYPE = "startup_profile"

    def validate(self):
        result = super().validate()
        stage = self.fields.get("stage")
        if stage and stage not in STAGES:
            result.add_error(f"Stage must be one of: {', '.join(STAGES)}")
        return result
