# -*- coding: utf-8 -*-
"""
Basic Info Step - founder's personal details.
"""

from models.onboarding_step import OnboardingStep
from models.profile import BasicInfo
from .form_step import FormStep


class BasicInfoStep(FormStep):
    STEP_ID = OnboardingStep.BASIC_INFO
    TITLE = "Basic Info"
    RECORD_CLASS = BasicInfo
    VALIDATION_TYPE = "basic_info"
