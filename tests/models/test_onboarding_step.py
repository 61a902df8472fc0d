# -*- coding: utf-8 -*-
"""
Tests for step identifiers and the StepOutcome boundary check.
"""

import pytest

from models.onboarding_step import OnboardingStep, StepEvent, StepOutcome
from models.profile import BasicInfo, UserIdentity
from services.exceptions import ValidationException


class TestOnboardingStep:

    def test_twelve_steps_in_order(self):
        assert [s.value for s in OnboardingStep] == [
            "login", "signup", "forgot-password", "role-selection", "welcome-back",
            "basic-info", "startup-profile", "document-upload", "add-team",
            "assessment-intro", "assessment", "complete",
        ]

    def test_coerce_unknown_falls_back_to_login(self):
        assert OnboardingStep.coerce("dashboard") is OnboardingStep.LOGIN
        assert OnboardingStep.coerce(None) is OnboardingStep.LOGIN
        assert OnboardingStep.coerce("add-team") is OnboardingStep.ADD_TEAM

    def test_position(self):
        assert OnboardingStep.LOGIN.position == 0
        assert OnboardingStep.COMPLETE.position == 11


class TestStepOutcome:

    def test_payload_of_expected_type(self):
        info = BasicInfo(full_name="Ada", email="ada@example.com")
        outcome = StepOutcome.for_step(OnboardingStep.BASIC_INFO, StepEvent.NEXT, info)

        assert outcome.payload is info
        assert outcome.has_payload

    def test_wrong_payload_type(self):
        with pytest.raises(ValidationException) as exc_info:
            StepOutcome.for_step(OnboardingStep.BASIC_INFO, StepEvent.NEXT, {"full_name": "Ada"})

        assert exc_info.value.context == "basic-info:next"
        assert str(exc_info.value).startswith("[basic-info:next]")

    def test_missing_required_payload(self):
        with pytest.raises(ValidationException):
            StepOutcome.for_step(OnboardingStep.LOGIN, StepEvent.CREDENTIALS_VERIFIED)

    def test_unexpected_payload(self):
        with pytest.raises(ValidationException):
            StepOutcome.for_step(OnboardingStep.BASIC_INFO, StepEvent.BACK, BasicInfo())

    def test_optional_payload_may_be_omitted(self):
        outcome = StepOutcome.for_step(OnboardingStep.ROLE_SELECTION, StepEvent.ROLE_CONFIRMED)

        assert not outcome.has_payload

    def test_accepts_plain_strings(self):
        outcome = StepOutcome.for_step("login", "credentials_verified", UserIdentity(email="a@b.io"))

        assert outcome.step is OnboardingStep.LOGIN
        assert outcome.event is StepEvent.CREDENTIALS_VERIFIED
