# -*- coding: utf-8 -*-
"""
Onboarding step identifiers, step events and the StepOutcome message.

A step never calls back into the wizard. When the user finishes with it,
the step returns a StepOutcome (event name plus optional payload) that the
wizard consumes synchronously.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Type

from models.profile import (
    AssessmentAnswers,
    BasicInfo,
    DocumentUploadData,
    RoleSelection,
    StartupProfile,
    TeamData,
    UserIdentity,
)
from services.exceptions import ValidationException


class OnboardingStep(str, Enum):
    """Closed set of onboarding screens, in linear order."""
    LOGIN = "login"
    SIGNUP = "signup"
    FORGOT_PASSWORD = "forgot-password"
    ROLE_SELECTION = "role-selection"
    WELCOME_BACK = "welcome-back"
    BASIC_INFO = "basic-info"
    STARTUP_PROFILE = "startup-profile"
    DOCUMENT_UPLOAD = "document-upload"
    ADD_TEAM = "add-team"
    ASSESSMENT_INTRO = "assessment-intro"
    ASSESSMENT = "assessment"
    COMPLETE = "complete"

    @classmethod
    def initial(cls) -> "OnboardingStep":
        return cls.LOGIN

    @classmethod
    def coerce(cls, value: Any) -> "OnboardingStep":
        """Map any value to a step; unknown values fall back to the initial step."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.initial()

    @classmethod
    def is_known(cls, value: Any) -> bool:
        return isinstance(value, cls) or value in cls._value2member_map_

    @property
    def position(self) -> int:
        """Zero-based index along the linear path."""
        return list(OnboardingStep).index(self)


class StepEvent(str, Enum):
    """Named events a step can raise."""
    SIGN_UP_CHOSEN = "sign_up_chosen"
    FORGOT_PASSWORD_CHOSEN = "forgot_password_chosen"
    CREDENTIALS_VERIFIED = "credentials_verified"
    ACCOUNT_CREATED = "account_created"
    BACK_TO_LOGIN = "back_to_login"
    ROLE_CONFIRMED = "role_confirmed"
    PROCEED = "proceed"
    NEXT = "next"
    BACK = "back"
    START_ASSESSMENT = "start_assessment"
    SKIP = "skip"
    COMPLETE = "complete"
    GO_TO_DASHBOARD = "go_to_dashboard"


# (step, event) -> (payload type, payload required)
# Pairs not listed here carry no payload.
PAYLOAD_RULES: Dict[Tuple[OnboardingStep, StepEvent], Tuple[Type, bool]] = {
    (OnboardingStep.LOGIN, StepEvent.CREDENTIALS_VERIFIED): (UserIdentity, True),
    (OnboardingStep.ROLE_SELECTION, StepEvent.ROLE_CONFIRMED): (RoleSelection, False),
    (OnboardingStep.BASIC_INFO, StepEvent.NEXT): (BasicInfo, True),
    (OnboardingStep.STARTUP_PROFILE, StepEvent.NEXT): (StartupProfile, True),
    (OnboardingStep.DOCUMENT_UPLOAD, StepEvent.NEXT): (DocumentUploadData, True),
    (OnboardingStep.ADD_TEAM, StepEvent.NEXT): (TeamData, True),
    (OnboardingStep.ASSESSMENT, StepEvent.COMPLETE): (AssessmentAnswers, True),
}

# Record type stored in the profile for each step that produces data
PROFILE_RECORD_TYPES: Dict[OnboardingStep, Type] = {
    step: payload_type for (step, _event), (payload_type, _required) in PAYLOAD_RULES.items()
}


@dataclass(frozen=True)
class StepOutcome:
    """An event raised by the active step, optionally carrying its data."""
    step: OnboardingStep
    event: StepEvent
    payload: Optional[Any] = None

    @property
    def has_payload(self) -> bool:
        return self.payload is not None

    @classmethod
    def for_step(cls, step: OnboardingStep, event: StepEvent,
                 payload: Optional[Any] = None) -> "StepOutcome":
        """
        Build an outcome, checking the payload against the step's record type.

        Raises:
            ValidationException: if the payload is missing, unexpected or of
                the wrong record type
        """
        step = OnboardingStep(step)
        event = StepEvent(event)
        rule = PAYLOAD_RULES.get((step, event))
        context = f"{step.value}:{event.value}"

        if rule is None:
            if payload is not None:
                raise ValidationException(
                    "Event does not carry data", field="payload", context=context
                )
            return cls(step, event)

        payload_type, required = rule
        if payload is None:
            if required:
                raise ValidationException(
                    f"Event requires a {payload_type.__name__} payload",
                    field="payload", context=context
                )
            return cls(step, event)

        if not isinstance(payload, payload_type):
            raise ValidationException(
                f"Expected {payload_type.__name__}, got {type(payload).__name__}",
                field="payload", context=context
            )
        return cls(step, event, payload)
