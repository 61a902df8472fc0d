# -*- coding: utf-8 -*-
"""
Login Step - credential entry.

The credential check itself is a collaborator injected as a callable
taking (email, password) and returning the UserIdentity, or None when
the credentials are wrong.
"""

from typing import Callable, Optional

from models.onboarding_step import OnboardingStep, StepEvent, StepOutcome
from models.profile import UserIdentity
from services.validation import ValidationFactory
from ui.wizards.framework import BaseStep
from utils.logger import get_logger

logger = get_logger(__name__)

CredentialVerifier = Callable[[str, str], Optional[UserIdentity]]


class LoginStep(BaseStep):
    STEP_ID = OnboardingStep.LOGIN
    TITLE = "Log in"

    def __init__(self, context, verifier: Optional[CredentialVerifier] = None,
                 validation: Optional[ValidationFactory] = None, parent=None):
        super().__init__(context, parent)
        self.verifier = verifier
        self.validation = validation or ValidationFactory()
        self.verified_user: Optional[UserIdentity] = None

    def collect_data(self) -> Optional[UserIdentity]:
        return self.verified_user

    def on_show(self):
        super().on_show()
        self.verified_user = None

    def choose_sign_up(self) -> StepOutcome:
        return self.outcome(StepEvent.SIGN_UP_CHOSEN)

    def choose_forgot_password(self) -> StepOutcome:
        return self.outcome(StepEvent.FORGOT_PASSWORD_CHOSEN)

    def submit_credentials(self, email: str, password: str) -> Optional[StepOutcome]:
        """
        Check the form, then the credentials.

        Returns:
            A credentials_verified outcome carrying the user, or None
            (see last_validation for the reason)
        """
        result = self.create_validation_result()
        email = (email or "").strip()
        for error in self.validation.validate({"email": email, "password": password}, "credentials"):
            result.add_error(error)

        if result.is_valid:
            if self.verifier is None:
                result.add_error("Sign-in is not available")
            else:
                user = self.verifier(email, password)
                if user is None:
                    logger.warning(f"Sign-in failed for {email}")
                    result.add_error("Invalid email or password")
                else:
                    self.verified_user = user

        self.last_validation = result
        self.validation_changed.emit(result.is_valid)
        if not result.is_valid:
            return None
        return self.outcome(StepEvent.CREDENTIALS_VERIFIED, self.verified_user)
