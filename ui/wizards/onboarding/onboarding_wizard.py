# -*- coding: utf-8 -*-
"""
Onboarding Wizard - the step orchestrator of the founder onboarding.

Decides which step is active, stores what each step hands over and
enforces the legal transitions:

    login --sign_up_chosen--> signup --account_created--> role-selection
    login --credentials_verified--> welcome-back --proceed--> basic-info
    basic-info -> startup-profile -> document-upload -> add-team -> assessment-intro
    assessment-intro --start_assessment--> assessment --complete/skip--> complete
    assessment-intro --skip--> complete

Steps validate their own data; the wizard trusts any outcome that
passed the StepOutcome boundary check.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from PyQt5.QtCore import pyqtSignal

from app.config import Config
from models.onboarding_step import OnboardingStep, StepEvent, StepOutcome
from services.notification_service import NotificationService
from ui.wizards.framework import BaseWizard
from ui.wizards.onboarding.onboarding_context import OnboardingContext
from ui.wizards.onboarding.steps import (
    AddTeamStep,
    AssessmentIntroStep,
    AssessmentStep,
    BasicInfoStep,
    CompletionStep,
    DocumentUploadStep,
    ForgotPasswordStep,
    LoginStep,
    RoleSelectionStep,
    SignUpStep,
    StartupProfileStep,
    WelcomeBackStep,
)
from ui.wizards.onboarding.steps.login_step import CredentialVerifier
from ui.wizards.onboarding.steps.signup_step import AccountCreator
from utils.logger import get_logger

logger = get_logger(__name__)

S = OnboardingStep
E = StepEvent

TRANSITIONS = {
    (S.LOGIN, E.SIGN_UP_CHOSEN): S.SIGNUP,
    (S.LOGIN, E.FORGOT_PASSWORD_CHOSEN): S.FORGOT_PASSWORD,
    (S.LOGIN, E.CREDENTIALS_VERIFIED): S.WELCOME_BACK,
    (S.SIGNUP, E.FORGOT_PASSWORD_CHOSEN): S.FORGOT_PASSWORD,
    (S.SIGNUP, E.ACCOUNT_CREATED): S.ROLE_SELECTION,
    (S.FORGOT_PASSWORD, E.BACK_TO_LOGIN): S.LOGIN,
    (S.ROLE_SELECTION, E.ROLE_CONFIRMED): S.BASIC_INFO,
    (S.WELCOME_BACK, E.PROCEED): S.BASIC_INFO,
    (S.BASIC_INFO, E.NEXT): S.STARTUP_PROFILE,
    (S.BASIC_INFO, E.BACK): S.ROLE_SELECTION,
    (S.STARTUP_PROFILE, E.NEXT): S.DOCUMENT_UPLOAD,
    (S.STARTUP_PROFILE, E.BACK): S.BASIC_INFO,
    (S.DOCUMENT_UPLOAD, E.NEXT): S.ADD_TEAM,
    (S.DOCUMENT_UPLOAD, E.BACK): S.STARTUP_PROFILE,
    (S.ADD_TEAM, E.NEXT): S.ASSESSMENT_INTRO,
    (S.ADD_TEAM, E.BACK): S.DOCUMENT_UPLOAD,
    (S.ASSESSMENT_INTRO, E.START_ASSESSMENT): S.ASSESSMENT,
    (S.ASSESSMENT_INTRO, E.SKIP): S.COMPLETE,
    (S.ASSESSMENT, E.COMPLETE): S.COMPLETE,
    (S.ASSESSMENT, E.SKIP): S.COMPLETE,
}

WELCOME_BACK_TARGETS = ("basic-info", "dashboard")


@dataclass(frozen=True)
class ProgressEntry:
    """One entry of the onboarding sidebar."""
    step: OnboardingStep
    title: str
    active: bool
    completed: bool


class OnboardingWizard(BaseWizard):
    """
    Founder onboarding wizard.

    Usage:
        wizard = OnboardingWizard(verifier=auth.verify)
        step = wizard.current_step_component()
        wizard.dispatch(step.submit_credentials(email, password))
    """

    SIDEBAR = [
        (S.BASIC_INFO, "Basic Info"),
        (S.STARTUP_PROFILE, "Startup Profile"),
        (S.DOCUMENT_UPLOAD, "Upload Documents"),
        (S.ADD_TEAM, "Add your Team"),
        (S.ASSESSMENT, "Psychological Assessment"),
    ]

    # Signals
    dashboard_requested = pyqtSignal(dict)  # user
    step_error = pyqtSignal(str, str, str)  # step, error_type, message

    def __init__(
        self,
        verifier: Optional[CredentialVerifier] = None,
        account_creator: Optional[AccountCreator] = None,
        notifications: Optional[NotificationService] = None,
        welcome_back_target: Optional[str] = None,
        context: Optional[OnboardingContext] = None,
        parent=None
    ):
        """
        Args:
            verifier: Credential check used by the login step
            account_creator: Account creation used by the sign-up step
            notifications: Notification channel (one is created if omitted)
            welcome_back_target: "basic-info" or "dashboard"; defaults to Config
            context: Restored session context (a fresh one if omitted)
        """
        self._verifier = verifier
        self._account_creator = account_creator
        self._notifications = notifications
        self._restored_context = context

        target = (welcome_back_target or Config.WELCOME_BACK_TARGET).strip().lower()
        if target not in WELCOME_BACK_TARGETS:
            logger.warning(f"Unknown welcome-back target {target!r}, using basic-info")
            target = "basic-info"
        self.welcome_back_target = target

        super().__init__(parent)
        self.error_boundary.error_occurred.connect(self.step_error.emit)
        logger.info(f"Onboarding session {self.context.wizard_id} started at {self.step.value}")

    # =========================================================================
    # BaseWizard implementation
    # =========================================================================

    def create_context(self) -> OnboardingContext:
        return self._restored_context or OnboardingContext()

    def create_steps(self) -> Dict[OnboardingStep, Any]:
        self.notifications = self._notifications or NotificationService(parent=self)
        return {
            S.LOGIN: LoginStep(self.context, verifier=self._verifier, parent=self),
            S.SIGNUP: SignUpStep(self.context, account_creator=self._account_creator, parent=self),
            S.FORGOT_PASSWORD: ForgotPasswordStep(self.context, self),
            S.ROLE_SELECTION: RoleSelectionStep(self.context, parent=self),
            S.WELCOME_BACK: WelcomeBackStep(self.context, self),
            S.BASIC_INFO: BasicInfoStep(self.context, parent=self),
            S.STARTUP_PROFILE: StartupProfileStep(self.context, parent=self),
            S.DOCUMENT_UPLOAD: DocumentUploadStep(self.context, self.notifications, self),
            S.ADD_TEAM: AddTeamStep(self.context, parent=self),
            S.ASSESSMENT_INTRO: AssessmentIntroStep(self.context, self),
            S.ASSESSMENT: AssessmentStep(self.context, self),
            S.COMPLETE: CompletionStep(self.context, self),
        }

    def create_transitions(self):
        return TRANSITIONS

    def get_step_order(self) -> List[OnboardingStep]:
        return list(OnboardingStep)

    def intercept(self, outcome: StepOutcome) -> bool:
        """Dashboard hand-offs leave the wizard on its current step."""
        if outcome.step is S.WELCOME_BACK and outcome.event is E.PROCEED:
            if self.welcome_back_target == "dashboard":
                self.context.mark_step_completed(S.WELCOME_BACK.value)
                self._request_dashboard()
                return True
            return False

        if outcome.step is S.COMPLETE and outcome.event is E.GO_TO_DASHBOARD:
            self.context.mark_step_completed(S.COMPLETE.value)
            self.context.status = "completed"
            logger.info(f"Onboarding session {self.context.wizard_id} completed")
            self.wizard_completed.emit(self.context.to_dict())
            self._request_dashboard()
            return True

        return False

    def dispatch(self, outcome: Optional[StepOutcome]) -> OnboardingStep:
        return OnboardingStep.coerce(super().dispatch(outcome))

    def store_payload(self, outcome: StepOutcome):
        super().store_payload(outcome)
        if outcome.event is E.CREDENTIALS_VERIFIED:
            self.context.user = outcome.payload

    def injected_data(self, step_key: str) -> Any:
        if step_key == S.WELCOME_BACK.value:
            return self.context.user
        return super().injected_data(step_key)

    # =========================================================================
    # Session state
    # =========================================================================

    @property
    def step(self) -> OnboardingStep:
        return OnboardingStep(self.navigator.current_step)

    @property
    def profile(self) -> Dict[OnboardingStep, Any]:
        return self.context.profile

    def step_component(self, step: OnboardingStep):
        return self.steps[OnboardingStep(step).value]

    def snapshot(self) -> Dict[str, Any]:
        """Serializable session state (see OnboardingContext.to_dict)."""
        return self.context.to_dict()

    @classmethod
    def restore(cls, snapshot: Dict[str, Any], **kwargs) -> 'OnboardingWizard':
        """Rebuild a wizard from snapshot(); the restored step is re-populated."""
        return cls(context=OnboardingContext.from_dict(snapshot), **kwargs)

    # =========================================================================
    # Progress
    # =========================================================================

    def progress(self) -> List[ProgressEntry]:
        """Sidebar entries with active/completed flags."""
        current = self.step
        entries = []
        for step, title in self.SIDEBAR:
            if step is S.ASSESSMENT:
                active = current in (S.ASSESSMENT_INTRO, S.ASSESSMENT)
                completed = (
                    self.context.is_step_completed(S.ASSESSMENT.value)
                    or current is S.COMPLETE
                )
            else:
                active = current is step
                completed = self.context.is_step_completed(step.value)
            entries.append(ProgressEntry(step=step, title=title, active=active, completed=completed))
        return entries

    def get_progress_percentage(self) -> float:
        return self.navigator.get_progress_percentage()

    def _request_dashboard(self):
        user = self.context.user.to_dict() if self.context.user else {}
        logger.info("Handing off to the dashboard")
        self.dashboard_requested.emit(user)
