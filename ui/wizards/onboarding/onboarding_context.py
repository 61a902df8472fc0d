# -*- coding: utf-8 -*-
"""
Onboarding Context - Session state of the onboarding wizard.

Extends WizardContext with:
- The authenticated user (set when credentials are verified)
- Typed access to the profile accumulator (one record per step)
"""

from typing import Any, Dict, Optional

from models.onboarding_step import OnboardingStep, PROFILE_RECORD_TYPES
from models.profile import UserIdentity
from ui.wizards.framework import WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)


class OnboardingContext(WizardContext):
    """Context for the founder onboarding wizard."""

    def __init__(self):
        super().__init__()
        self.current_step = OnboardingStep.initial().value
        self.user: Optional[UserIdentity] = None

    @property
    def step(self) -> OnboardingStep:
        """Current step as an enum member; unknown values read as the initial step."""
        return OnboardingStep.coerce(self.current_step)

    @property
    def profile(self) -> Dict[OnboardingStep, Any]:
        """Snapshot of the accumulated step records, keyed by step."""
        return {OnboardingStep(key): value for key, value in self.data.items()}

    def get_record(self, step: OnboardingStep, default: Any = None) -> Any:
        return self.get_step_data(OnboardingStep(step).value, default)

    def clear(self):
        super().clear()
        self.current_step = OnboardingStep.initial().value
        self.user = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize context to dictionary (uploaded files as metadata only)."""
        base_data = super().to_dict()
        base_data.update({
            "user": self.user.to_dict() if self.user else None,
            "profile": {key: record.to_dict() for key, record in self.data.items()},
        })
        return base_data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'OnboardingContext':
        """Restore context from dictionary."""
        ctx = cls()
        cls._restore_base_fields(ctx, data)

        if not OnboardingStep.is_known(ctx.current_step):
            logger.warning(f"Restored unknown step {ctx.current_step!r}, starting at login")
            ctx.current_step = OnboardingStep.initial().value

        if data.get("user"):
            ctx.user = UserIdentity.from_dict(data["user"])

        for key, record_data in (data.get("profile") or {}).items():
            if not OnboardingStep.is_known(key):
                logger.warning(f"Skipping profile entry for unknown step {key!r}")
                continue
            record_type = PROFILE_RECORD_TYPES.get(OnboardingStep(key))
            if record_type is None:
                continue
            ctx.data[key] = record_type.from_dict(record_data)

        return ctx
