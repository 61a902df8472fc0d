# -*- coding: utf-8 -*-
"""
Add Team Step - co-founders and key members.
"""

from dataclasses import asdict
from typing import List, Optional

from models.onboarding_step import OnboardingStep, StepEvent, StepOutcome
from models.profile import TeamData, TeamMember
from services.validation import ValidationFactory
from ui.wizards.framework import BaseStep, StepValidationResult


class AddTeamStep(BaseStep):
    STEP_ID = OnboardingStep.ADD_TEAM
    TITLE = "Add your Team"

    def __init__(self, context, validation: Optional[ValidationFactory] = None, parent=None):
        super().__init__(context, parent)
        self.validation = validation or ValidationFactory()
        self.members: List[TeamMember] = []

    def populate_data(self, data: Optional[TeamData]):
        self.members = list(data.members) if data else []

    def add_member(self, name: str, role: str, email: Optional[str] = None) -> bool:
        """
        Validate and append a member.

        Returns:
            True if added; otherwise last_validation holds the errors
        """
        member = TeamMember(
            name=(name or "").strip(),
            role=(role or "").strip(),
            email=(email or "").strip() or None
        )
        result = self.create_validation_result()
        for error in self.validation.validate(asdict(member), "team_member"):
            result.add_error(error)
        self.last_validation = result
        if not result.is_valid:
            return False
        self.members.append(member)
        return True

    def remove_member(self, index: int):
        if 0 <= index < len(self.members):
            del self.members[index]

    def validate(self) -> StepValidationResult:
        result = self.create_validation_result()
        for position, member in enumerate(self.members, start=1):
            for error in self.validation.validate(asdict(member), "team_member"):
                result.add_error(f"Member {position}: {error}")
        return result

    def collect_data(self) -> TeamData:
        return TeamData(members=list(self.members))

    def next(self) -> Optional[StepOutcome]:
        return self.validated_outcome(StepEvent.NEXT)

    def back(self) -> StepOutcome:
        return self.outcome(StepEvent.BACK)
