# -*- coding: utf-8 -*-
"""
Assessment Steps - introduction, questionnaire and completion screens.
"""

from typing import Any, Dict, Optional

from models.onboarding_step import OnboardingStep, StepEvent, StepOutcome
from models.profile import AssessmentAnswers
from ui.wizards.framework import BaseStep, StepValidationResult


class AssessmentIntroStep(BaseStep):
    STEP_ID = OnboardingStep.ASSESSMENT_INTRO
    TITLE = "Psychological Assessment"

    def collect_data(self):
        return None

    def start_assessment(self) -> StepOutcome:
        return self.outcome(StepEvent.START_ASSESSMENT)

    def skip(self) -> StepOutcome:
        return self.outcome(StepEvent.SKIP)


class AssessmentStep(BaseStep):
    STEP_ID = OnboardingStep.ASSESSMENT
    TITLE = "Psychological Assessment"

    def __init__(self, context, parent=None):
        super().__init__(context, parent)
        self.answers: Dict[str, Any] = {}

    def populate_data(self, data: Optional[AssessmentAnswers]):
        self.answers = dict(data.answers) if data else {}

    def answer(self, question_id: str, value: Any):
        self.answers[question_id] = value

    def validate(self) -> StepValidationResult:
        result = self.create_validation_result()
        if not self.answers:
            result.add_error("Answer at least one question or skip the assessment")
        return result

    def collect_data(self) -> AssessmentAnswers:
        return AssessmentAnswers(answers=dict(self.answers))

    def complete(self) -> Optional[StepOutcome]:
        return self.validated_outcome(StepEvent.COMPLETE)

    def skip(self) -> StepOutcome:
        return self.outcome(StepEvent.SKIP)


class CompletionStep(BaseStep):
    STEP_ID = OnboardingStep.COMPLETE
    TITLE = "All set"

    def collect_data(self):
        return None

    def go_to_dashboard(self) -> StepOutcome:
        return self.outcome(StepEvent.GO_TO_DASHBOARD)
