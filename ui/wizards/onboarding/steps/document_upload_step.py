# -*- coding: utf-8 -*-
"""
Document Upload Step - pitch deck plus optional supporting documents.

The upload state lives in DocumentIntakeController; this step wires it
to the wizard:
- populate_data() restores previously finalized files on re-entry
- next() finalizes the intake and returns the outcome, or None when the
  pitch deck is missing
"""

from typing import Optional

from controllers.document_intake_controller import DocumentIntakeController
from models.onboarding_step import OnboardingStep, StepEvent, StepOutcome
from models.profile import DocumentUploadData
from models.uploaded_file import UploadSlot
from services.notification_service import NotificationService
from ui.wizards.framework import BaseStep, StepValidationResult
from utils.logger import get_logger

logger = get_logger(__name__)


class DocumentUploadStep(BaseStep):
    STEP_ID = OnboardingStep.DOCUMENT_UPLOAD
    TITLE = "Upload Documents"

    def __init__(self, context, notifications: Optional[NotificationService] = None, parent=None):
        super().__init__(context, parent)
        self.intake = DocumentIntakeController(notifications=notifications, parent=self)
        self.intake.slot_changed.connect(self._on_slot_changed)

    def populate_data(self, data: Optional[DocumentUploadData]):
        self.intake.load(data)

    def validate(self) -> StepValidationResult:
        """Side-effect free check; finalize() is what reports the error to the user."""
        result = self.create_validation_result()
        if self.intake.required_file is None:
            result.add_error("Pitch deck is required")
        return result

    def collect_data(self) -> Optional[DocumentUploadData]:
        """Current slot contents, without raising any feedback."""
        if self.intake.required_file is None:
            return None
        return DocumentUploadData(
            required_file=self.intake.required_file.file,
            optional_files=[upload.file for upload in self.intake.optional_files],
        )

    def next(self) -> Optional[StepOutcome]:
        result = self.intake.finalize()
        self.last_validation = StepValidationResult(
            is_valid=result.success, errors=list(result.errors)
        )
        if not result.success:
            logger.warning(f"Document upload not finalized: {result.message}")
            return None
        return self.outcome(StepEvent.NEXT, result.data)

    def back(self) -> StepOutcome:
        return self.outcome(StepEvent.BACK)

    def _on_slot_changed(self, slot: str):
        if slot == UploadSlot.REQUIRED.value:
            self.validation_changed.emit(self.intake.required_file is not None)
