# -*- coding: utf-8 -*-
"""
Document Intake Controller
==========================
Upload state for the document-upload step.

Handles:
- The required single-file slot (pitch deck): a new accepted file replaces the old one
- The optional multi-file slot (other documents): accepted files are appended in order
- Type and size validation, with per-slot error messages
- Feedback through the shared notification channel
- Finalization into a DocumentUploadData payload

Validation failures never raise; callers observe them through the slot
state, the signals and the notification channel.
"""

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import BaseController, OperationResult
from models.profile import DocumentUploadData
from models.uploaded_file import (
    FileRejection,
    IntakeFile,
    RejectionReason,
    UploadedFile,
    UploadSlot,
)
from services.notification_service import NotificationService
from services.validation import FileValidationFactory
from utils.helpers import format_file_size, generate_file_id
from utils.logger import get_logger

logger = get_logger(__name__)

REQUIRED_FILE_MISSING = "Pitch deck is required"
REQUIRED_DOCUMENTS_MISSING = "Please upload all required documents"


class DocumentIntakeController(BaseController):
    """
    Controller for the two upload slots of the document-upload step.
    """

    # Signals
    slot_changed = pyqtSignal(str)  # slot value
    slot_error_changed = pyqtSignal(str, str)  # slot value, message ("" when cleared)

    def __init__(
        self,
        notifications: Optional[NotificationService] = None,
        validator: Optional[FileValidationFactory] = None,
        parent=None
    ):
        super().__init__(parent)
        self.notifications = notifications or NotificationService(parent=self)
        self.validator = validator or FileValidationFactory()

        self._required: Optional[UploadedFile] = None
        self._optional: List[UploadedFile] = []
        self._errors: Dict[UploadSlot, Optional[str]] = {
            UploadSlot.REQUIRED: None,
            UploadSlot.OPTIONAL: None,
        }

    # ==================== Properties ====================

    @property
    def required_file(self) -> Optional[UploadedFile]:
        return self._required

    @property
    def optional_files(self) -> List[UploadedFile]:
        """Accepted optional files in upload order (copy)."""
        return list(self._optional)

    def error(self, slot: UploadSlot) -> Optional[str]:
        """Last validation message for a slot, or None."""
        return self._errors[UploadSlot(slot)]

    # ==================== Intake ====================

    def submit_required_file(self, file: IntakeFile) -> bool:
        """
        Validate a file and make it the required file.

        Returns:
            True if accepted. On rejection the previous file is kept.
        """
        rejection = self.validator.check(file)
        if rejection:
            logger.warning(f"Required file rejected: {file.name} ({rejection.reason.value})")
            self._report_error(UploadSlot.REQUIRED, rejection.message)
            return False

        previous = self._required
        self._required = self._new_upload(file)
        if previous is not None:
            logger.info(f"Required file replaced: {previous.name} -> {file.name}")
        else:
            logger.info(f"Required file accepted: {file.name} ({format_file_size(file.size)})")

        self._set_slot_error(UploadSlot.REQUIRED, None)
        self.slot_changed.emit(UploadSlot.REQUIRED.value)
        self.notifications.show_success("Pitch deck uploaded successfully!")
        return True

    def submit_optional_files(self, files: Iterable[IntakeFile]) -> List[UploadedFile]:
        """
        Validate each file independently and append the ones that pass.

        Returns:
            The newly accepted entries, in submission order
        """
        accepted: List[IntakeFile] = []
        rejected: List[FileRejection] = []
        for file in files:
            rejection = self.validator.check(file)
            if rejection:
                rejected.append(rejection)
            else:
                accepted.append(file)
        return self._apply_optional(accepted, rejected)

    def handle_drop(
        self,
        slot: UploadSlot,
        accepted: Sequence[IntakeFile],
        rejected: Sequence[FileRejection] = ()
    ):
        """
        Entry point for the drag-and-drop / browse surface.

        The surface reports accepted and rejected candidates separately;
        its rejection reasons are used as-is. Accepted candidates are still
        run through validation before being stored.
        """
        slot = UploadSlot(slot)
        logger.debug(f"Drop on {slot.value}: {len(accepted)} accepted, {len(rejected)} rejected")

        if slot is UploadSlot.REQUIRED:
            if rejected:
                self._report_error(slot, rejected[0].message)
                return
            if len(accepted) > 1:
                self._report_error(slot, RejectionReason.TOO_MANY_FILES.message)
                return
            if accepted:
                self.submit_required_file(accepted[0])
            return

        passed: List[IntakeFile] = []
        failed: List[FileRejection] = list(rejected)
        for file in accepted:
            rejection = self.validator.check(file)
            if rejection:
                failed.append(rejection)
            else:
                passed.append(file)
        self._apply_optional(passed, failed)

    # ==================== Removal ====================

    def remove_required_file(self):
        """Clear the required slot."""
        if self._required is not None:
            logger.info(f"Required file removed: {self._required.name}")
        self._required = None
        self.slot_changed.emit(UploadSlot.REQUIRED.value)

    def remove_optional_file(self, file_id: str) -> bool:
        """
        Remove an optional file by identifier. Unknown identifiers are a no-op.

        Returns:
            True if an entry was removed
        """
        remaining = [upload for upload in self._optional if upload.file_id != file_id]
        if len(remaining) == len(self._optional):
            logger.debug(f"No optional file with id {file_id}")
            return False

        self._optional = remaining
        logger.info(f"Optional file removed: {file_id}")
        self.slot_changed.emit(UploadSlot.OPTIONAL.value)
        return True

    # ==================== Finalization ====================

    def finalize(self) -> OperationResult[DocumentUploadData]:
        """
        Build the step payload. Only the required-file presence is checked here.
        """
        if self._required is None:
            self._set_slot_error(UploadSlot.REQUIRED, REQUIRED_FILE_MISSING)
            self.notifications.show_error(REQUIRED_DOCUMENTS_MISSING)
            self._emit_error("finalize", REQUIRED_FILE_MISSING)
            return OperationResult.fail(
                message=REQUIRED_DOCUMENTS_MISSING,
                errors=[REQUIRED_FILE_MISSING]
            )

        data = DocumentUploadData(
            required_file=self._required.file,
            optional_files=[upload.file for upload in self._optional],
        )
        self._log_operation(
            "finalize",
            required=self._required.name,
            optional=len(self._optional)
        )
        self._emit_completed("finalize", True)
        return OperationResult.ok(data=data)

    # ==================== State restore ====================

    def load(self, data: Optional[DocumentUploadData]):
        """
        Restore slots from a previously emitted payload (re-entering the step).

        No validation feedback is raised; stored files were validated when
        they were first accepted.
        """
        self.reset()
        if data is None:
            return
        self._required = self._new_upload(data.required_file)
        for file in data.optional_files:
            self._optional.append(self._new_upload(file))
        self.slot_changed.emit(UploadSlot.REQUIRED.value)
        self.slot_changed.emit(UploadSlot.OPTIONAL.value)

    def reset(self):
        """Empty both slots and clear their errors."""
        self._required = None
        self._optional = []
        for slot in UploadSlot:
            self._set_slot_error(slot, None)

    # ==================== Display ====================

    def display_rows(self, slot: UploadSlot) -> List[Tuple[str, str, str]]:
        """(file_id, name, formatted size) for each entry of a slot, in order."""
        slot = UploadSlot(slot)
        if slot is UploadSlot.REQUIRED:
            uploads = [self._required] if self._required else []
        else:
            uploads = self._optional
        return [(u.file_id, u.name, u.file.size_display) for u in uploads]

    # ==================== Internals ====================

    def _apply_optional(
        self,
        accepted: List[IntakeFile],
        rejected: List[FileRejection]
    ) -> List[UploadedFile]:
        new_uploads: List[UploadedFile] = []
        for file in accepted:
            upload = self._new_upload(file)
            self._optional.append(upload)
            new_uploads.append(upload)

        if new_uploads:
            logger.info(f"{len(new_uploads)} optional file(s) accepted")
            self.slot_changed.emit(UploadSlot.OPTIONAL.value)
            self.notifications.show_success(
                f"{len(new_uploads)} document(s) uploaded successfully!"
            )

        if rejected:
            names = ", ".join(r.file.name for r in rejected)
            logger.warning(f"{len(rejected)} optional file(s) rejected: {names}")
            self._report_error(UploadSlot.OPTIONAL, self._aggregate_message(rejected))
        elif new_uploads:
            self._set_slot_error(UploadSlot.OPTIONAL, None)

        return new_uploads

    @staticmethod
    def _aggregate_message(rejected: List[FileRejection]) -> str:
        details = "; ".join(f"{r.file.name} ({r.message})" for r in rejected)
        return f"{len(rejected)} file(s) rejected: {details}"

    def _report_error(self, slot: UploadSlot, message: str):
        self._set_slot_error(slot, message)
        self.notifications.show_error(message)

    def _set_slot_error(self, slot: UploadSlot, message: Optional[str]):
        if self._errors[slot] == message:
            return
        self._errors[slot] = message
        self.slot_error_changed.emit(slot.value, message or "")

    def _new_upload(self, file: IntakeFile) -> UploadedFile:
        used = {u.file_id for u in self._optional}
        if self._required is not None:
            used.add(self._required.file_id)
        file_id = generate_file_id()
        while file_id in used:
            file_id = generate_file_id()
        return UploadedFile(file=file, file_id=file_id)
