# -*- coding: utf-8 -*-
"""
Validation Strategy Pattern - Pluggable rules for step records and uploads.

Record strategies check the form data a step is about to hand over.
File strategies check one candidate upload and report the reason code it
fails with, if any.
"""

import re
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from models.uploaded_file import IntakeFile, RejectionReason


class ValidationStrategy(ABC):
    """
    Abstract base class for record validation strategies.
    """

    @abstractmethod
    def validate(self, record: Dict) -> List[str]:
        """
        Validate a record and return list of error messages.

        Args:
            record: Dictionary containing record data to validate

        Returns:
            List of error messages (empty list if valid)
        """
        pass

    def is_valid(self, record: Dict) -> bool:
        return len(self.validate(record)) == 0


class GenericRequiredFieldsValidator(ValidationStrategy):
    """
    Checks that required fields exist and are not blank.
    """

    def __init__(self, required_fields: List[str], field_labels: Optional[Dict[str, str]] = None):
        """
        Args:
            required_fields: Field names that must be present and non-empty
            field_labels: Optional mapping of field names to human-readable labels
        """
        self.required_fields = list(required_fields)
        self.field_labels = field_labels or {}

    def validate(self, record: Dict) -> List[str]:
        errors = []

        for field in self.required_fields:
            label = self.field_labels.get(field, field)

            if field not in record:
                errors.append(f"{label} is required")
                continue

            value = record[field]
            if value is None or (isinstance(value, str) and not value.strip()):
                errors.append(f"{label} is required")

        return errors


class FileValidationStrategy(ABC):
    """
    Abstract base class for candidate-file checks.
    """

    @abstractmethod
    def validate(self, file: IntakeFile) -> Optional[RejectionReason]:
        """
        Check a candidate file.

        Returns:
            The reason the file fails this check, or None when it passes
        """
        pass

    def is_valid(self, file: IntakeFile) -> bool:
        return self.validate(file) is None


class MediaTypeValidator(FileValidationStrategy):
    """Accepts only the declared media types in the accepted set."""

    def __init__(self, accepted_types: Iterable[str]):
        self.accepted_types = {media_type.lower() for media_type in accepted_types}

    def validate(self, file: IntakeFile) -> Optional[RejectionReason]:
        if (file.media_type or "").lower() not in self.accepted_types:
            return RejectionReason.FILE_INVALID_TYPE
        return None


class FileSizeValidator(FileValidationStrategy):
    """
    Rejects files above a byte ceiling (the ceiling itself is allowed).
    A negative declared size is not a usable file and is rejected outright.
    """

    def __init__(self, max_bytes: int):
        self.max_bytes = max_bytes

    def validate(self, file: IntakeFile) -> Optional[RejectionReason]:
        if file.size < 0:
            return RejectionReason.FILE_REJECTED
        if file.size > self.max_bytes:
            return RejectionReason.FILE_TOO_LARGE
        return None


class EmailFieldValidator(ValidationStrategy):
    """
    Checks the format of an email field. A blank field passes; pair it
    with GenericRequiredFieldsValidator when the field is mandatory.
    """

    EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

    def __init__(self, field: str = "email", label: str = "Email"):
        self.field = field
        self.label = label

    def validate(self, record: Dict) -> List[str]:
        value = record.get(self.field)
        if not value or not str(value).strip():
            return []
        if not self.EMAIL_PATTERN.match(str(value).strip()):
            return [f"{self.label} is not a valid email address"]
        return []


class MinLengthValidator(ValidationStrategy):
    """Checks that a text field has at least `min_length` characters."""

    def __init__(self, field: str, min_length: int, label: Optional[str] = None):
        self.field = field
        self.min_length = min_length
        self.label = label or field

    def validate(self, record: Dict) -> List[str]:
        value = record.get(self.field) or ""
        if len(value) < self.min_length:
            return [f"{self.label} must be at least {self.min_length} characters"]
        return []
