# -*- coding: utf-8 -*-
"""
Validation Factory - Creates validators for step records and uploads.

Provides a central point for the rules each onboarding step applies
before it emits its data.
"""

from typing import Dict, List, Optional

from app.config import Config
from models.uploaded_file import FileRejection, IntakeFile, RejectionReason
from .validation_strategy import (
    EmailFieldValidator,
    FileSizeValidator,
    FileValidationStrategy,
    GenericRequiredFieldsValidator,
    MediaTypeValidator,
    MinLengthValidator,
    ValidationStrategy,
)

MIN_PASSWORD_LENGTH = 8


class ValidationFactory:
    """
    Registry of record validators keyed by record type.

    Several validators can be registered for one record type; their
    errors are reported in registration order.
    """

    def __init__(self):
        self._validators: Dict[str, List[ValidationStrategy]] = {}
        self._register_default_validators()

    def _register_default_validators(self):
        """Register the validators used by the onboarding steps."""
        self.register_validator(
            'credentials',
            GenericRequiredFieldsValidator(
                required_fields=['email', 'password'],
                field_labels={'email': 'Email', 'password': 'Password'}
            )
        )
        self.register_validator('credentials', EmailFieldValidator())

        self.register_validator(
            'signup',
            GenericRequiredFieldsValidator(
                required_fields=['email', 'password'],
                field_labels={'email': 'Email', 'password': 'Password'}
            )
        )
        self.register_validator('signup', EmailFieldValidator())
        self.register_validator(
            'signup', MinLengthValidator('password', MIN_PASSWORD_LENGTH, 'Password')
        )

        self.register_validator(
            'role_selection',
            GenericRequiredFieldsValidator(
                required_fields=['role'],
                field_labels={'role': 'Role'}
            )
        )

        self.register_validator(
            'basic_info',
            GenericRequiredFieldsValidator(
                required_fields=['full_name', 'email'],
                field_labels={
                    'full_name': 'Full name',
                    'email': 'Email'
                }
            )
        )
        self.register_validator('basic_info', EmailFieldValidator())

        self.register_validator(
            'startup_profile',
            GenericRequiredFieldsValidator(
                required_fields=['startup_name', 'industry', 'stage'],
                field_labels={
                    'startup_name': 'Startup name',
                    'industry': 'Industry',
                    'stage': 'Stage'
                }
            )
        )

        self.register_validator(
            'team_member',
            GenericRequiredFieldsValidator(
                required_fields=['name', 'role'],
                field_labels={
                    'name': 'Member name',
                    'role': 'Member role'
                }
            )
        )
        self.register_validator('team_member', EmailFieldValidator(label='Member email'))

    def register_validator(self, record_type: str, validator: ValidationStrategy):
        """Append a validation strategy for a record type."""
        self._validators.setdefault(record_type.lower(), []).append(validator)

    def get_validators(self, record_type: str) -> List[ValidationStrategy]:
        return list(self._validators.get(record_type.lower(), []))

    def validate(self, record: Dict, record_type: str) -> List[str]:
        """
        Validate a record using every validator registered for its type.

        Returns:
            List of error messages (empty if valid)
        """
        validators = self.get_validators(record_type)
        if not validators:
            return [f"No validator registered for record type: {record_type}"]

        errors: List[str] = []
        for validator in validators:
            errors.extend(validator.validate(record))
        return errors

    def is_valid(self, record: Dict, record_type: str) -> bool:
        return len(self.validate(record, record_type)) == 0

    def get_registered_types(self) -> List[str]:
        return list(self._validators.keys())


class FileValidationFactory:
    """
    Ordered chain of file checks shared by both upload slots.

    Type is checked before size, so a file failing both reports the
    type error.
    """

    def __init__(self, accepted_types: Optional[Dict] = None, max_bytes: Optional[int] = None):
        self.accepted_types = (
            accepted_types if accepted_types is not None else Config.accepted_media_types()
        )
        self.max_bytes = max_bytes if max_bytes is not None else Config.MAX_UPLOAD_BYTES
        self._strategies: List[FileValidationStrategy] = [
            MediaTypeValidator(self.accepted_types),
            FileSizeValidator(self.max_bytes),
        ]

    def reasons(self, file: IntakeFile) -> List[RejectionReason]:
        """Every reason the file fails, in check order."""
        return [reason for reason in (s.validate(file) for s in self._strategies) if reason]

    def check(self, file: IntakeFile) -> Optional[FileRejection]:
        """
        Returns:
            A FileRejection carrying the first failing reason, or None if accepted
        """
        reasons = self.reasons(file)
        if reasons:
            return FileRejection(file=file, reason=reasons[0])
        return None
