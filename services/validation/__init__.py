# -*- coding: utf-8 -*-
"""Validation services package."""

from .validation_strategy import (
    ValidationStrategy,
    GenericRequiredFieldsValidator,
    EmailFieldValidator,
    MinLengthValidator,
    FileValidationStrategy,
    MediaTypeValidator,
    FileSizeValidator,
)
from .validation_factory import ValidationFactory, FileValidationFactory

__all__ = [
    'ValidationStrategy',
    'GenericRequiredFieldsValidator',
    'EmailFieldValidator',
    'MinLengthValidator',
    'FileValidationStrategy',
    'MediaTypeValidator',
    'FileSizeValidator',
    'ValidationFactory',
    'FileValidationFactory',
]
