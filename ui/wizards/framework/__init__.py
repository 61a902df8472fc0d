# -*- coding: utf-8 -*-
"""
Wizard Framework - Table-driven multi-step wizards.

Provides base classes for wizards whose steps return outcomes that a
navigator resolves against a transition table.
"""

from .base_wizard import BaseWizard
from .base_step import BaseStep, StepValidationResult
from .error_boundary import ErrorBoundary
from .wizard_context import WizardContext
from .step_navigator import StepNavigator

__all__ = [
    'BaseWizard',
    'BaseStep',
    'StepValidationResult',
    'ErrorBoundary',
    'WizardContext',
    'StepNavigator'
]
