# -*- coding: utf-8 -*-
"""
Base Step - Abstract base class for wizard steps.

A step owns the state of one screen. It never drives navigation itself:
its user actions return a StepOutcome which the wizard dispatches.

All wizard steps should inherit from this class and implement:
- collect_data(): Build the step's payload record (or None)
Optionally:
- validate(): Check the step's data
- populate_data(): Restore state when the step is shown again
"""

from typing import Any, List, Optional
from abc import ABCMeta, abstractmethod
from dataclasses import dataclass

from PyQt5.QtCore import QObject, pyqtSignal

from models.onboarding_step import OnboardingStep, StepEvent, StepOutcome


@dataclass
class StepValidationResult:
    """Result of step validation."""
    is_valid: bool
    errors: List[str]

    def add_error(self, message: str):
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False


# Combine PyQt5 metaclass with ABC metaclass
class ABCQObjectMeta(type(QObject), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseStep(QObject, metaclass=ABCQObjectMeta):
    """
    Abstract base class for wizard steps.

    Provides common functionality for:
    - Lifecycle (shown / hidden)
    - Data validation
    - Building outcomes for the wizard
    """

    STEP_ID: OnboardingStep = None
    TITLE: str = ""

    # Signals
    validation_changed = pyqtSignal(bool)

    def __init__(self, context: 'WizardContext', parent: Optional[QObject] = None):
        """
        Args:
            context: The wizard context (read-only for steps)
            parent: Parent object
        """
        super().__init__(parent)
        self.context = context
        self.is_active = False
        self.last_validation: StepValidationResult = self.create_validation_result()

    def on_show(self):
        """Called when the step becomes active."""
        self.is_active = True

    def on_hide(self):
        """Called when the wizard moves to another step."""
        self.is_active = False

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def collect_data(self) -> Any:
        """
        Collect the step's data.

        Returns:
            The step's payload record, or None for steps without data
        """
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def validate(self) -> StepValidationResult:
        """Validate the step's data. Default: always valid."""
        return self.create_validation_result()

    def populate_data(self, data: Any):
        """
        Restore the step from data stored by the wizard.

        Called every time the step becomes active, with the step's previous
        payload (or None the first time).
        """
        pass

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def outcome(self, event: StepEvent, payload: Any = None) -> StepOutcome:
        """Build an outcome raised by this step."""
        return StepOutcome.for_step(self.STEP_ID, event, payload)

    def validated_outcome(self, event: StepEvent) -> Optional[StepOutcome]:
        """
        Validate, then build an outcome carrying collect_data().

        Returns:
            The outcome, or None when validation fails (see last_validation)
        """
        result = self.validate()
        self.last_validation = result
        self.validation_changed.emit(result.is_valid)
        if not result.is_valid:
            return None
        return self.outcome(event, self.collect_data())

    def create_validation_result(self) -> StepValidationResult:
        """Create a new validation result object."""
        return StepValidationResult(is_valid=True, errors=[])
