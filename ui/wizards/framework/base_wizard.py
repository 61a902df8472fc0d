# -*- coding: utf-8 -*-
"""
Base Wizard - Abstract base class for wizards.

Owns the session context, the step components and the navigator, and
consumes the outcomes raised by the active step:
- Outcomes from a step other than the active one are ignored
- A payload is stored under the originating step, replacing the old value
- Forward transitions mark the originating step completed
- The newly active step is re-populated from its stored data
"""

from typing import Any, Dict, List, Optional, Sequence
from abc import abstractmethod

from PyQt5.QtCore import QObject, pyqtSignal

from models.onboarding_step import StepEvent, StepOutcome
from .base_step import ABCQObjectMeta, BaseStep
from .error_boundary import ErrorBoundary
from .step_navigator import StepNavigator, TransitionTable
from .wizard_context import WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)


class BaseWizard(QObject, metaclass=ABCQObjectMeta):
    """
    Abstract base class for wizards.

    Subclasses must implement:
    - create_context(): Create and return wizard context
    - create_steps(): Create the step components, keyed by step
    - create_transitions(): (step, event) -> step table
    - get_step_order(): All steps in linear order
    """

    # Signals
    step_changed = pyqtSignal(str, str)  # old_step, new_step
    transition_ignored = pyqtSignal(str, str)  # step, event
    step_data_recorded = pyqtSignal(str)  # step
    wizard_completed = pyqtSignal(dict)

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)

        self.context = self.create_context()
        self.error_boundary = ErrorBoundary(self)
        self.steps: Dict[str, BaseStep] = {
            self._key(step_id): step for step_id, step in self.create_steps().items()
        }

        self.navigator = StepNavigator(
            self.context,
            {
                (self._key(source), self._key(event)): self._key(target)
                for (source, event), target in self.create_transitions().items()
            },
            [self._key(step) for step in self.get_step_order()],
        )
        self.navigator.step_changed.connect(self.step_changed.emit)
        self.navigator.transition_ignored.connect(self.transition_ignored.emit)

        self._show_step(self.navigator.current_step)

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def create_context(self) -> WizardContext:
        pass

    @abstractmethod
    def create_steps(self) -> Dict[Any, BaseStep]:
        pass

    @abstractmethod
    def create_transitions(self) -> TransitionTable:
        pass

    @abstractmethod
    def get_step_order(self) -> Sequence[Any]:
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def intercept(self, outcome: StepOutcome) -> bool:
        """
        Handle an outcome that does not move to another step.

        Returns:
            True if the outcome was handled and must not be looked up
            in the transition table
        """
        return False

    def store_payload(self, outcome: StepOutcome):
        """Record an outcome's payload under its originating step."""
        key = self._key(outcome.step)
        self.context.record_step_data(key, outcome.payload)
        logger.debug(f"Stored data for step {key}")
        self.step_data_recorded.emit(key)

    def injected_data(self, step_key: str) -> Any:
        """Data handed to a step when it becomes active."""
        return self.context.get_step_data(step_key)

    # =========================================================================
    # Dispatch
    # =========================================================================

    @property
    def current_step(self) -> str:
        return self.navigator.current_step

    def current_step_component(self) -> Optional[BaseStep]:
        return self.steps.get(self.navigator.current_step)

    def dispatch(self, outcome: Optional[StepOutcome]) -> str:
        """
        Consume an outcome raised by the active step.

        Returns:
            The active step after the outcome has been handled
        """
        current = self.navigator.current_step
        if outcome is None:
            logger.debug(f"No outcome from {current} (step rejected its own input)")
            return current

        source = self._key(outcome.step)
        event = self._key(outcome.event)

        if source != current:
            self.navigator.ignore(source, event, f"step is not active (active: {current})")
            return current

        if self.intercept(outcome):
            return self.navigator.current_step

        target = self.navigator.resolve(event)
        if target is None:
            self.navigator.ignore(source, event, "no transition")
            return current

        if outcome.has_payload:
            self.store_payload(outcome)
        if outcome.event is not StepEvent.BACK:
            self.context.mark_step_completed(source)

        self._activate(target)
        return self.navigator.current_step

    def allowed_events(self) -> List[str]:
        return self.navigator.allowed_events()

    def reset(self):
        """Start over: initial step, no stored data."""
        old_step = self.navigator.current_step
        self._hide_step(old_step)
        self.context.clear()
        self.context.current_step = self.navigator.initial_step
        logger.info("Wizard reset")
        if old_step != self.navigator.initial_step:
            self.step_changed.emit(old_step, self.navigator.initial_step)
        self._show_step(self.navigator.initial_step)

    # =========================================================================
    # Step lifecycle
    # =========================================================================

    def _activate(self, target: str):
        old_step = self.navigator.current_step
        self._hide_step(old_step)
        self.navigator.move_to(target)
        self._show_step(target)

    def _show_step(self, step_key: str):
        step = self.steps.get(step_key)
        if step is None:
            return
        self.error_boundary.run(step_key, "on_show", step.on_show)
        self.error_boundary.run(step_key, "populate_data", step.populate_data, self.injected_data(step_key))

    def _hide_step(self, step_key: str):
        step = self.steps.get(step_key)
        if step is None:
            return
        self.error_boundary.run(step_key, "on_hide", step.on_hide)

    @staticmethod
    def _key(value: Any) -> str:
        """Plain string key for enum members and strings alike."""
        return getattr(value, "value", value)
