# -*- coding: utf-8 -*-
"""
Step Navigator - Table-driven navigation between wizard steps.

Handles:
- Resolving (current step, event) pairs against a transition table
- Falling back to the initial step when the context holds an unknown step
- Progress tracking along the linear step order
"""

from typing import Dict, List, Optional, Sequence, Tuple

from PyQt5.QtCore import QObject, pyqtSignal

from .wizard_context import WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)

TransitionTable = Dict[Tuple[str, str], str]


class StepNavigator(QObject):
    """
    Finite state machine over step keys.

    The navigator never raises: unknown events leave the step unchanged
    and unknown steps are recovered to the initial step.
    """

    # Signals
    step_changed = pyqtSignal(str, str)  # old_step, new_step
    transition_ignored = pyqtSignal(str, str)  # step, event

    def __init__(
        self,
        context: WizardContext,
        transitions: TransitionTable,
        step_order: Sequence[str],
        initial_step: Optional[str] = None
    ):
        """
        Initialize the navigator.

        Args:
            context: Wizard context holding the current step
            transitions: (from_step, event) -> to_step
            step_order: Every valid step key, in linear order
            initial_step: Start and fallback step (defaults to the first key)
        """
        super().__init__()
        self.context = context
        self.transitions = dict(transitions)
        self.step_order: List[str] = list(step_order)
        self.initial_step = initial_step or self.step_order[0]

        for (source, _event), target in self.transitions.items():
            if source not in self.step_order or target not in self.step_order:
                raise ValueError(f"Transition references unknown step: {source} -> {target}")

        if self.context.current_step is None:
            self.context.current_step = self.initial_step

    @property
    def current_step(self) -> str:
        """The active step; an unknown value is replaced by the initial step."""
        step = self.context.current_step
        if step not in self.step_order:
            logger.warning(f"Unknown step {step!r}, falling back to {self.initial_step}")
            step = self.initial_step
            self.context.current_step = step
        return step

    def allowed_events(self) -> List[str]:
        """Events with a transition out of the current step."""
        current = self.current_step
        return [event for (source, event) in self.transitions if source == current]

    def resolve(self, event: str) -> Optional[str]:
        """Target step for an event from the current step, or None."""
        return self.transitions.get((self.current_step, event))

    def ignore(self, step: str, event: str, reason: str):
        logger.warning(f"Ignoring event {event!r} from {step!r}: {reason}")
        self.transition_ignored.emit(step, event)

    def move_to(self, new_step: str) -> bool:
        """
        Make a step current.

        Returns:
            True if the step changed
        """
        if new_step not in self.step_order:
            logger.error(f"Invalid step: {new_step!r}")
            return False

        old_step = self.current_step
        if new_step == old_step:
            return False

        self.context.current_step = new_step
        logger.info(f"Navigation: {old_step} -> {new_step}")
        self.step_changed.emit(old_step, new_step)
        return True

    def get_progress_percentage(self) -> float:
        """
        Position of the current step along the linear order.

        Returns:
            Progress percentage (0.0 to 100.0)
        """
        if len(self.step_order) <= 1:
            return 0.0
        return (self.step_order.index(self.current_step) / (len(self.step_order) - 1)) * 100.0
