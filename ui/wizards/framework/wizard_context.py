# -*- coding: utf-8 -*-
"""
Wizard Context - Base class for wizard session state.

Holds:
- The current step key
- Completed step tracking
- The step-data accumulator (one entry per step key, overwritten on
  re-completion, never merged)
"""

from typing import Dict, Any, Optional
from datetime import datetime
from abc import ABC, abstractmethod
import uuid


class WizardContext(ABC):
    """
    Base class for wizard context.

    All wizard contexts should inherit from this class and implement:
    - to_dict(): Serialize context to dictionary
    - from_dict(): Restore context from dictionary
    """

    def __init__(self):
        self.wizard_id: str = str(uuid.uuid4())
        self.status: str = "in_progress"  # in_progress, completed
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = datetime.now()
        self.current_step: Optional[str] = None

        # Step completion tracking
        self.completed_steps: set = set()

        # Step data accumulator, keyed by step
        self.data: Dict[str, Any] = {}

    def mark_step_completed(self, step_key: str):
        """Mark a step as completed."""
        self.completed_steps.add(step_key)
        self.updated_at = datetime.now()

    def is_step_completed(self, step_key: str) -> bool:
        return step_key in self.completed_steps

    def record_step_data(self, step_key: str, value: Any):
        """Store a step's data, replacing whatever that step stored before."""
        self.data[step_key] = value
        self.updated_at = datetime.now()

    def get_step_data(self, step_key: str, default: Any = None) -> Any:
        return self.data.get(step_key, default)

    def clear(self):
        """Forget all progress (new session on the same context object)."""
        self.status = "in_progress"
        self.current_step = None
        self.completed_steps = set()
        self.data = {}
        self.updated_at = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize context to dictionary.

        Subclasses should call super().to_dict() and add their own fields.
        """
        return {
            "wizard_id": self.wizard_id,
            "status": self.status,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "current_step": self.current_step,
            "completed_steps": sorted(self.completed_steps),
        }

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WizardContext':
        """
        Restore context from dictionary.

        Subclasses must implement this method.
        """
        pass

    @classmethod
    def _restore_base_fields(cls, context: 'WizardContext', data: Dict[str, Any]):
        """Helper method to restore base fields from dictionary."""
        context.wizard_id = data.get("wizard_id", context.wizard_id)
        context.status = data.get("status", "in_progress")
        context.current_step = data.get("current_step")
        context.completed_steps = set(data.get("completed_steps", []))

        if "created_at" in data:
            context.created_at = datetime.fromisoformat(data["created_at"])
        if "updated_at" in data:
            context.updated_at = datetime.fromisoformat(data["updated_at"])
