# -*- coding: utf-8 -*-
"""
Onboarding Controllers
======================
Controller layer holding the state the onboarding steps act on.

Controllers provide:
- Standardized results via OperationResult
- Qt signals for UI updates
- Validation and business rules

Usage:
    from controllers import DocumentIntakeController

    intake = DocumentIntakeController(notifications)
    intake.submit_required_file(file)
    result = intake.finalize()
    if not result.success:
        print(f"Error: {result.message}")
"""

from controllers.base_controller import (
    BaseController,
    OperationResult,
)

from controllers.document_intake_controller import DocumentIntakeController

__all__ = [
    'BaseController',
    'OperationResult',
    'DocumentIntakeController',
]
