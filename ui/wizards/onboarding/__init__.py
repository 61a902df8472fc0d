# -*- coding: utf-8 -*-
"""
Founder Onboarding Wizard Package.

This package contains:
- OnboardingContext: session state and profile accumulator
- OnboardingWizard: the step orchestrator
- Steps: one component per onboarding screen
"""

from .onboarding_context import OnboardingContext
from .onboarding_wizard import OnboardingWizard, ProgressEntry

__all__ = [
    'OnboardingContext',
    'OnboardingWizard',
    'ProgressEntry'
]
