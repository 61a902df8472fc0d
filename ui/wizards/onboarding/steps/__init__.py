# -*- coding: utf-8 -*-
"""
Onboarding Steps Package.

One step component per onboarding screen:
- Login / Sign up / Forgot password
- Role selection / Welcome back
- Basic info / Startup profile / Document upload / Add team
- Assessment intro / Assessment / Completion
"""

from .login_step import LoginStep
from .signup_step import SignUpStep
from .forgot_password_step import ForgotPasswordStep
from .role_selection_step import RoleSelectionStep
from .welcome_back_step import WelcomeBackStep
from .basic_info_step import BasicInfoStep
from .startup_profile_step import StartupProfileStep
from .document_upload_step import DocumentUploadStep
from .add_team_step import AddTeamStep
from .assessment_steps import AssessmentIntroStep, AssessmentStep, CompletionStep

__all__ = [
    'LoginStep',
    'SignUpStep',
    'ForgotPasswordStep',
    'RoleSelectionStep',
    'WelcomeBackStep',
    'BasicInfoStep',
    'StartupProfileStep',
    'DocumentUploadStep',
    'AddTeamStep',
    'AssessmentIntroStep',
    'AssessmentStep',
    'CompletionStep'
]
