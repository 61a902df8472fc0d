# -*- coding: utf-8 -*-
"""
Founder Onboarding Data Models
"""

from .uploaded_file import IntakeFile, UploadedFile, FileRejection, RejectionReason, UploadSlot
from .notification import Notification
from .profile import (
    UserIdentity,
    RoleSelection,
    BasicInfo,
    StartupProfile,
    DocumentUploadData,
    TeamMember,
    TeamData,
    AssessmentAnswers,
)
from .onboarding_step import OnboardingStep, StepEvent, StepOutcome

__all__ = [
    "IntakeFile",
    "UploadedFile",
    "FileRejection",
    "RejectionReason",
    "UploadSlot",
    "Notification",
    "UserIdentity",
    "RoleSelection",
    "BasicInfo",
    "StartupProfile",
    "DocumentUploadData",
    "TeamMember",
    "TeamData",
    "AssessmentAnswers",
    "OnboardingStep",
    "StepEvent",
    "StepOutcome",
]
