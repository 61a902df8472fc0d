# -*- coding: utf-8 -*-
"""
Per-step payload records collected into the onboarding profile.

Each record is the data one step hands to the wizard when it finishes.
All records round-trip through to_dict()/from_dict() so a session can
be snapshotted and restored.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

from models.uploaded_file import IntakeFile


@dataclass
class UserIdentity:
    """Authenticated user returned by the credential check."""
    user_id: str = ""
    email: str = ""
    display_name: str = ""

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "UserIdentity":
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})


@dataclass
class RoleSelection:
    """Role chosen on the role-selection step (founder, investor, mentor...)."""
    role: str = ""

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "RoleSelection":
        return cls(role=data.get("role", ""))


@dataclass
class BasicInfo:
    """Personal details of the founder."""
    full_name: str = ""
    email: str = ""
    phone: Optional[str] = None
    location: Optional[str] = None
    linkedin_url: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "BasicInfo":
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})


@dataclass
class StartupProfile:
    """Company details."""
    startup_name: str = ""
    industry: str = ""
    stage: str = ""
    description: str = ""
    website: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "StartupProfile":
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})


@dataclass
class DocumentUploadData:
    """Finalized output of the document intake."""
    required_file: IntakeFile
    optional_files: List[IntakeFile] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "required_file": self.required_file.to_dict(),
            "optional_files": [f.to_dict() for f in self.optional_files],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DocumentUploadData":
        return cls(
            required_file=IntakeFile.from_dict(data["required_file"]),
            optional_files=[IntakeFile.from_dict(f) for f in data.get("optional_files", [])],
        )


@dataclass
class TeamMember:
    name: str = ""
    role: str = ""
    email: Optional[str] = None


@dataclass
class TeamData:
    """Co-founders and key team members."""
    members: List[TeamMember] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"members": [asdict(m) for m in self.members]}

    @classmethod
    def from_dict(cls, data: dict) -> "TeamData":
        return cls(members=[TeamMember(**m) for m in data.get("members", [])])


@dataclass
class AssessmentAnswers:
    """Answers of the psychological assessment, keyed by question id."""
    answers: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {"answers": dict(self.answers)}

    @classmethod
    def from_dict(cls, data: dict) -> "AssessmentAnswers":
        return cls(answers=dict(data.get("answers", {})))
