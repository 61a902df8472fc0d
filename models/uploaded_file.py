# -*- coding: utf-8 -*-
"""
Upload entity models used by the document intake.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from utils.helpers import format_file_size, generate_file_id


class UploadSlot(str, Enum):
    """Upload targets of the document-upload step."""
    REQUIRED = "pitch_deck"        # exactly one file
    OPTIONAL = "other_documents"   # any number of files


class RejectionReason(str, Enum):
    """Reason codes for a rejected candidate file."""
    FILE_INVALID_TYPE = "file-invalid-type"
    FILE_TOO_LARGE = "file-too-large"
    TOO_MANY_FILES = "too-many-files"
    FILE_REJECTED = "file-rejected"

    @property
    def message(self) -> str:
        """User-facing message for this reason."""
        messages = {
            RejectionReason.FILE_INVALID_TYPE: "Invalid file type. Please upload PDF, JPG, PNG, or DOCX.",
            RejectionReason.FILE_TOO_LARGE: "File size exceeds 10MB limit.",
            RejectionReason.TOO_MANY_FILES: "Too many files. Please upload a single file.",
            RejectionReason.FILE_REJECTED: "File rejected.",
        }
        return messages[self]

    @classmethod
    def from_code(cls, code: Optional[str]) -> "RejectionReason":
        """Map a drop-surface error code to a reason; unknown codes are generic rejections."""
        try:
            return cls(code)
        except ValueError:
            return cls.FILE_REJECTED


@dataclass(frozen=True)
class IntakeFile:
    """
    A candidate file as reported by the drag-and-drop or browse surface.

    Only the metadata is inspected; `content` is an opaque handle that is
    passed through untouched.
    """
    name: str
    media_type: str
    size: int  # bytes
    content: Any = field(default=None, compare=False, repr=False)

    @property
    def size_display(self) -> str:
        return format_file_size(self.size)

    def to_dict(self) -> dict:
        """Metadata only; the content handle is not serialisable."""
        return {
            "name": self.name,
            "media_type": self.media_type,
            "size": self.size,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "IntakeFile":
        return cls(
            name=data.get("name", ""),
            media_type=data.get("media_type", ""),
            size=int(data.get("size", 0)),
        )


@dataclass(frozen=True)
class UploadedFile:
    """An accepted file plus the identifier used to address it for removal."""
    file: IntakeFile
    file_id: str = field(default_factory=generate_file_id)

    @property
    def name(self) -> str:
        return self.file.name


@dataclass(frozen=True)
class FileRejection:
    """A candidate that failed validation, with its primary reason."""
    file: IntakeFile
    reason: RejectionReason

    @property
    def message(self) -> str:
        return self.reason.message
