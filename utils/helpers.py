# -*- coding: utf-8 -*-
"""
Utility helper functions.
"""

import math
import uuid

SIZE_UNITS = ("Bytes", "KB", "MB", "GB")


def format_file_size(size_bytes: int) -> str:
    """
    Format a byte count for display using base-1024 units.

    Args:
        size_bytes: Size in bytes

    Returns:
        Size with two-decimal precision and trailing zeros dropped,
        e.g. "1.5 MB" or "2 MB"
    """
    if size_bytes < 0:
        raise ValueError(f"File size cannot be negative: {size_bytes}")

    # log(0) is undefined
    if size_bytes == 0:
        return "0 Bytes"

    index = min(int(math.floor(math.log(size_bytes, 1024))), len(SIZE_UNITS) - 1)
    value = size_bytes / math.pow(1024, index)

    # math.log can land a hair below an exact power of 1024
    if value >= 1024 and index < len(SIZE_UNITS) - 1:
        index += 1
        value = size_bytes / math.pow(1024, index)

    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {SIZE_UNITS[index]}"


def generate_file_id() -> str:
    """Short random identifier for addressing an uploaded file in the session."""
    return uuid.uuid4().hex[:12]
