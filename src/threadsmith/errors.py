"""Named failure kinds reported by threadsmith and its collaborators.

The text core (counting, splitting, preview) never raises. These errors
come from the timezone utility and from the media providers behind
threadsmith.interfaces, and are passed to the caller without retries.
"""

from __future__ import annotations


class ThreadsmithError(Exception):
    """Base exception for all threadsmith errors."""

    pass


# =============================================================================
# SCHEDULING
# =============================================================================


class InvalidTimezoneError(ThreadsmithError):
    """Raised when a zone is not a valid IANA identifier."""

    def __init__(self, zone: str) -> None:
        super().__init__(f"Invalid timezone: {zone}")
        self.zone = zone


class InvalidDateError(ThreadsmithError):
    """Raised when a date is malformed or not on the calendar."""

    def __init__(self, date: str) -> None:
        super().__init__(f"Invalid date: {date}. Expected YYYY-MM-DD")
        self.date = date


class InvalidTimeError(ThreadsmithError):
    """Raised when a time is malformed or out of range."""

    def __init__(self, time: str) -> None:
        super().__init__(f"Invalid time: {time}. Expected HH:MM")
        self.time = time


# =============================================================================
# MEDIA
# =============================================================================


class SizeLimitExceededError(ThreadsmithError):
    """Raised when an image is still too large after maximum compression."""

    def __init__(self, size_bytes: int, max_bytes: int) -> None:
        super().__init__(
            f"Image is {size_bytes} bytes after compression (limit: {max_bytes})"
        )
        self.size_bytes = size_bytes
        self.max_bytes = max_bytes


class VideoGenerationError(ThreadsmithError):
    """Raised when a video provider fails, whatever the provider's own error."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"generation failed: {reason}")
        self.reason = reason
