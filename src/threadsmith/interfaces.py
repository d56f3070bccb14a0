"""Contracts for the collaborators around the thread core.

Storage, publish scheduling and media processing live outside threadsmith.
These protocols describe what callers plug in; nothing here implements them.
Failures are reported with the named errors in threadsmith.errors.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PostStore(Protocol):
    """Storage for posts/threads and their lifecycle status."""

    def insert(self, record: dict[str, Any]) -> str:
        """Store a record and return its id."""
        ...

    def update_status(self, post_id: str, **fields: Any) -> None:
        """Update status fields on an existing record."""
        ...

    def get_by_id(self, post_id: str) -> dict[str, Any] | None:
        """Return the record, or None if absent."""
        ...


@runtime_checkable
class PublishScheduler(Protocol):
    """Dispatches a publish job now or after a delay."""

    def schedule(self, payload: dict[str, Any], delay: float | None = None) -> str:
        """Schedule a job and return a run handle."""
        ...

    def cancel(self, handle: str) -> None:
        """Cancel a run. Must not raise if it already finished or was cancelled."""
        ...


@runtime_checkable
class ImageProcessor(Protocol):
    """Resizes and compresses images to platform limits."""

    def resize(
        self,
        image: bytes,
        target_dims: tuple[int, int],
        fmt: str,
        max_bytes: int,
    ) -> bytes:
        """Return the processed image.

        Raises:
            SizeLimitExceededError: If max_bytes cannot be met
        """
        ...


@runtime_checkable
class VideoGenerator(Protocol):
    """AI video generation provider."""

    def generate_video(self, params: dict[str, Any]) -> bytes:
        """Return the generated video.

        Raises:
            VideoGenerationError: For any provider failure
        """
        ...
