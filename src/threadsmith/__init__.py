"""threadsmith - split long text into platform-sized post threads."""

from threadsmith.text import (
    count_weighted_chars,
    format_thread_preview,
    split_into_thread,
    split_thread,
    validate_post,
)

__all__ = [
    "count_weighted_chars",
    "format_thread_preview",
    "split_into_thread",
    "split_thread",
    "validate_post",
]
