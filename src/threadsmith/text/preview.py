"""Numbered thread preview with weighted character counts."""

from __future__ import annotations

from collections.abc import Sequence

from threadsmith.text.char_counting import count_weighted_chars
from threadsmith.text.models import MAX_THREAD_POSTS, ThreadPreview


def format_thread_preview(posts: Sequence[str]) -> ThreadPreview:
    """Format a thread as a numbered preview with character counts.

    Counts are measured on each post as given, suffix included.

    Args:
        posts: Posts in thread order

    Returns:
        ThreadPreview with the rendered text, post count, and optional warning
    """
    total = len(posts)
    text = "\n\n".join(
        f"{i}/{total} ({count_weighted_chars(post)} chars)\n{post}"
        for i, post in enumerate(posts, 1)
    )

    warning = None
    if total > MAX_THREAD_POSTS:
        warning = f"Thread has {total} tweets (recommended max: {MAX_THREAD_POSTS})"

    return ThreadPreview(text=text, count=total, warning=warning)
