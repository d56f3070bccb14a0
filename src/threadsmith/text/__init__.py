"""Text package - weighted counting and thread splitting for posts.

This package turns free-form text into a thread of platform-sized posts,
counting characters with the platform's weighted rules.

Public API:
- ThreadConfig: Frozen per-call limits
- ThreadSplit: Posts plus the count before the thread cap
- ThreadPreview: Numbered preview of a thread
- PostValidation: Errors and warnings for a single post
- count_weighted_chars / cost: Weighted character counting
- split_into_thread: Text to list of suffixed posts
- split_thread: Same, returning a ThreadSplit
- format_thread_preview: Numbered preview with counts
- validate_post: Limit check with mention/hashtag warnings
"""

from threadsmith.text.char_counting import (
    URL_WEIGHT,
    cost,
    count_weighted_chars,
)
from threadsmith.text.core import split_into_thread, split_thread
from threadsmith.text.models import (
    DEFAULT_MAX_LEN,
    MAX_THREAD_POSTS,
    PostValidation,
    ThreadConfig,
    ThreadPreview,
    ThreadSplit,
)
from threadsmith.text.preview import format_thread_preview
from threadsmith.text.text_splitting import split_paragraphs
from threadsmith.text.validation import validate_post

__all__ = [
    # Constants
    "DEFAULT_MAX_LEN",
    "MAX_THREAD_POSTS",
    "URL_WEIGHT",
    # Models
    "PostValidation",
    "ThreadConfig",
    "ThreadPreview",
    "ThreadSplit",
    # Public API - Counting
    "cost",
    "count_weighted_chars",
    # Public API - Splitting
    "split_into_thread",
    "split_paragraphs",
    "split_thread",
    # Public API - Output
    "format_thread_preview",
    "validate_post",
]
