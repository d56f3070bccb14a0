"""Core data models for thread splitting.

This module contains the dataclasses used throughout the text pipeline:
- ThreadConfig: Per-call limits for splitting and validation
- ThreadSplit: Suffixed posts plus the count before the thread cap
- ThreadPreview: Numbered, human-readable rendering of a thread
- PostValidation: Hard errors and soft warnings for a single post
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Platform limit for a single post, in weighted characters
DEFAULT_MAX_LEN = 280

# Hard cap on posts per thread; extra posts are dropped
MAX_THREAD_POSTS = 10


@dataclass(frozen=True)
class ThreadConfig:
    """Configuration for splitting and validating posts.

    Attributes:
        max_len: Maximum weighted length per post, suffix included (default: 280)
        max_mentions: Mentions above this count produce a warning (default: 10)
        max_hashtags: Hashtags above this count produce a warning (default: 5)
    """

    max_len: int = DEFAULT_MAX_LEN
    max_mentions: int = 10
    max_hashtags: int = 5


@dataclass(frozen=True)
class ThreadSplit:
    """Result of splitting text into a thread.

    Attributes:
        posts: Posts in source order; suffixed with " i/N" when more than one
        uncapped_count: Number of posts before truncation to MAX_THREAD_POSTS
    """

    posts: list[str]
    uncapped_count: int

    @property
    def truncated(self) -> bool:
        """True if posts were dropped by the thread cap."""
        return self.uncapped_count > len(self.posts)


@dataclass(frozen=True)
class ThreadPreview:
    """Numbered preview of a thread.

    Attributes:
        text: Entries of the form "i/N (cost chars)\\npost", blank-line separated
        count: Number of posts
        warning: Set when count exceeds MAX_THREAD_POSTS, otherwise None
    """

    text: str
    count: int
    warning: str | None


@dataclass(frozen=True)
class PostValidation:
    """Validation result for a single post.

    Attributes:
        valid: False only when there are hard errors
        char_count: Weighted character count
        max_chars: Limit the post was checked against
        errors: Blockers that prevent publishing
        warnings: Advisories that don't block publishing
    """

    valid: bool
    char_count: int
    max_chars: int
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
