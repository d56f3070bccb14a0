"""Single-post validation against the platform limit.

Hard errors (block publishing):
- Weighted character count above the limit

Soft warnings (still publishable):
- Too many @mentions
- Too many #hashtags
"""

from __future__ import annotations

import re

from threadsmith.config import load_config
from threadsmith.text.char_counting import count_weighted_chars
from threadsmith.text.models import PostValidation, ThreadConfig

MENTION_PATTERN = re.compile(r"@\w+")
HASHTAG_PATTERN = re.compile(r"#\w+")


def validate_post(text: str, config: ThreadConfig | None = None) -> PostValidation:
    """Validate a post and return structured results.

    Args:
        text: Raw post text
        config: Limits to check against (default: from [tool.threadsmith] settings)

    Returns:
        PostValidation with errors and warnings
    """
    config = config or load_config().thread_config()
    char_count = count_weighted_chars(text)
    errors: list[str] = []
    warnings: list[str] = []

    if char_count > config.max_len:
        errors.append(f"Post is {char_count}/{config.max_len} characters")

    mention_count = len(MENTION_PATTERN.findall(text))
    if mention_count > config.max_mentions:
        warnings.append(
            f"{mention_count} mentions detected (recommended max: {config.max_mentions})"
        )

    hashtag_count = len(HASHTAG_PATTERN.findall(text))
    if hashtag_count > config.max_hashtags:
        warnings.append(
            f"{hashtag_count} hashtags detected (recommended max: {config.max_hashtags})"
        )

    return PostValidation(
        valid=not errors,
        char_count=char_count,
        max_chars=config.max_len,
        errors=errors,
        warnings=warnings,
    )
