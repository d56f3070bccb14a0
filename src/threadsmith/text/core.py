"""Thread splitting with position suffixes.

Posts in a multi-post thread carry a " i/N" suffix, and the suffix counts
against the per-post limit. Its length depends on N, which depends on how
much room is left after the suffix. This module resolves that with a small
bounded correction loop:

1. Reserve room for the longest possible suffix (" 10/10") and split
2. Re-reserve for the suffix the actual post count needs and re-split
3. Stop after MAX_CORRECTION_ROUNDS; if the last reservation is too small
   for the count it produced, use the worst-case split from step 1

N only changes suffix length when it crosses a power of ten, and the cap
keeps N at most 10, so two rounds are enough.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from threadsmith.config import load_config
from threadsmith.text.char_counting import count_weighted_chars
from threadsmith.text.models import (
    MAX_THREAD_POSTS,
    ThreadConfig,
    ThreadSplit,
)
from threadsmith.text.text_splitting import split_paragraphs, split_raw

logger = logging.getLogger(__name__)

MAX_CORRECTION_ROUNDS = 2


def _suffix(position: int, total: int) -> str:
    return f" {position}/{total}"


def _suffix_cost(total: int) -> int:
    """Weighted cost of the widest suffix in a thread of `total` posts."""
    return count_weighted_chars(_suffix(total, total))


def _reserve_and_split(paragraphs: list[str], max_len: int) -> list[str]:
    """Split paragraphs leaving room for the position suffix.

    Args:
        paragraphs: Trimmed, non-empty paragraphs
        max_len: Maximum weighted length per post, suffix included

    Returns:
        Unsuffixed posts; if more than one, each fits max_len once suffixed
    """
    worst_case = _suffix_cost(MAX_THREAD_POSTS)
    reserved = worst_case
    worst_case_posts = split_raw(paragraphs, max_len - reserved)
    posts = worst_case_posts

    for round_num in range(1, MAX_CORRECTION_ROUNDS + 1):
        if len(posts) <= 1:
            return posts
        needed = _suffix_cost(min(len(posts), MAX_THREAD_POSTS))
        if needed == reserved:
            return posts
        logger.debug(
            "Suffix reservation round %d: %d posts, reserving %d instead of %d",
            round_num,
            len(posts),
            needed,
            reserved,
        )
        reserved = needed
        posts = split_raw(paragraphs, max_len - reserved)

    if len(posts) > 1 and _suffix_cost(min(len(posts), MAX_THREAD_POSTS)) > reserved:
        logger.debug("Suffix reservation did not settle, using worst-case split")
        return worst_case_posts
    return posts


def split_thread(text: str, config: ThreadConfig | None = None) -> ThreadSplit:
    """Split text into a thread of posts respecting natural boundaries.

    Algorithm:
    1. Paragraphs (blank lines) always start a new post
    2. Long paragraphs are packed by sentence, long sentences by word
    3. Posts are capped at MAX_THREAD_POSTS and suffixed " i/N"

    Args:
        text: The text to split
        config: Limits to apply (default: from [tool.threadsmith] settings)

    Returns:
        ThreadSplit with the posts and the count before capping.
        Empty or whitespace-only text gives no posts.
    """
    config = config or load_config().thread_config()
    paragraphs = split_paragraphs(text)
    if not paragraphs:
        return ThreadSplit(posts=[], uncapped_count=0)

    # Single paragraph that fits -> single post, no suffix
    if len(paragraphs) == 1 and count_weighted_chars(paragraphs[0]) <= config.max_len:
        return ThreadSplit(posts=[paragraphs[0]], uncapped_count=1)

    posts = _reserve_and_split(paragraphs, config.max_len)
    if len(posts) == 1:
        return ThreadSplit(posts=posts, uncapped_count=1)

    uncapped_count = len(posts)
    if uncapped_count > MAX_THREAD_POSTS:
        logger.warning(
            "Thread needs %d posts, truncating to %d",
            uncapped_count,
            MAX_THREAD_POSTS,
        )
        posts = posts[:MAX_THREAD_POSTS]

    total = len(posts)
    suffixed = [f"{post}{_suffix(i, total)}" for i, post in enumerate(posts, 1)]
    return ThreadSplit(posts=suffixed, uncapped_count=uncapped_count)


def split_into_thread(text: str, max_len: int | None = None) -> list[str]:
    """Split text into post-sized chunks respecting natural boundaries.

    Args:
        text: The text to split
        max_len: Maximum weighted characters per post (default: configured
            max_post_length, 280 unless overridden)

    Returns:
        List of posts, empty list for empty/whitespace input
    """
    config = load_config().thread_config()
    if max_len is not None:
        config = replace(config, max_len=max_len)
    return split_thread(text, config).posts
