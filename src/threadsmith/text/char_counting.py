"""Weighted character counting for X/Twitter posts.

Implements the platform's v3 counting rules:
- Text is NFC-normalized before counting
- Every URL (with or without a scheme) counts as 23, however long it is
- Graphemes starting in the Latin-1/punctuation ranges count as 1
- Everything else (CJK, emoji, ...) counts as 2
- An emoji ZWJ sequence or a flag is one grapheme, so it counts as 2

Weights are kept on a x100 scale and the total is rounded up at the end.
"""

from __future__ import annotations

import re
import unicodedata

import grapheme

SCALE = 100
DEFAULT_WEIGHT = 200
URL_WEIGHT = 23

# Inclusive code point ranges weighted 100 (one character)
NARROW_RANGES: tuple[tuple[int, int], ...] = (
    (0, 4351),  # Latin-1 through extensions
    (8192, 8205),  # General punctuation through ZWJ
    (8208, 8223),  # Dashes and quotation marks
    (8242, 8247),  # Prime marks
)

# Matches only start at a token boundary so scanning stays linear
URL_PATTERN = re.compile(
    r"(?<![a-z0-9+.\-])[a-z][a-z0-9+.\-]*://[^\s<>\"]+"
    r"|(?<![a-z0-9.\-])(?:[a-z0-9](?:[-a-z0-9]*[a-z0-9])?\.)+[a-z]{2,}(?:/[^\s<>\"]*)?",
    re.IGNORECASE | re.ASCII,
)

# Sentence punctuation trailing a URL match is counted as plain text
TRAILING_PUNCT = re.compile(r"[.,);:!?]+$")


def code_point_weight(cp: int) -> int:
    """Return the scaled weight for a code point (100 or 200)."""
    for start, end in NARROW_RANGES:
        if start <= cp <= end:
            return SCALE
    return DEFAULT_WEIGHT


def strip_urls(text: str) -> tuple[str, int]:
    """Remove URLs from text, keeping any trailing sentence punctuation.

    Args:
        text: NFC-normalized text

    Returns:
        Tuple of (text without URLs, number of URLs removed)
    """
    url_count = 0

    def _replace(match: re.Match[str]) -> str:
        nonlocal url_count
        url = match.group(0)
        cleaned = TRAILING_PUNCT.sub("", url)
        url_count += 1
        return url[len(cleaned) :]

    return URL_PATTERN.sub(_replace, text), url_count


def count_weighted_chars(text: str) -> int:
    """Count characters the way the platform does.

    Args:
        text: Raw post text

    Returns:
        Weighted character count (0 for empty string)
    """
    if not text:
        return 0

    normalized = unicodedata.normalize("NFC", text)
    remainder, url_count = strip_urls(normalized)

    weighted_total = url_count * URL_WEIGHT * SCALE
    for cluster in grapheme.graphemes(remainder):
        weighted_total += code_point_weight(ord(cluster[0]))

    # Ceiling division keeps the arithmetic in integers
    return -(-weighted_total // SCALE)


# Short alias used by the splitter and preview
cost = count_weighted_chars
