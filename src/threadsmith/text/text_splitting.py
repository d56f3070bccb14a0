"""Boundary-aware splitting of text into post-sized pieces.

Splitting happens in three tiers, each only used when the previous one
leaves something over budget:
1. Paragraphs (blank lines) always become separate posts
2. Sentences (after . ! ?) are greedily packed together
3. Words are greedily packed as a last resort

A word is never split. A single word longer than the budget is emitted
on its own and left over budget.
"""

from __future__ import annotations

import re

from threadsmith.text.char_counting import count_weighted_chars

PARAGRAPH_SEPARATOR = re.compile(r"\n\s*\n")
SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


def split_paragraphs(text: str) -> list[str]:
    """Split text on blank lines into trimmed, non-empty paragraphs."""
    paragraphs = (p.strip() for p in PARAGRAPH_SEPARATOR.split(text.strip()))
    return [p for p in paragraphs if p]


def _split_by_words(text: str, max_len: int) -> list[str]:
    """Greedily pack whitespace-separated words under max_len.

    Args:
        text: Sentence or paragraph to split
        max_len: Maximum weighted length per piece

    Returns:
        List of pieces joined with single spaces
    """
    pieces: list[str] = []
    current = ""

    for word in text.split():
        merged = f"{current} {word}" if current else word
        if count_weighted_chars(merged) <= max_len:
            current = merged
        else:
            if current:
                pieces.append(current)
            current = word

    if current:
        pieces.append(current)

    return pieces


def _split_by_sentences(text: str, max_len: int) -> list[str]:
    """Greedily pack sentences under max_len.

    Sentences that are too long on their own flush the running piece
    and fall through to word packing.

    Args:
        text: Paragraph that exceeds max_len
        max_len: Maximum weighted length per piece

    Returns:
        List of pieces in source order
    """
    sentences = [s for s in SENTENCE_BOUNDARY.split(text) if s]
    pieces: list[str] = []
    current = ""

    for sentence in sentences:
        if count_weighted_chars(sentence) > max_len:
            if current:
                pieces.append(current.strip())
                current = ""
            pieces.extend(_split_by_words(sentence, max_len))
            continue

        merged = f"{current} {sentence}" if current else sentence
        if count_weighted_chars(merged) <= max_len:
            current = merged
        else:
            if current:
                pieces.append(current.strip())
            current = sentence

    if current:
        pieces.append(current.strip())

    return pieces


def split_raw(paragraphs: list[str], max_len: int) -> list[str]:
    """Split paragraphs into unsuffixed pieces of at most max_len.

    Each paragraph that fits is kept whole; longer ones are broken by
    sentence and then by word.

    Args:
        paragraphs: Trimmed, non-empty paragraphs
        max_len: Budget per piece, already net of any suffix reservation

    Returns:
        List of pieces in source order
    """
    pieces: list[str] = []
    for paragraph in paragraphs:
        if count_weighted_chars(paragraph) <= max_len:
            pieces.append(paragraph)
        else:
            pieces.extend(_split_by_sentences(paragraph, max_len))
    return pieces
