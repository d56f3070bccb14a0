"""Unit tests for thread preview formatting."""

import pytest

from threadsmith.text import (
    ThreadPreview,
    count_weighted_chars,
    format_thread_preview,
    split_into_thread,
)


class TestFormatThreadPreview:
    """Tests for format_thread_preview."""

    @pytest.mark.unit
    def test_single_post(self) -> None:
        """Single post preview should number 1/1 and show its count."""
        result = format_thread_preview(["Hello world"])
        assert result.count == 1
        assert result.warning is None
        assert "1/1" in result.text
        assert f"{count_weighted_chars('Hello world')} chars" in result.text
        assert "Hello world" in result.text

    @pytest.mark.unit
    def test_exact_layout(self) -> None:
        """Entries should be 'i/N (cost chars)' then the post, blank-line separated."""
        result = format_thread_preview(["a", "bb"])
        assert result.text == "1/2 (1 chars)\na\n\n2/2 (2 chars)\nbb"

    @pytest.mark.unit
    def test_multi_post_numbering(self) -> None:
        """Each post should be numbered against the total."""
        result = format_thread_preview(["First tweet", "Second tweet", "Third tweet"])
        assert result.count == 3
        for label in ("1/3", "2/3", "3/3"):
            assert label in result.text

    @pytest.mark.unit
    def test_counts_are_weighted(self) -> None:
        """Counts should use weighted length, URLs and emoji included."""
        result = format_thread_preview(["Short", "A" * 280, "https://example.com/a/b/c \U0001f600"])
        assert "(5 chars)" in result.text
        assert "(280 chars)" in result.text
        assert "(26 chars)" in result.text

    @pytest.mark.unit
    def test_counts_include_suffix(self) -> None:
        """Counts are measured on posts as given, suffix included."""
        posts = split_into_thread("One.\n\nTwo.")
        result = format_thread_preview(posts)
        assert "1/2 (8 chars)\nOne. 1/2" in result.text

    @pytest.mark.unit
    def test_empty_thread(self) -> None:
        """No posts should give empty text and no warning."""
        assert format_thread_preview([]) == ThreadPreview(text="", count=0, warning=None)

    @pytest.mark.unit
    def test_no_warning_at_ten(self) -> None:
        """Ten posts is within the recommended maximum."""
        result = format_thread_preview(["Tweet content"] * 10)
        assert result.warning is None

    @pytest.mark.unit
    def test_warning_over_ten(self) -> None:
        """More than ten posts should produce a warning."""
        result = format_thread_preview(["Tweet content"] * 11)
        assert result.count == 11
        assert result.warning == "Thread has 11 tweets (recommended max: 10)"
