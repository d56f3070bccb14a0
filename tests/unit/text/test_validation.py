"""Unit tests for single-post validation."""

import pytest

from threadsmith.text import ThreadConfig, validate_post


class TestValidatePost:
    """Tests for validate_post."""

    @pytest.mark.unit
    def test_valid_short_post(self) -> None:
        """A short post should be valid with no errors."""
        result = validate_post("Hello world")
        assert result.valid
        assert result.errors == []
        assert result.char_count == 11
        assert result.max_chars == 280

    @pytest.mark.unit
    def test_over_limit_is_invalid(self) -> None:
        """A post over 280 should be a hard error."""
        result = validate_post("A" * 281)
        assert not result.valid
        assert result.errors == ["Post is 281/280 characters"]

    @pytest.mark.unit
    def test_exactly_at_limit(self) -> None:
        """A post of exactly 280 should be valid."""
        result = validate_post("A" * 280)
        assert result.valid
        assert result.char_count == 280

    @pytest.mark.unit
    def test_too_many_mentions_warns(self) -> None:
        """Eleven mentions should warn but stay valid."""
        text = " ".join(f"@user{i}" for i in range(11))
        result = validate_post(text)
        assert result.valid
        assert result.warnings == ["11 mentions detected (recommended max: 10)"]

    @pytest.mark.unit
    def test_too_many_hashtags_warns(self) -> None:
        """Six hashtags should warn but stay valid."""
        text = " ".join(f"#tag{i}" for i in range(6))
        result = validate_post(text)
        assert result.valid
        assert result.warnings == ["6 hashtags detected (recommended max: 5)"]

    @pytest.mark.unit
    def test_error_and_warning_together(self) -> None:
        """An oversized post with excess mentions reports both."""
        mentions = " ".join(f"@user{i}" for i in range(11))
        result = validate_post(f"{mentions} {'X' * 250}")
        assert not result.valid
        assert len(result.errors) == 1
        assert len(result.warnings) == 1

    @pytest.mark.unit
    def test_custom_limits(self) -> None:
        """Limits should come from ThreadConfig."""
        config = ThreadConfig(max_len=10, max_hashtags=1)
        result = validate_post("#one #two words", config)
        assert result.errors == ["Post is 15/10 characters"]
        assert result.warnings == ["2 hashtags detected (recommended max: 1)"]
        assert result.max_chars == 10
