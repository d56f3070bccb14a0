"""Project configuration loaded from pyproject.toml."""

from __future__ import annotations

import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from threadsmith.text.models import ThreadConfig


class ThreadsmithConfig(BaseModel):
    """Configuration for threadsmith."""

    # Per-post limit in weighted characters
    max_post_length: int = 280

    # Soft validation thresholds
    max_mentions: int = 10
    max_hashtags: int = 5

    def thread_config(self) -> ThreadConfig:
        """Build the frozen per-call configuration from these settings."""
        return ThreadConfig(
            max_len=self.max_post_length,
            max_mentions=self.max_mentions,
            max_hashtags=self.max_hashtags,
        )


@lru_cache(maxsize=1)
def load_config() -> ThreadsmithConfig:
    """Load configuration from pyproject.toml.

    Returns:
        ThreadsmithConfig with settings from [tool.threadsmith] section,
        falling back to defaults if not found.
    """
    pyproject_path = _find_pyproject()
    if pyproject_path is None:
        return ThreadsmithConfig()

    with pyproject_path.open("rb") as f:
        data = tomllib.load(f)

    tool_config: dict[str, Any] = data.get("tool", {}).get("threadsmith", {})
    return ThreadsmithConfig(**tool_config)


def _find_pyproject() -> Path | None:
    """Find pyproject.toml by walking up from current file."""
    current = Path(__file__).resolve().parent
    for _ in range(10):  # Max 10 levels up
        candidate = current / "pyproject.toml"
        if candidate.exists():
            return candidate
        if current.parent == current:
            break
        current = current.parent
    return None
