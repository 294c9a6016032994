"""Data model for the per-run settings every item builder needs."""

from dataclasses import dataclass
from pathlib import Path

from apidata.highlight_code import DEFAULT_LANGUAGE


@dataclass(frozen=True)
class BuildContext:
    """Settings resolved once at startup and shared by all builders."""

    repository_base: str  # e.g. https://github.com/nhn/tui.grid/blob/v4.0.0/
    project_root: Path
    example_language: str = DEFAULT_LANGUAGE
