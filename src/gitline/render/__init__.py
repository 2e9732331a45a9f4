"""Prompt rendering: bounded segment buffer, segment producers, assembly."""

from ._buffer import (
    DEFAULT_CAPACITY,
    RESET,
    SEPARATOR_GLYPH,
    PromptBuffer,
    color_pair,
    escape_prompt_text,
    foreground,
)
from ._context import PromptData, abbreviate_home
from ._prompt import build_prompt, render_prompt
from ._segments import git_segment_text, short_directory
from ._styles import SegmentStyle

__all__ = [
    "DEFAULT_CAPACITY",
    "RESET",
    "SEPARATOR_GLYPH",
    "PromptBuffer",
    "PromptData",
    "SegmentStyle",
    "abbreviate_home",
    "build_prompt",
    "color_pair",
    "escape_prompt_text",
    "foreground",
    "git_segment_text",
    "render_prompt",
    "short_directory",
]
