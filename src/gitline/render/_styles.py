"""Segment colors and glyphs.

Colors are xterm 256-color palette indexes.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SegmentStyle:
    """Foreground and background color pair for a segment."""

    fg: str
    bg: str


USER_HOST = SegmentStyle(fg="253", bg="242")
SSH = SegmentStyle(fg="254", bg="172")
CWD = SegmentStyle(fg="15", bg="32")
READ_ONLY = SegmentStyle(fg="254", bg="127")
VIRTUAL_ENV = SegmentStyle(fg="0", bg="2")
GIT_CLEAN = SegmentStyle(fg="0", bg="148")
GIT_DIRTY = SegmentStyle(fg="15", bg="125")
STATUS_OK = SegmentStyle(fg="40", bg="0")
STATUS_ERROR = SegmentStyle(fg="160", bg="0")

SSH_GLYPH = "\u26a1"
READ_ONLY_GLYPH = "\ue0a2"
VIRTUAL_ENV_GLYPH = "\U0001f40d"
PROMPT_CHAR = "$"
