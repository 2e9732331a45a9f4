"""Fixed-capacity prompt buffer with powerline segment transitions.

Bash prompt strings need two kinds of care:

- Control sequences must be wrapped in ``\\[`` and ``\\]`` so the shell
  does not count them toward the prompt width. They are written with
  :meth:`PromptBuffer.append_raw`.
- Variable text (directory names, branch names) is written with
  :meth:`PromptBuffer.append_escaped`, which prefixes ``$`` and ``\\``
  with a backslash so prompt expansion leaves them alone.

The buffer never grows past its capacity. Writes beyond it are dropped,
so the result is always a prefix of what an unbounded buffer would hold.
A control sequence cut at the boundary is left incomplete.
"""

import re

DEFAULT_CAPACITY: int = 4096

SEPARATOR_GLYPH = "\ue0b0"

_SHELL_SPECIAL = re.compile(rb"([$\\])")


def escape_prompt_text(data: bytes) -> bytes:
    """Insert a backslash before every ``$`` and ``\\`` byte."""
    return _SHELL_SPECIAL.sub(rb"\\\1", data)


def _encode(fragment: str) -> bytes:
    return fragment.encode("utf-8", errors="surrogateescape")


def color_pair(fg: str, bg: str) -> str:
    """Build a non-printing 256-color foreground/background sequence."""
    return f"\\[\x1b[38;5;{fg}m\x1b[48;5;{bg}m\\]"


def foreground(fg: str) -> str:
    """Build a non-printing 256-color foreground sequence."""
    return f"\\[\x1b[38;5;{fg}m\\]"


RESET = "\\[\x1b[m\\] "


class PromptBuffer:
    """Bounded output buffer that tracks the last segment background.

    Attributes:
        capacity: Maximum number of bytes the buffer will hold.
    """

    __slots__ = ("_data", "_last_bg", "capacity")

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity: int = capacity
        self._data: bytearray = bytearray()
        self._last_bg: str | None = None

    @property
    def remaining(self) -> int:
        """Bytes left before the buffer is full."""
        return self.capacity - len(self._data)

    @property
    def last_background(self) -> str | None:
        """Background color of the most recent segment, if any."""
        return self._last_bg

    def _write(self, data: bytes) -> None:
        room = self.remaining
        if room <= 0:
            return
        self._data.extend(data[:room])

    def append_escaped(self, *fragments: str) -> None:
        """Append variable text, escaping shell prompt metacharacters."""
        for fragment in fragments:
            self._write(escape_prompt_text(_encode(fragment)))

    def append_raw(self, *fragments: str) -> None:
        """Append pre-built control sequences verbatim."""
        for fragment in fragments:
            self._write(_encode(fragment))

    def begin_segment(self, fg: str, bg: str) -> None:
        """Start a new colored segment.

        After the first segment, the transition is a space, the separator
        glyph drawn in the previous background over the new background, and
        a switch to the new foreground.
        """
        if self._last_bg is not None:
            self.append_raw(
                " ",
                color_pair(self._last_bg, bg),
                f"{SEPARATOR_GLYPH} ",
                foreground(fg),
            )
        else:
            self.append_raw(color_pair(fg, bg))
        self._last_bg = bg

    def finalize(self) -> None:
        """Append the reset sequence and the trailing space."""
        self.append_raw(RESET)

    def getvalue(self) -> bytes:
        """Return the buffer contents."""
        return bytes(self._data)
