"""Field splitting for delimiter-separated query output."""


class FieldReader:
    """Sequential reader over separator-delimited fields.

    Each call to :meth:`next` returns the text up to the next separator (or
    the end of the text) and advances past that separator. Reading past
    the end yields empty fields.

    Example:
        >>> reader = FieldReader(".git\\nfalse\\nfalse\\ntrue\\na1b2c3d")
        >>> reader.next("\\n")
        '.git'
        >>> reader.next("\\n")
        'false'
    """

    __slots__ = ("_pos", "_text")

    def __init__(self, text: str) -> None:
        self._text: str = text
        self._pos: int = 0

    def next(self, sep: str) -> str:
        """Return the next field, treating the end of the text as a separator."""
        start = self._pos
        end = self._text.find(sep, start)
        if end == -1:
            end = len(self._text)
        self._pos = min(end + len(sep), len(self._text) + 1)
        return self._text[start:end]


def split_fields(text: str, sep: str, count: int) -> list[str]:
    """Split text into exactly ``count`` fields, padding with empty strings.

    Args:
        text: Delimiter-separated text.
        sep: Field separator.
        count: Number of fields to extract.

    Returns:
        List of ``count`` fields; trailing text beyond them is ignored.
    """
    reader = FieldReader(text)
    return [reader.next(sep) for _ in range(count)]
