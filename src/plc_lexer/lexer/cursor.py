"""
Character Cursor
================

CharStream is the only mutable state of a scan pass. It holds the input,
the read index, and the length of the span matched since the last call to
emit(). The start of the unit currently being built is always
``index - pending``.

Patterns
--------
peek() and match() take one pattern per character of lookahead. A pattern
is either a string listing the accepted characters or a predicate taking a
single character:

    chars.peek("/", "/")              # two slashes
    chars.peek(SIGNS, DIGITS)         # sign followed by a digit
    chars.match(none_of("'\\n\\r\\\\"))  # anything but a quote, line break or backslash
"""

from typing import Callable, Union

CharPattern = Union[str, Callable[[str], bool]]


def none_of(excluded: str) -> Callable[[str], bool]:
    """Build a pattern accepting any single character not in excluded."""
    return lambda char: char not in excluded


def any_char(char: str) -> bool:
    """Pattern accepting any single character."""
    return True


def _accepts(pattern: CharPattern, char: str) -> bool:
    if isinstance(pattern, str):
        return char in pattern
    return pattern(char)


class CharStream:
    """
    Read cursor over an immutable string with span accumulation.

    Attributes:
        source: The text being scanned
    """

    def __init__(self, source: str):
        self.source = source
        self._index = 0
        self._length = 0

    @property
    def index(self) -> int:
        """Absolute read offset (0..len(source))."""
        return self._index

    @property
    def pending(self) -> int:
        """Number of characters matched since the last emit()."""
        return self._length

    @property
    def start(self) -> int:
        """Start offset of the span currently being built."""
        return self._index - self._length

    def has(self, offset: int) -> bool:
        """Return True if a character exists at index + offset."""
        return self._index + offset < len(self.source)

    def peek(self, *patterns: CharPattern) -> bool:
        """
        Return True if the next characters satisfy their patterns, in order.

        Nothing is consumed. Returns False when fewer characters remain
        than patterns were given.
        """
        if not self.has(len(patterns) - 1):
            return False
        for offset, pattern in enumerate(patterns):
            if not _accepts(pattern, self.source[self._index + offset]):
                return False
        return True

    def match(self, *patterns: CharPattern) -> bool:
        """Like peek(), but consume the characters when they match."""
        matched = self.peek(*patterns)
        if matched:
            self._index += len(patterns)
            self._length += len(patterns)
        return matched

    def emit(self) -> str:
        """Return the span matched since the last emit() and start a new one."""
        literal = self.source[self._index - self._length:self._index]
        self._length = 0
        return literal
