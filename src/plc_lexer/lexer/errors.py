"""
Lexical Error Hierarchy
=======================

LexError is the single user-facing error kind raised by the scanner.
Subclasses name the specific cause so callers can tell them apart while
still catching every lexical failure with ``except LexError``.

Exception Hierarchy
-------------------
LexError (base for all lexical errors)
├── InvalidCharacterLiteralError - empty or invalid character literal body
├── UnterminatedCharacterError - missing closing single quote
├── UnterminatedStringError - input ends inside a string literal
├── NewlineInStringError - raw line break inside a string literal
├── InvalidStringCharacterError - any other disallowed string character
├── InvalidEscapeError - backslash not followed by b, n, r, t, ', " or \\
└── UnexpectedCharacterError - character that starts no token

Every error records the absolute ``offset`` at which the failure was
detected. When the lexer has the source at hand it also attaches a
SourceLocation and the text of the offending line.
"""

from typing import Optional

from plc_lexer.errors import PlcError, SourceLocation, format_error


# =============================================================================
# Base Lexical Exception
# =============================================================================

class LexError(PlcError):
    """
    A lexical error at a specific position in the input.

    Attributes:
        message: The error description
        offset: Absolute character offset where the failure was detected
        location: Line/column location (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the offending line (optional)
    """

    def __init__(
        self,
        message: str,
        offset: int,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.offset = offset
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.location is None:
            return format_error(f"{self.message} at offset {self.offset}", hint=self.hint)
        return format_error(self.message, self.location, self.hint, self.source_line)


# =============================================================================
# Character Literal Errors
# =============================================================================

class InvalidCharacterLiteralError(LexError):
    """
    The body of a character literal is empty or not a single valid character.

    Examples:
        ''      (empty)
        '
        '       (raw newline)
    """

    def __init__(self, offset: int, **kwargs):
        kwargs.setdefault("hint", "a character literal holds exactly one character or escape")
        super().__init__("invalid or empty character literal", offset, **kwargs)


class UnterminatedCharacterError(LexError):
    """
    A character literal is missing its closing quote.

    Example:
        'ab'    (second character where the quote should be)
    """

    def __init__(self, offset: int, **kwargs):
        kwargs.setdefault("hint", "add a closing ' after the character")
        super().__init__("unterminated character literal", offset, **kwargs)


# =============================================================================
# String Literal Errors
# =============================================================================

class UnterminatedStringError(LexError):
    """Input ended before the closing double quote of a string literal."""

    def __init__(self, offset: int, **kwargs):
        kwargs.setdefault("hint", "add a closing '\"' to complete the string")
        super().__init__("unterminated string literal", offset, **kwargs)


class NewlineInStringError(LexError):
    """A string literal contains a raw line feed or carriage return."""

    def __init__(self, offset: int, **kwargs):
        kwargs.setdefault("hint", "use \\n or \\r inside string literals")
        super().__init__("string literal cannot contain a raw line break", offset, **kwargs)


class InvalidStringCharacterError(LexError):
    """A string literal contains a character that is never allowed there."""

    def __init__(self, char: str, offset: int, **kwargs):
        self.char = char
        super().__init__(
            f"invalid character {char!r} in string literal",
            offset,
            **kwargs,
        )


# =============================================================================
# Escape and Operator Errors
# =============================================================================

class InvalidEscapeError(LexError):
    """A backslash is not followed by one of b, n, r, t, ', " or \\."""

    def __init__(self, offset: int, **kwargs):
        kwargs.setdefault("hint", "valid escapes are \\b \\n \\r \\t \\' \\\" \\\\")
        super().__init__("invalid escape sequence", offset, **kwargs)


class UnexpectedCharacterError(LexError):
    """A character that cannot start any token."""

    def __init__(self, char: str, offset: int, **kwargs):
        self.char = char
        super().__init__(
            f"unexpected character {char!r} (0x{ord(char):02X})",
            offset,
            **kwargs,
        )
