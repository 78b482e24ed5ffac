"""
PLC Lexer Error Hierarchy
=========================

This module defines the base exception types shared by the whole package.
All user-facing exceptions inherit from PlcError, allowing callers to catch
every reportable problem with a single except clause.

Exception Hierarchy
-------------------
PlcError (base)
└── LexError (see plc_lexer.lexer.errors)

ScannerStateError (RuntimeError)
    Internal precondition violation inside the scanner. It is NOT a
    PlcError: it signals a defect in the scanner, not bad input.

Error Message Format
--------------------
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class PlcError(Exception):
    """
    Base exception for all reportable PLC lexer errors.

        try:
            tokens = lex_source(text)
        except PlcError as e:
            print(f"Error: {e}")
    """
    pass


class ScannerStateError(RuntimeError):
    """
    An internal scanner precondition did not hold.

    Raised when a scanning step is invoked at a position where the
    character class it requires is not present. This indicates a bug
    in the dispatch logic and is never caused by user input.
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source text for error reporting.

    Attributes:
        filename: Name of the source (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        offset: Absolute character offset (0-indexed)
    """
    filename: str
    line: int
    column: int
    offset: int = 0

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"

    @classmethod
    def from_offset(cls, source: str, offset: int, filename: str = "<input>") -> "SourceLocation":
        """
        Derive line and column from an absolute offset into source.

        "\\n", "\\r" and "\\r\\n" each end one line.
        """
        offset = max(0, min(offset, len(source)))
        line_start = _line_start_before(source, offset)
        prefix = source[:line_start]
        line = 1 + prefix.count("\n") + prefix.count("\r") - prefix.count("\r\n")
        return cls(filename, line, offset - line_start + 1, offset)


def _line_start_before(source: str, offset: int) -> int:
    """Return the offset of the first character of the line containing offset."""
    start = offset
    while start > 0 and source[start - 1] not in "\r\n":
        start -= 1
    return start


def source_line_at(source: str, offset: int) -> str:
    """Return the text of the line containing offset, without its terminator."""
    offset = max(0, min(offset, len(source)))
    start = _line_start_before(source, offset)
    end = start
    while end < len(source) and source[end] not in "\r\n":
        end += 1
    return source[start:end]


# =============================================================================
# Formatting Helper
# =============================================================================

def format_error(
    message: str,
    location: Optional[SourceLocation] = None,
    hint: Optional[str] = None,
    source_line: Optional[str] = None,
) -> str:
    """
    Format an error message with location, source context, and hint.

    Example output:
        <input>:1:5: error: unterminated string literal
            x = "abc
                    ^
        hint: add a closing '"' before the end of the line
    """
    parts = []

    # Location prefix
    if location:
        parts.append(f"{location}: error: {message}")
    else:
        parts.append(f"error: {message}")

    # Source context with caret pointer
    if source_line is not None and location is not None:
        parts.append(f"    {source_line}")
        if location.column > 0:
            padding = " " * (4 + location.column - 1)
            parts.append(f"{padding}^")

    if hint:
        parts.append(f"hint: {hint}")

    return "\n".join(parts)
