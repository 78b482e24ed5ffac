"""
PLC Lexer (Tokenizer)
=====================

This module converts source text into a list of typed tokens for a parser.
Scanning is a single fail-fast pass: the first lexical error aborts the
pass and no partial token list is returned.

Grammar
-------
    tokens     ::= (skipped* token)* skipped*
    skipped    ::= whitespace | '//' [^\\n\\r]*
    token      ::= identifier | number | character | string | operator

    identifier ::= [A-Za-z_] [A-Za-z0-9_-]*
    number     ::= [+-]? [0-9]+ ('.' [0-9]+)? ([eE] [+-]? [0-9]+)?
    character  ::= ['] ([^'\\n\\r\\\\] | escape) [']
    string     ::= '"' ([^"\\n\\r\\\\] | escape)* '"'
    escape     ::= '\\' [bnrt'"\\\\]
    operator   ::= [<>!=] '='? | [^A-Za-z_0-9'" \\b\\n\\r\\t]

A sign is part of a number only when a digit follows it directly and no
operand (identifier, number, character or string) ends right before it:
"1-2" is INTEGER, OPERATOR, INTEGER, "1 -2" is INTEGER, INTEGER, and a
lone "-" is an OPERATOR.

Token Types
-----------
| Type       | Example           |
|------------|-------------------|
| IDENTIFIER | getName, _x, a-b  |
| INTEGER    | 1, -42            |
| DECIMAL    | 1.5, 2e10, 1.5e-3 |
| CHARACTER  | 'c', '\\n'        |
| STRING     | "hi\\tthere"      |
| OPERATOR   | <=, !=, +, (      |

Literals keep their quotes and escape sequences exactly as written.

Example Usage
-------------
>>> from plc_lexer.lexer import Lexer
>>> for token in Lexer('x <= -1.5').lex():
...     print(token)
Token(IDENTIFIER, 'x')
Token(OPERATOR, '<=')
Token(DECIMAL, '-1.5')
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional
import logging
import string

from plc_lexer.errors import ScannerStateError, SourceLocation, source_line_at
from plc_lexer.lexer.cursor import CharPattern, CharStream, any_char, none_of
from plc_lexer.lexer.errors import (
    LexError,
    InvalidCharacterLiteralError,
    UnterminatedCharacterError,
    UnterminatedStringError,
    NewlineInStringError,
    InvalidStringCharacterError,
    InvalidEscapeError,
    UnexpectedCharacterError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Character Classes
# =============================================================================

DIGITS = string.digits
SIGNS = "+-"
EXPONENT = "eE"
IDENT_START = string.ascii_letters + "_"
IDENT_CHARS = string.ascii_letters + string.digits + "_-"

# ASCII whitespace: space, tab, line feed, vertical tab, form feed, return
WHITESPACE = " \t\n\x0b\f\r"
LINE_BREAKS = "\n\r"

ESCAPE_CHARS = "bnrt'\"\\"
CHARACTER_BODY = none_of("'\n\r\\")
STRING_BODY = none_of('"\n\r\\')

COMPARISON_START = "<>!="
# Backspace is neither whitespace nor an operator
OPERATOR_CHAR = none_of(string.ascii_letters + string.digits + "_'\" \b\n\r\t")


# =============================================================================
# Token Types
# =============================================================================

class TokenType(Enum):
    """The closed set of token categories produced by the lexer."""

    IDENTIFIER = auto()
    INTEGER = auto()
    DECIMAL = auto()
    CHARACTER = auto()
    STRING = auto()
    OPERATOR = auto()


@dataclass(frozen=True)
class Token:
    """
    A single token.

    Attributes:
        type: The TokenType classification
        literal: The exact source text of the token
        offset: Absolute start offset in the source (not part of equality)
    """
    type: TokenType
    literal: str
    offset: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.literal!r})"

    @property
    def end(self) -> int:
        """Offset one past the last character of the literal."""
        return self.offset + len(self.literal)


# Token types a binary "+" or "-" can follow
OPERAND_TYPES = frozenset({
    TokenType.IDENTIFIER,
    TokenType.INTEGER,
    TokenType.DECIMAL,
    TokenType.CHARACTER,
    TokenType.STRING,
})


# =============================================================================
# Lex Result
# =============================================================================

@dataclass
class LexResult:
    """
    Outcome of a lex pass: either the full token list or the error.

    Attributes:
        tokens: Tokens in source order (empty when the pass failed)
        error: The LexError that aborted the pass, if any
    """
    tokens: list[Token] = field(default_factory=list)
    error: Optional[LexError] = None

    @property
    def ok(self) -> bool:
        """True if the pass completed without a lexical error."""
        return self.error is None

    def unwrap(self) -> list[Token]:
        """Return the tokens, or raise the error that aborted the pass."""
        if self.error is not None:
            raise self.error
        return self.tokens


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes source text in a single fail-fast pass.

    lex() repeatedly skips whitespace and comments and calls _lex_token(),
    which picks the token kind from a fixed amount of lookahead and hands
    off to the matching _lex_* method. A Lexer is good for one pass; create
    a new one to scan again.

    Usage:
        tokens = Lexer(source_text).lex()

    Attributes:
        source: The text being tokenized
        filename: Name of the source (for error messages)
    """

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename
        self._chars = CharStream(source)

    def lex(self) -> list[Token]:
        """
        Tokenize the whole source.

        Returns:
            The tokens in source order

        Raises:
            LexError: On the first lexical error; no tokens are returned
        """
        tokens = []
        previous = None
        try:
            while self._chars.has(0):
                if self._chars.peek(WHITESPACE):
                    self._lex_whitespace()
                    continue
                if self._chars.peek("/", "/"):
                    self._lex_comment()
                    continue
                previous = self._lex_token(previous)
                tokens.append(previous)
        except LexError as e:
            logger.debug(f"Lexing {self.filename} failed at offset {e.offset}: {e.message}")
            raise
        logger.debug(f"Lexed {len(tokens)} tokens from {self.filename}")
        return tokens

    def try_lex(self) -> LexResult:
        """Tokenize the whole source, returning errors instead of raising."""
        try:
            return LexResult(tokens=self.lex())
        except LexError as e:
            return LexResult(error=e)

    # =========================================================================
    # Skipped Input
    # =========================================================================

    def _lex_whitespace(self) -> None:
        while self._chars.match(WHITESPACE):
            pass
        self._chars.emit()

    def _lex_comment(self) -> None:
        self._require("/", "/")
        while self._chars.has(0) and not self._chars.peek(LINE_BREAKS):
            self._chars.match(any_char)
        self._chars.emit()

    # =========================================================================
    # Token Dispatch
    # =========================================================================

    def _lex_token(self, previous: Optional[Token] = None) -> Token:
        """
        Pick the production for the next token and scan it.

        previous is the last token emitted in this pass; a sign that directly
        follows an operand is a binary operator, not the start of a number.
        """
        if self._chars.peek(IDENT_START):
            return self._lex_identifier()
        if self._chars.peek(DIGITS) or (
            self._chars.peek(SIGNS, DIGITS) and not self._follows_operand(previous)
        ):
            return self._lex_number()
        if self._chars.peek("'"):
            return self._lex_character()
        if self._chars.peek('"'):
            return self._lex_string()
        return self._lex_operator()

    def _lex_identifier(self) -> Token:
        self._require(IDENT_START)
        while self._chars.match(IDENT_CHARS):
            pass
        return self._emit(TokenType.IDENTIFIER)

    def _lex_number(self) -> Token:
        """
        Scan an integer or decimal number.

        The fraction needs a digit after the '.', and the exponent needs a
        digit after the 'e' (or after its sign), so "1." and "2e" stop
        before the '.' or 'e'. Either a fraction or an exponent makes the
        number a DECIMAL.
        """
        if self._chars.peek(SIGNS, DIGITS):
            self._chars.match(SIGNS)
        self._require(DIGITS)
        while self._chars.match(DIGITS):
            pass

        decimal = False
        if self._chars.match(".", DIGITS):
            decimal = True
            while self._chars.match(DIGITS):
                pass
        if self._chars.match(EXPONENT, DIGITS) or self._chars.match(EXPONENT, SIGNS, DIGITS):
            decimal = True
            while self._chars.match(DIGITS):
                pass

        return self._emit(TokenType.DECIMAL if decimal else TokenType.INTEGER)

    def _lex_character(self) -> Token:
        self._require("'")
        if self._chars.peek("\\"):
            self._lex_escape()
        elif not self._chars.match(CHARACTER_BODY):
            raise self._error(InvalidCharacterLiteralError)
        if not self._chars.match("'"):
            raise self._error(UnterminatedCharacterError)
        return self._emit(TokenType.CHARACTER)

    def _lex_string(self) -> Token:
        self._require('"')
        while True:
            if self._chars.match('"'):
                return self._emit(TokenType.STRING)
            if self._chars.peek("\\"):
                self._lex_escape()
                continue
            if self._chars.match(STRING_BODY):
                continue

            if not self._chars.has(0):
                raise self._error(UnterminatedStringError)
            if self._chars.peek(LINE_BREAKS):
                raise self._error(NewlineInStringError)
            raise self._error(InvalidStringCharacterError, self._current_char())

    def _lex_escape(self) -> None:
        self._require("\\")
        if not self._chars.match(ESCAPE_CHARS):
            raise self._error(InvalidEscapeError)

    def _lex_operator(self) -> Token:
        if self._chars.match(COMPARISON_START):
            self._chars.match("=")
            return self._emit(TokenType.OPERATOR)
        if self._chars.match(OPERATOR_CHAR):
            return self._emit(TokenType.OPERATOR)
        raise self._error(UnexpectedCharacterError, self._current_char())

    # =========================================================================
    # Helpers
    # =========================================================================

    def _follows_operand(self, previous: Optional[Token]) -> bool:
        return (
            previous is not None
            and previous.type in OPERAND_TYPES
            and previous.end == self._chars.index
        )

    def _emit(self, token_type: TokenType) -> Token:
        offset = self._chars.start
        return Token(token_type, self._chars.emit(), offset)

    def _require(self, *patterns: CharPattern) -> None:
        """Consume characters the dispatch logic has already checked for."""
        if not self._chars.match(*patterns):
            raise ScannerStateError(
                f"scanner expected {len(patterns)} specific character(s) "
                f"at offset {self._chars.index}"
            )

    def _current_char(self) -> str:
        return self.source[self._chars.index]

    def _error(self, error_type: type, *args) -> LexError:
        """Create a lexical error at the current read offset."""
        offset = self._chars.index
        return error_type(
            *args,
            offset=offset,
            location=SourceLocation.from_offset(self.source, offset, self.filename),
            source_line=source_line_at(self.source, offset),
        )


# =============================================================================
# Convenience Function
# =============================================================================

def lex_source(source: str, filename: str = "<input>") -> list[Token]:
    """
    Tokenize source text in one call.

    Raises:
        LexError: On the first lexical error
    """
    return Lexer(source, filename).lex()
