"""
PLC Lexer Core
==============

The scanner that turns source text into typed tokens:

    Source → CharStream → (skip whitespace/comments | classify → scan literal) → Tokens

Usage
-----
>>> from plc_lexer.lexer import lex_source
>>> lex_source("1-2")
[Token(INTEGER, '1'), Token(OPERATOR, '-'), Token(INTEGER, '2')]
"""

from plc_lexer.lexer.cursor import CharStream, none_of, any_char
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
from plc_lexer.lexer.lexer import Lexer, LexResult, Token, TokenType, lex_source

__all__ = [
    # Cursor
    "CharStream",
    "none_of",
    "any_char",
    # Lexer
    "Lexer",
    "LexResult",
    "Token",
    "TokenType",
    "lex_source",
    # Errors
    "LexError",
    "InvalidCharacterLiteralError",
    "UnterminatedCharacterError",
    "UnterminatedStringError",
    "NewlineInStringError",
    "InvalidStringCharacterError",
    "InvalidEscapeError",
    "UnexpectedCharacterError",
]
