"""
PLC Lexer - Hand-Written Lexical Scanner
========================================

This package converts source text into an ordered list of typed tokens
for a downstream parser.

Main Components
---------------
- **lexer**: the scanner (CharStream cursor, Lexer, Token, LexError)
- **config**: settings for the interactive front end
- **cli**: the ``plclex`` command (file, inline and REPL modes)

Quick Start
-----------
    >>> from plc_lexer import Lexer
    >>> Lexer('name == "bob"').lex()
    [Token(IDENTIFIER, 'name'), Token(OPERATOR, '=='), Token(STRING, '"bob"')]

Or from the command line:
    $ plclex -e 'x <= 10'
    $ plclex program.txt
    $ plclex            # interactive
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from plc_lexer.errors import PlcError, ScannerStateError, SourceLocation
from plc_lexer.lexer import (
    Lexer,
    LexResult,
    Token,
    TokenType,
    lex_source,
    LexError,
    InvalidCharacterLiteralError,
    UnterminatedCharacterError,
    UnterminatedStringError,
    NewlineInStringError,
    InvalidStringCharacterError,
    InvalidEscapeError,
    UnexpectedCharacterError,
)
from plc_lexer.config import ReplConfig

__all__ = [
    "__version__",
    # Lexer
    "Lexer",
    "LexResult",
    "Token",
    "TokenType",
    "lex_source",
    # Configuration
    "ReplConfig",
    # Exception hierarchy
    "PlcError",
    "ScannerStateError",
    "SourceLocation",
    "LexError",
    "InvalidCharacterLiteralError",
    "UnterminatedCharacterError",
    "UnterminatedStringError",
    "NewlineInStringError",
    "InvalidStringCharacterError",
    "InvalidEscapeError",
    "UnexpectedCharacterError",
]
