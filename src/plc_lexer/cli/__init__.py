"""
PLC Lexer Command-Line Interface
================================

- **plclex**: lex a file, an inline expression, or run an interactive session

Implemented as a Click application with help and consistent exit codes
(see plc_lexer.cli.errors.ExitCode).
"""

__all__ = ["plclex"]
