"""
plclex - Lexer Command-Line Interface
=====================================

Runs the lexer on a file, on an inline expression, or interactively.

Usage Examples
--------------
Lex a file:
    $ plclex program.txt

Lex an inline expression:
    $ plclex -e 'x <= -1.5e3'

Interactive mode (no arguments):
    $ plclex
    > x != "y"
    Tokens[size=3]:
     - Token(IDENTIFIER, 'x')
     - Token(OPERATOR, '!=')
     - Token(STRING, '"y"')

An empty line at the prompt starts a multi-line entry, which is submitted
by the next empty line.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

import click

from plc_lexer import __version__
from plc_lexer.cli.errors import handle_cli_exception
from plc_lexer.config import ReplConfig
from plc_lexer.errors import ScannerStateError
from plc_lexer.lexer import Lexer, LexError, Token

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================

def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def format_tokens(tokens: list[Token], show_offsets: bool = False) -> str:
    """
    Render a token list for display.

    Example:
        Tokens[size=2]:
         - Token(INTEGER, '1')
         - Token(OPERATOR, '+')
    """
    lines = [f"Tokens[size={len(tokens)}]" + (":" if tokens else "")]
    for token in tokens:
        if show_offsets:
            lines.append(f" - {token!r} @{token.offset}")
        else:
            lines.append(f" - {token!r}")
    return "\n".join(lines)


def read_entry(stream: TextIO, config: ReplConfig) -> Optional[str]:
    """
    Read one REPL entry.

    A non-empty line is returned as-is. An empty line starts a multi-line
    entry: the following lines, each terminated by a newline, are joined
    until an empty line (or end of input) is read.

    Returns:
        The entry text, or None at end of input
    """
    click.echo(config.prompt, nl=False)
    line = stream.readline()
    if not line:
        return None
    line = line.rstrip("\r\n")
    if line:
        return line

    click.echo(config.multiline_banner)
    lines = []
    while True:
        next_line = stream.readline()
        if not next_line:
            break
        next_line = next_line.rstrip("\r\n")
        if not next_line:
            break
        lines.append(next_line + "\n")
    return "".join(lines)


def run_repl(config: ReplConfig, stream: Optional[TextIO] = None) -> None:
    """
    Read entries and print their tokens until end of input.

    Lexical errors are printed and the loop continues with the next entry.
    """
    if stream is None:
        stream = sys.stdin

    try:
        while True:
            entry = read_entry(stream, config)
            if entry is None:
                click.echo()
                return
            try:
                tokens = Lexer(entry, "<repl>").lex()
            except LexError as e:
                click.echo(f"LexError: {e}")
                continue
            except ScannerStateError:
                logger.exception("internal scanner error")
                continue
            click.echo(format_tokens(tokens, config.show_offsets))
    except KeyboardInterrupt:
        click.echo()


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-e", "--expr",
    default=None,
    help="Lex TEXT instead of reading a file",
)
@click.option(
    "--offsets",
    is_flag=True,
    help="Show the source offset of each token",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging)",
)
@click.version_option(version=__version__, prog_name="plclex")
def main(
    input_file: Optional[Path],
    expr: Optional[str],
    offsets: bool,
    verbose: bool,
) -> None:
    """
    Tokenize source text and print the tokens.

    INPUT_FILE is the source file to lex. With -e the text is given on the
    command line instead. With neither, an interactive session starts.

    \b
    Examples:
        plclex program.txt           # Lex a file
        plclex -e '1-2'              # INTEGER, OPERATOR, INTEGER
        plclex --offsets -e 'a b'    # Include token offsets
        plclex                       # Interactive mode
    """
    setup_logging(verbose)

    config = ReplConfig.from_env()
    if offsets:
        config.show_offsets = True

    try:
        if input_file is not None and expr is not None:
            raise click.BadParameter("give either INPUT_FILE or --expr, not both")

        if input_file is None and expr is None:
            logger.debug("Starting interactive session")
            run_repl(config)
            return

        if input_file is not None:
            logger.debug(f"Reading {input_file}")
            source = input_file.read_text(encoding="utf-8")
            filename = str(input_file)
        else:
            source = expr
            filename = "<expr>"

        tokens = Lexer(source, filename).lex()
        click.echo(format_tokens(tokens, config.show_offsets))

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
