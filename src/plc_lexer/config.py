"""
PLC Lexer - Front End Configuration
===================================

Settings for the interactive ``plclex`` front end. Values come from:
- Default values (defined here)
- Environment variables
- Command-line options (applied by the CLI on top of the above)

The scanner itself has no configuration; these settings only change how
input is collected and how results are printed.
"""

from dataclasses import dataclass
import os


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass
class ReplConfig:
    """
    Configuration for the read-lex-print loop.

    Attributes:
        prompt: Prompt shown before each entry (default: "> ")
        multiline_banner: Message shown when an empty line starts a
            multi-line entry
        show_offsets: Print each token's source offset in listings
    """

    prompt: str = "> "
    multiline_banner: str = "Multiline input - enter empty line to submit:"
    show_offsets: bool = False

    @classmethod
    def from_env(cls) -> "ReplConfig":
        """
        Create a ReplConfig from environment variables.

        Environment variables (all optional):
            PLCLEX_PROMPT: Prompt string
            PLCLEX_MULTILINE_BANNER: Multi-line entry banner
            PLCLEX_SHOW_OFFSETS: "1"/"true"/"yes"/"on" or "0"/"false"/"no"/"off"

        Unrecognized boolean values are ignored.
        """
        config = cls()

        if (prompt := os.environ.get("PLCLEX_PROMPT")) is not None:
            config.prompt = prompt

        if banner := os.environ.get("PLCLEX_MULTILINE_BANNER"):
            config.multiline_banner = banner

        if show_offsets := os.environ.get("PLCLEX_SHOW_OFFSETS"):
            value = show_offsets.strip().lower()
            if value in _TRUE_VALUES:
                config.show_offsets = True
            elif value in _FALSE_VALUES:
                config.show_offsets = False

        return config
