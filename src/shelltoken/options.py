"""Tokenizer options and the named shell profiles."""

from dataclasses import dataclass
from enum import Enum


# Default separator set used by both profiles
WHITESPACE = " \t\n\r"


class ShellCharacterPolicy(Enum):
    """What to do when a shell metacharacter is found."""

    IGNORE = "ignore"
    STOP_ON_FIRST = "stop"
    CONTINUE_AND_REPORT = "continue"


@dataclass(frozen=True)
class Options:
    """
    Policy flags for a single tokenize call.

    Attributes:
        keep_backslashes: Keep backslashes in the output instead of only
            using them as escape characters
        ignore_backslash_escaping: Treat backslash as an ordinary character
        keep_quotes: Keep the quote characters in the emitted tokens
        keep_separators: Emit separators as standalone tokens
        shell_characters: Shell metacharacter policy
    """

    keep_backslashes: bool = False
    ignore_backslash_escaping: bool = False
    keep_quotes: bool = False
    keep_separators: bool = False
    shell_characters: ShellCharacterPolicy = ShellCharacterPolicy.IGNORE


# Splits the way /bin/sh would, rejecting anything only a shell understands
LINUX = Options(shell_characters=ShellCharacterPolicy.STOP_ON_FIRST)

# Backslashes are path separators on windows, not escapes
WINDOWS = Options(
    keep_backslashes=True,
    ignore_backslash_escaping=True,
    shell_characters=ShellCharacterPolicy.STOP_ON_FIRST,
)

PROFILES: dict[str, Options] = {
    "linux": LINUX,
    "windows": WINDOWS,
}
