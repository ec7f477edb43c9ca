"""Composed entry points splitting a command line into env and argv."""

from typing import Optional

from .environment import split_environment
from .options import LINUX, WHITESPACE, WINDOWS, Options
from .tokenizer import tokenize


def parse(
    line: str, separators: str = WHITESPACE, options: Optional[Options] = None
) -> tuple[list[str], list[str]]:
    """
    Parse a command line into environment assignments and argv.

    The argv list always contains at least one element, which is an
    empty string if the line holds no command.

    Args:
        line: The command line
        separators: Characters separating tokens
        options: Tokenizer options

    Returns:
        Tuple of (env, argv) where argv[0] is the command

    Raises:
        TokenizeError: If the line cannot be tokenized
    """
    env, argv = split_environment(tokenize(line, separators, options))
    if not argv:
        argv = [""]
    return env, argv


def split_linux(line: str) -> tuple[list[str], list[str]]:
    """Split a command line the way /bin/sh would."""
    return parse(line.strip(), WHITESPACE, LINUX)


def split_windows(line: str) -> tuple[list[str], list[str]]:
    """Split a command line the way windows would, keeping backslashes."""
    return parse(line.strip(), WHITESPACE, WINDOWS)
