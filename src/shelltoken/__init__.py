"""Split command lines into environment assignments and argv without a shell."""

from .environment import split_environment
from .options import (
    LINUX,
    PROFILES,
    WHITESPACE,
    WINDOWS,
    Options,
    ShellCharacterPolicy,
)
from .profiles import parse, split_linux, split_windows
from .tokenizer import (
    ShellCharactersFound,
    TokenizeError,
    UnbalancedQuotes,
    tokenize,
)

__version__ = "1.0.0"

__all__ = [
    "LINUX",
    "PROFILES",
    "WHITESPACE",
    "WINDOWS",
    "Options",
    "ShellCharacterPolicy",
    "ShellCharactersFound",
    "TokenizeError",
    "UnbalancedQuotes",
    "parse",
    "split_environment",
    "split_linux",
    "split_windows",
    "tokenize",
]
