"""Shell-like lexer for splitting command lines into tokens."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .options import WHITESPACE, Options, ShellCharacterPolicy


# Characters a shell would interpret outside of any quotes
SHELL_CHARACTERS = frozenset("$`!&*()~[]|{};<>?")

# Inside double quotes only substitutions are still live
DOUBLE_QUOTED_SHELL_CHARACTERS = frozenset("$`")


# Custom exceptions
class TokenizeError(ValueError):
    """Base exception for tokenizer errors."""

    pass


class UnbalancedQuotes(TokenizeError):
    """Raised when the input ends inside single or double quotes."""

    def __init__(self, message: str = "unbalanced quotes"):
        super().__init__(message)


class ShellCharactersFound(TokenizeError):
    """Raised when a shell metacharacter is found."""

    def __init__(
        self, position: int, character: str, tokens: Optional[list[str]] = None
    ):
        super().__init__(
            f"shell metacharacter {character!r} found at position {position}"
        )
        self.position = position
        self.character = character
        # Only set when the scan was allowed to continue
        self.tokens = tokens


class QuoteMode(Enum):
    """Quoting state of the scanner."""

    UNQUOTED = 0
    SINGLE = 1
    DOUBLE = 2


@dataclass
class _ParseState:
    """Mutable scanner state, local to one tokenize call."""

    options: Options
    tokens: list[str] = field(default_factory=list)
    buffer: list[str] = field(default_factory=list)
    has_token: bool = False
    quote: QuoteMode = QuoteMode.UNQUOTED
    escaped: bool = False
    escape_pos: int = -1
    shell_pos: Optional[int] = None

    def add(self, char: str, pos: int) -> None:
        """Append an unescaped character, checking it for shell meaning."""
        if self._is_shell_character(char):
            self.found_shell_character(char, pos)
        self.append(char)

    def append(self, char: str) -> None:
        """Append a character to the current token verbatim."""
        self.buffer.append(char)
        self.has_token = True

    def flush(self) -> None:
        """Complete the current token if one is open."""
        if self.has_token:
            self.tokens.append("".join(self.buffer))
            self.buffer.clear()
            self.has_token = False

    def toggle(self, mode: QuoteMode, char: str) -> None:
        """Enter or leave a quote mode."""
        if self.quote is mode:
            self.quote = QuoteMode.UNQUOTED
        else:
            self.quote = mode

        # An empty quoted string is still a token
        self.has_token = True
        if self.options.keep_quotes:
            self.buffer.append(char)

    def found_shell_character(self, char: str, pos: int) -> None:
        """Record the first shell metacharacter according to the policy."""
        policy = self.options.shell_characters
        if policy is ShellCharacterPolicy.IGNORE or self.shell_pos is not None:
            return

        self.shell_pos = pos
        if policy is ShellCharacterPolicy.STOP_ON_FIRST:
            raise ShellCharactersFound(pos, char)

    def _is_shell_character(self, char: str) -> bool:
        if self.quote is QuoteMode.SINGLE:
            return False
        if self.quote is QuoteMode.DOUBLE:
            return char in DOUBLE_QUOTED_SHELL_CHARACTERS
        return char in SHELL_CHARACTERS


def tokenize(
    line: str, separators: str = WHITESPACE, options: Optional[Options] = None
) -> list[str]:
    """
    Split a line into tokens, honoring quotes and backslash escapes.

    Rules:
    - Separators outside of quotes split tokens
    - Double quotes (") and single quotes (') group characters, each is
      literal inside the other
    - Backslash (\\) escapes the next character; inside double quotes
      the backslash is only removed in front of \\ and "
    - Quotes and backslashes are removed unless the options keep them
    - Shell metacharacters are reported according to the options

    Args:
        line: The line to split
        separators: Characters separating tokens
        options: Tokenizer options (defaults to Options())

    Returns:
        List of parsed tokens, empty if the line has none

    Raises:
        UnbalancedQuotes: If a quote is not terminated
        ShellCharactersFound: If a shell metacharacter is found and the
            policy is not IGNORE
    """
    if options is None:
        options = Options()

    state = _ParseState(options)
    escaping = not options.ignore_backslash_escaping

    for pos, char in enumerate(line):
        if state.escaped:
            # Escaped characters lose any special meaning
            state.escaped = False
            state.append(char)
        elif char == "\\" and escaping:
            state.escaped = True
            state.escape_pos = pos

            if options.keep_backslashes or state.quote is QuoteMode.SINGLE:
                state.append(char)
            elif state.quote is QuoteMode.DOUBLE:
                # \" and \\ collapse to the escaped character
                if line[pos + 1 : pos + 2] not in ('"', "\\"):
                    state.append(char)
        elif char == '"':
            if state.quote is QuoteMode.SINGLE:
                state.add(char, pos)
            else:
                state.toggle(QuoteMode.DOUBLE, char)
        elif char == "'":
            if state.quote is QuoteMode.DOUBLE:
                state.add(char, pos)
            else:
                state.toggle(QuoteMode.SINGLE, char)
        elif char in separators:
            if state.quote is not QuoteMode.UNQUOTED:
                state.add(char, pos)
            elif options.keep_separators:
                state.flush()
                state.tokens.append(char)
            else:
                state.flush()
        else:
            state.add(char, pos)

    # A trailing backslash with nothing to escape is a line continuation
    if (
        state.escaped
        and state.quote is QuoteMode.UNQUOTED
        and not options.keep_backslashes
    ):
        state.found_shell_character("\\", state.escape_pos)

    state.flush()

    if state.quote is not QuoteMode.UNQUOTED:
        raise UnbalancedQuotes()

    if state.shell_pos is not None:
        raise ShellCharactersFound(
            state.shell_pos, line[state.shell_pos], tokens=state.tokens
        )

    return state.tokens
