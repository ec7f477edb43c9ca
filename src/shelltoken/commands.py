"""Command-line interface handler for shelltoken."""

import argparse
import dataclasses
import json
import sys
from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .environment import split_environment
from .options import PROFILES, WHITESPACE, Options, ShellCharacterPolicy
from .profiles import parse
from .tokenizer import ShellCharactersFound, TokenizeError

console = Console()
error_console = Console(stderr=True)


@dataclass
class LineError:
    """Represents a line that failed to split."""

    message: str
    line_num: int
    path: str


def print_usage() -> None:
    """Print usage information."""
    print("""Usage: shelltoken [-h | --help] <command> [<args>]

Commands:
  split                    Split a command line into env and argv
      -p, --profile NAME   Quoting rules to use: linux or windows (default linux)
      --ignore-shell       Do not reject shell metacharacters
      --warn-shell         Report shell metacharacters but still show the tokens
      --keep-quotes        Keep quote characters in the tokens
      --keep-separators    Emit separators as tokens
      --separators STR     Characters separating tokens (default whitespace)
      --json               Print the result as json
      <line>               The command line to split

  check                    Check that every line of a file can be split
      -p, --profile NAME   Quoting rules to use: linux or windows (default linux)
      --ignore-shell       Do not reject shell metacharacters
      <file>               File with one command line per line

  help                     Show this help message
  version                  Show program version
""")


def print_version() -> None:
    """Print version information."""
    print(__version__)


def options_from_args(args: argparse.Namespace) -> Options:
    """Build tokenizer options from the selected profile and flags."""
    options = PROFILES[args.profile]

    if args.ignore_shell:
        options = dataclasses.replace(
            options, shell_characters=ShellCharacterPolicy.IGNORE
        )
    elif getattr(args, "warn_shell", False):
        options = dataclasses.replace(
            options, shell_characters=ShellCharacterPolicy.CONTINUE_AND_REPORT
        )

    if getattr(args, "keep_quotes", False):
        options = dataclasses.replace(options, keep_quotes=True)
    if getattr(args, "keep_separators", False):
        options = dataclasses.replace(options, keep_separators=True)

    return options


def print_split(env: list[str], argv: list[str], as_json: bool) -> None:
    """Print a split command line."""
    if as_json:
        print(json.dumps({"env": env, "argv": argv}))
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Kind", style="cyan")
    table.add_column("Index", style="yellow", justify="right")
    table.add_column("Value", style="green")

    for i, value in enumerate(env):
        table.add_row("env", str(i), repr(value))
    for i, value in enumerate(argv):
        table.add_row("argv", str(i), repr(value))

    console.print(table)


def cmd_split(args: argparse.Namespace) -> None:
    """Execute the split command."""
    if args.line is None:
        print("Please specify a command line to split\n", file=sys.stderr)
        print_usage()
        sys.exit(1)

    options = options_from_args(args)
    separators = args.separators if args.separators else WHITESPACE

    try:
        env, argv = parse(args.line.strip(), separators, options)
    except ShellCharactersFound as e:
        if e.tokens is None:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            sys.exit(1)

        # The scan was allowed to finish, show what it produced
        error_console.print(f"[yellow]Warning: {escape(str(e))}[/yellow]")
        env, argv = split_tokens(e.tokens)
    except TokenizeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    print_split(env, argv, args.json)


def split_tokens(tokens: list[str]) -> tuple[list[str], list[str]]:
    """Split already tokenized input the way parse() does."""
    env, argv = split_environment(tokens)
    return env, argv if argv else [""]


def _is_comment(line: str) -> bool:
    """Check if a line is a comment."""
    stripped = line.lstrip()
    return len(stripped) == 0 or stripped[0] == "#"


def check_file(path: str, options: Options) -> tuple[int, list[LineError]]:
    """
    Split every command line of a file.

    Args:
        path: File with one command line per line
        options: Tokenizer options

    Returns:
        Tuple of (number of lines checked, errors found)
    """
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()

    checked = 0
    errors: list[LineError] = []

    lines = content.split("\n")
    for line_num, line in enumerate(lines, start=1):
        # Skip comments and blank lines
        if _is_comment(line):
            continue

        checked += 1
        try:
            parse(line.strip(), WHITESPACE, options)
        except TokenizeError as e:
            error_name = type(e).__name__
            errors.append(LineError(message=error_name, line_num=line_num, path=path))

    return checked, errors


def cmd_check(args: argparse.Namespace) -> None:
    """Execute the check command."""
    if not args.file:
        print("Please specify a file to check\n", file=sys.stderr)
        print_usage()
        sys.exit(1)

    try:
        checked, errors = check_file(args.file, options_from_args(args))
    except OSError as e:
        console.print(
            f"[red]Error: Cannot read '{escape(args.file)}': {escape(str(e))}[/red]"
        )
        sys.exit(1)

    if errors:
        for error in errors:
            print(
                f"{error.path}:{error.line_num}: error.{error.message}", file=sys.stderr
            )
        sys.exit(1)

    console.print(f"[green]✓ {checked} command lines OK[/green]")


def main() -> None:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Split command lines without a shell", add_help=False
    )

    # Add global help
    parser.add_argument("-h", "--help", action="store_true", help="Show help message")

    # Add subparsers for commands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Split command
    split_parser = subparsers.add_parser("split", add_help=False)
    split_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for split"
    )
    split_parser.add_argument(
        "-p", "--profile", choices=sorted(PROFILES), default="linux"
    )
    split_parser.add_argument("--ignore-shell", action="store_true")
    split_parser.add_argument("--warn-shell", action="store_true")
    split_parser.add_argument("--keep-quotes", action="store_true")
    split_parser.add_argument("--keep-separators", action="store_true")
    split_parser.add_argument("--separators", type=str, help="Token separators")
    split_parser.add_argument("--json", action="store_true", help="Print json")
    split_parser.add_argument("line", nargs="?", help="Command line to split")

    # Check command
    check_parser = subparsers.add_parser("check", add_help=False)
    check_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for check"
    )
    check_parser.add_argument(
        "-p", "--profile", choices=sorted(PROFILES), default="linux"
    )
    check_parser.add_argument("--ignore-shell", action="store_true")
    check_parser.add_argument("file", nargs="?", help="File to check")

    # Help command
    subparsers.add_parser("help", add_help=False)

    # Version command
    subparsers.add_parser("version", add_help=False)

    # Parse arguments
    if len(sys.argv) < 2:
        print_usage()
        return

    args = parser.parse_args()

    # Handle global help
    if args.help or args.command == "help":
        print_usage()
        return

    # Handle version
    if args.command == "version":
        print_version()
        return

    # Execute commands
    if args.command == "split":
        cmd_split(args)
    elif args.command == "check":
        cmd_check(args)
    else:
        print_usage()
