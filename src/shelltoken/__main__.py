#!/usr/bin/env python3
"""Main entry point for the shelltoken command-line tool."""

import sys

from shelltoken.commands import main


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
