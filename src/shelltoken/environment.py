"""Separation of leading environment assignments from the command."""


def split_environment(tokens: list[str]) -> tuple[list[str], list[str]]:
    """
    Split leading NAME=VALUE tokens from the command and its arguments.

    Every token up to the first one without a '=' is treated as an
    environment assignment. No further validation of the name is done.

    Args:
        tokens: Tokens as returned by tokenize()

    Returns:
        Tuple of (environment assignments, command and arguments)
    """
    for i, token in enumerate(tokens):
        if "=" not in token:
            return list(tokens[:i]), list(tokens[i:])

    return list(tokens), []
