"""User-facing message templates shared by parsers and commands."""

from __future__ import annotations

from collections.abc import Sequence

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_INVALID_TRANSACTION_DISPLAYED_INDEX = "The transaction index provided is invalid."
MESSAGE_TRANSACTIONS_LISTED_OVERVIEW = "{} transactions listed!"
MESSAGE_DUPLICATE_TRANSACTION = "This transaction already exists in UniCash."


def invalid_format(usage: str) -> str:
    return MESSAGE_INVALID_COMMAND_FORMAT.format(usage)


def format_usage(
    command_word: str,
    description: str,
    *,
    arguments: Sequence[str] = (),
    example: str | None = None,
) -> str:
    """Render a command's usage block.

    ``arguments`` are shown in order on the usage line; the example defaults
    to the bare command word.
    """

    lines = [f"{command_word}: {description}"]
    usage_line = " ".join([command_word, *arguments])
    lines.append(f"Usage: {usage_line}")
    lines.append(f"Example: {example or command_word}")
    return "\n".join(lines)


__all__ = [
    "MESSAGE_DUPLICATE_TRANSACTION",
    "MESSAGE_INVALID_COMMAND_FORMAT",
    "MESSAGE_INVALID_TRANSACTION_DISPLAYED_INDEX",
    "MESSAGE_TRANSACTIONS_LISTED_OVERVIEW",
    "MESSAGE_UNKNOWN_COMMAND",
    "format_usage",
    "invalid_format",
]
