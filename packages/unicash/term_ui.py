"""Terminal presentation helpers (prompt_toolkit-based).

Kept apart from the command logic so they can be tested with a pipe input.
The REPL reads one command line at a time through :func:`prompt_command` and
shows the displayed transaction list with :func:`render_transactions`.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style

from .models import Transaction
from .parsing import COMMAND_PARSERS
from .parsing.cli_syntax import ALL_PREFIXES

PROMPT_MESSAGE = "unicash> "

_STYLE = Style.from_dict({"auto-suggestion": "fg:#888888"})


def build_completer(command_words: Iterable[str] | None = None) -> WordCompleter:
    """Completer over command words and field prefixes."""

    words = list(command_words if command_words is not None else COMMAND_PARSERS)
    words += [p.token for p in ALL_PREFIXES]
    # WORD=True so "n/" completes as a single token
    return WordCompleter(words, ignore_case=False, WORD=True, sentence=False)


def new_session() -> PromptSession:
    return PromptSession(auto_suggest=AutoSuggestFromHistory(), style=_STYLE)


def prompt_command(
    *,
    session: PromptSession | None = None,
    message: str = PROMPT_MESSAGE,
) -> str:
    """Read one command line. Raises ``EOFError`` on Ctrl-D."""

    sess = session if session is not None else new_session()
    text = sess.prompt(message, completer=build_completer(), complete_while_typing=False)
    return text.strip()


def render_transactions(transactions: Sequence[Transaction]) -> str:
    """Numbered, one-transaction-per-block listing (1-based, as used by edit/delete)."""

    if not transactions:
        return "No transactions to show."
    blocks: list[str] = []
    for i, t in enumerate(transactions, start=1):
        sign = "-" if t.is_expense else "+"
        header = f"{i}. {t.name}  {sign}${t.amount}  [{t.type}]"
        details = f"   {t.date_time}  @ {t.location}"
        if t.categories:
            details += f"  #{' #'.join(c.value for c in t.categories)}"
        blocks.append(f"{header}\n{details}")
    return "\n".join(blocks)


__all__ = ["PROMPT_MESSAGE", "build_completer", "new_session", "prompt_command", "render_transactions"]
