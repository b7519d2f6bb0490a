"""Split command arguments into a preamble and prefixed fragments.

A prefix only counts when it starts the argument string or follows
whitespace, so ``a/b`` inside a location such as ``l/Block a/b`` would be
read as an amount while ``Shop/a/b`` would not. Each value runs up to the
next recognised prefix (or the end of the string) and is trimmed.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from .cli_syntax import Prefix


class ArgumentMultimap:
    """Prefix → values in the order they appeared.

    The preamble (text before the first prefix) is stored under the empty
    prefix.
    """

    _PREAMBLE = Prefix("")

    def __init__(self) -> None:
        self._values: dict[Prefix, list[str]] = {}

    def put(self, prefix: Prefix, value: str) -> None:
        self._values.setdefault(prefix, []).append(value)

    def value(self, prefix: Prefix) -> str | None:
        """Return the last value given for ``prefix`` (last occurrence wins)."""

        values = self._values.get(prefix)
        return values[-1] if values else None

    def all_values(self, prefix: Prefix) -> list[str]:
        return list(self._values.get(prefix, ()))

    def has(self, prefix: Prefix) -> bool:
        return prefix in self._values

    def has_all(self, *prefixes: Prefix) -> bool:
        return all(self.has(p) for p in prefixes)

    def has_any(self, *prefixes: Prefix) -> bool:
        return any(self.has(p) for p in prefixes)

    @property
    def preamble(self) -> str:
        return self.value(self._PREAMBLE) or ""


def _prefix_pattern(prefixes: Iterable[Prefix]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(p.token) for p in sorted(prefixes, key=lambda p: -len(p.token)))
    return re.compile(rf"(?:(?<=\s)|^)({alternatives})")


def tokenize(args: str, *prefixes: Prefix) -> ArgumentMultimap:
    """Tokenize ``args`` against ``prefixes``.

    >>> m = tokenize("1 n/Lunch c/Food c/Work", Prefix("n/"), Prefix("c/"))
    >>> m.preamble, m.value(Prefix("n/")), m.all_values(Prefix("c/"))
    ('1', 'Lunch', ['Food', 'Work'])
    """

    multimap = ArgumentMultimap()
    if not prefixes:
        multimap.put(ArgumentMultimap._PREAMBLE, args.strip())
        return multimap

    by_token = {p.token: p for p in prefixes}
    matches = list(_prefix_pattern(prefixes).finditer(args))

    end_of_preamble = matches[0].start() if matches else len(args)
    multimap.put(ArgumentMultimap._PREAMBLE, args[:end_of_preamble].strip())

    for i, match in enumerate(matches):
        value_end = matches[i + 1].start() if i + 1 < len(matches) else len(args)
        multimap.put(by_token[match.group(1)], args[match.end() : value_end].strip())
    return multimap


__all__ = ["ArgumentMultimap", "tokenize"]
