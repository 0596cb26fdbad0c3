"""Natural, case-insensitive ordering for folder and document names."""

from __future__ import annotations

import re
import unicodedata

_DIGITS_RE = re.compile(r"(\d+)")


def _fold(text: str) -> str:
    """Casefold and strip combining accents so ``É`` sorts beside ``e``."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def natural_sort_key(name: str) -> tuple:
    """Sort key comparing digit runs numerically and text case-insensitively.

    ``"Chapter 2"`` sorts before ``"Chapter 10"``. Text and number chunks are
    tagged so mixed shapes (``"2a"`` vs ``"a2"``) never compare ``int`` with
    ``str``. Names equal apart from case put lowercase first (``"a"`` before
    ``"A"``).
    """
    chunks: list[tuple[int, int, str]] = []
    # Odd split positions hold the decimal-digit runs matched by the group.
    for index, chunk in enumerate(_DIGITS_RE.split(_fold(name))):
        if not chunk:
            continue
        if index % 2:
            chunks.append((0, int(chunk), ""))
        else:
            chunks.append((1, 0, chunk))
    return (tuple(chunks), name.casefold(), name.swapcase())


__all__ = ["natural_sort_key"]
