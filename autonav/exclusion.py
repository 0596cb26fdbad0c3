"""Excluded-folder name parsing and matching."""

from __future__ import annotations


def parse_excluded_names(spec: str | None) -> frozenset[str]:
    """Parse a comma-separated exclusion list.

    Entries are whitespace-trimmed and empty entries are dropped, so
    ``" , Templates,, "`` yields ``{"Templates"}``.
    """
    if not spec:
        return frozenset()
    return frozenset(part.strip() for part in spec.split(",") if part.strip())


def is_excluded(name: str, excluded_names: frozenset[str]) -> bool:
    """Return whether ``name`` is excluded (case-sensitive)."""
    return name in excluded_names


__all__ = [
    "parse_excluded_names",
    "is_excluded",
]
