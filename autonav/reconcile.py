"""Compare-then-write for navigation documents."""

from __future__ import annotations

import logging
from enum import Enum

from .store import DocumentExistsError, DocumentStore

logger = logging.getLogger(__name__)


class ReconcileOutcome(Enum):
    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    # Creation lost a race with another writer; the document was overwritten.
    RECOVERED = "recovered"


def reconcile(store: DocumentStore, path: str, expected: str) -> ReconcileOutcome:
    """Make the document at ``path`` hold ``expected``.

    Existing content is compared after stripping surrounding whitespace on
    both sides and rewritten only when it differs. Other store errors
    propagate to the caller.
    """
    existing = store.get(path)
    if existing is None:
        try:
            store.create(path, expected)
        except DocumentExistsError:
            raced = store.get(path)
            if raced is None or not raced.is_document:
                raise
            store.modify(path, expected)
            logger.info("recovered %s after concurrent create", path)
            return ReconcileOutcome.RECOVERED
        logger.info("created %s", path)
        return ReconcileOutcome.CREATED

    current = store.read(path)
    if current.strip() == expected.strip():
        logger.debug("unchanged %s", path)
        return ReconcileOutcome.UNCHANGED

    store.modify(path, expected)
    logger.info("updated %s", path)
    return ReconcileOutcome.UPDATED


__all__ = [
    "ReconcileOutcome",
    "reconcile",
]
