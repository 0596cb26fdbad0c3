"""One full top-down synchronization pass over a store."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .config import NavigationSettings
from .levels import IndexPlan, plan_first_level_index, plan_nested_index, plan_root_index
from .reconcile import ReconcileOutcome, reconcile
from .store import DocumentStore

logger = logging.getLogger(__name__)


@dataclass
class SyncReport:
    """Outcome of every reconciled navigation document in one pass."""

    outcomes: list[tuple[str, ReconcileOutcome]] = field(default_factory=list)

    def record(self, path: str, outcome: ReconcileOutcome) -> None:
        self.outcomes.append((path, outcome))

    @property
    def writes(self) -> int:
        return sum(1 for _path, outcome in self.outcomes if outcome is not ReconcileOutcome.UNCHANGED)

    def written_paths(self) -> list[str]:
        return [path for path, outcome in self.outcomes if outcome is not ReconcileOutcome.UNCHANGED]


def _apply(store: DocumentStore, plan: IndexPlan, report: SyncReport) -> None:
    report.record(plan.path, reconcile(store, plan.path, plan.content))


def run_sync_pass(store: DocumentStore, settings: NavigationSettings) -> SyncReport:
    """Reconcile the root index, each first-level index, then their nested ones.

    Store errors propagate and abort the rest of the pass.
    """
    report = SyncReport()
    root_plan = plan_root_index(store, settings)
    _apply(store, root_plan, report)

    for folder in root_plan.nested:
        first_level = plan_first_level_index(store, folder, settings)
        if first_level is None:
            continue
        _apply(store, first_level, report)
        for subfolder in first_level.nested:
            nested = plan_nested_index(store, subfolder, settings)
            if nested is not None:
                _apply(store, nested, report)

    logger.debug("sync pass reconciled %d documents, %d written", len(report.outcomes), report.writes)
    return report


__all__ = [
    "SyncReport",
    "run_sync_pass",
]
