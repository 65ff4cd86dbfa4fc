"""Reconciliation plan types shared by the merge and apply stages.

The plan is the only contract between the pure merge and the persistence
applier: the merge decides *what* to write, the applier decides nothing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from catalogsync.domain.model import ConnectorDefinition


class MergeDecision(StrEnum):
    """Outcome of merging one latest definition into the persisted catalog."""

    INSERT = "insert"
    REPLACE = "replace"
    BACKFILL = "backfill"
    UNCHANGED = "unchanged"


@dataclass(slots=True)
class ReconciliationPlan:
    """Records to write for one reconciliation pass over a single kind."""

    to_insert: list[ConnectorDefinition] = field(default_factory=list["ConnectorDefinition"])
    to_update: list[ConnectorDefinition] = field(default_factory=list["ConnectorDefinition"])
    decisions: dict[str, MergeDecision] = field(default_factory=dict[str, MergeDecision])

    def record(self, decision: MergeDecision, definition: ConnectorDefinition) -> None:
        self.decisions[definition.repository] = decision
        if decision is MergeDecision.INSERT:
            self.to_insert.append(definition)
        elif decision in (MergeDecision.REPLACE, MergeDecision.BACKFILL):
            self.to_update.append(definition)

    def count(self, decision: MergeDecision) -> int:
        return sum(1 for value in self.decisions.values() if value is decision)

    @property
    def is_empty(self) -> bool:
        return not self.to_insert and not self.to_update
