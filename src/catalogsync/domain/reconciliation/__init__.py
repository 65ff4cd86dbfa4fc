"""Reconciliation of persisted connector catalogs with a latest catalog.

Two stages:
1) ``merge.reconcile`` computes a plan (pure, no I/O)
2) ``apply.apply_plan`` writes the plan inside the caller's transaction
"""

from __future__ import annotations

from .apply import ApplyResult, apply_plan
from .contracts import MergeDecision, ReconciliationPlan
from .errors import (
    ConnectorKeyMismatchError,
    ConnectorKindMismatchError,
    DuplicateConnectorDefinitionError,
    MalformedVersionError,
    ReconciliationError,
    UnknownInUseConnectorError,
)
from .merge import backfill, merge_definition, reconcile

__all__ = [
    "ApplyResult",
    "ConnectorKeyMismatchError",
    "ConnectorKindMismatchError",
    "DuplicateConnectorDefinitionError",
    "MalformedVersionError",
    "MergeDecision",
    "ReconciliationError",
    "ReconciliationPlan",
    "UnknownInUseConnectorError",
    "apply_plan",
    "backfill",
    "merge_definition",
    "reconcile",
]
