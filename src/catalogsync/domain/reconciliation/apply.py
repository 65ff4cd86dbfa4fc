"""Apply a reconciliation plan through a repository.

The applier writes; it never commits, rolls back or retries. Store errors
propagate to the caller, whose unit of work owns the transaction.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from catalogsync.domain.ports import ConnectorDefinitionWriter

    from .contracts import ReconciliationPlan


log = getLogger(__name__)


@dataclass(slots=True)
class ApplyResult:
    """Summary of writes issued for one plan."""

    inserted: int = 0
    updated: int = 0


def apply_plan(plan: ReconciliationPlan, repository: ConnectorDefinitionWriter) -> ApplyResult:
    result = ApplyResult()
    for definition in plan.to_insert:
        repository.add(definition)
        result.inserted += 1
    for definition in plan.to_update:
        repository.update(definition)
        result.updated += 1
    log.debug("Applied plan: inserted=%s, updated=%s", result.inserted, result.updated)
    return result
