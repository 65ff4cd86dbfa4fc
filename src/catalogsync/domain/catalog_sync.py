"""Application services for updating persisted connector catalogs."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from catalogsync.domain.reconciliation import (
    ConnectorKindMismatchError,
    MergeDecision,
    apply_plan,
    reconcile,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Collection, Iterable, Mapping, Sequence

    from catalogsync.domain.model import ConnectorDefinition, ConnectorKind
    from catalogsync.domain.ports import CatalogUnitOfWork, ConnectorDefinitionWriter
    from catalogsync.domain.reconciliation import ReconciliationPlan


log = getLogger(__name__)


@dataclass(slots=True)
class KindSyncSummary:
    """Outcome of one reconciliation pass for a single connector kind."""

    kind: ConnectorKind
    inserted: int = 0
    replaced: int = 0
    backfilled: int = 0
    unchanged: int = 0
    untouched: int = 0

    @property
    def written(self) -> int:
        return self.inserted + self.replaced + self.backfilled


@dataclass(slots=True)
class CatalogSyncResult:
    """Outcome of a catalog sync across all reconciled kinds."""

    summaries: dict[ConnectorKind, KindSyncSummary] = field(
        default_factory=dict["ConnectorKind", KindSyncSummary]
    )

    @property
    def written(self) -> int:
        return sum(summary.written for summary in self.summaries.values())


def update_connector_definitions(
    repository: ConnectorDefinitionWriter,
    *,
    kind: ConnectorKind,
    latest: Sequence[ConnectorDefinition],
    in_use: Collection[str],
    current: Mapping[str, ConnectorDefinition],
) -> ReconciliationPlan:
    """Reconcile ``latest`` into ``current`` for ``kind`` and write the result.

    Must run inside a transaction owned by the caller; nothing is committed
    here and any write failure propagates unchanged.
    """

    _require_kind(kind, latest)
    _require_kind(kind, current.values())

    plan = reconcile(latest, in_use, current)
    apply_plan(plan, repository)
    return plan


def sync_connector_catalog(
    latest_by_kind: Mapping[ConnectorKind, Sequence[ConnectorDefinition]],
    *,
    unit_of_work_factory: Callable[[], CatalogUnitOfWork],
) -> CatalogSyncResult:
    """Reconcile every kind in ``latest_by_kind`` and commit them together."""

    result = CatalogSyncResult()
    with unit_of_work_factory() as uow:
        definitions = uow.repositories.definitions
        instances = uow.repositories.instances
        for kind, latest in latest_by_kind.items():
            current = definitions.get_by_repository(kind)
            in_use = instances.repositories_in_use(kind)
            plan = update_connector_definitions(
                definitions,
                kind=kind,
                latest=latest,
                in_use=in_use,
                current=current,
            )
            summary = _summarize(kind, plan, latest=latest, current=current)
            result.summaries[kind] = summary
            log.info(
                "Reconciled %s catalog: inserted=%s, replaced=%s, backfilled=%s, "
                "unchanged=%s, untouched=%s",
                kind,
                summary.inserted,
                summary.replaced,
                summary.backfilled,
                summary.unchanged,
                summary.untouched,
            )
        uow.commit()
    return result


def _require_kind(kind: ConnectorKind, definitions: Iterable[ConnectorDefinition]) -> None:
    for definition in definitions:
        if definition.kind != kind:
            raise ConnectorKindMismatchError(
                definition.repository, expected=kind, actual=definition.kind
            )


def _summarize(
    kind: ConnectorKind,
    plan: ReconciliationPlan,
    *,
    latest: Sequence[ConnectorDefinition],
    current: Mapping[str, ConnectorDefinition],
) -> KindSyncSummary:
    latest_keys = {definition.repository for definition in latest}
    return KindSyncSummary(
        kind=kind,
        inserted=plan.count(MergeDecision.INSERT),
        replaced=plan.count(MergeDecision.REPLACE),
        backfilled=plan.count(MergeDecision.BACKFILL),
        unchanged=plan.count(MergeDecision.UNCHANGED),
        untouched=sum(1 for key in current if key not in latest_keys),
    )
