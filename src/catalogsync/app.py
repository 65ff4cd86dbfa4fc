"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from catalogsync.adapters.catalog_file import load_latest_catalog
from catalogsync.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyCatalogUnitOfWork,
    is_started,
    startup,
)
from catalogsync.config import get_catalog_config
from catalogsync.domain.catalog_sync import CatalogSyncResult, sync_connector_catalog
from catalogsync.domain.model import ConnectorDefinition, ConnectorInstance, ConnectorKind
from catalogsync.domain.ports.unit_of_work import CatalogUnitOfWork

if TYPE_CHECKING:
    from collections.abc import Collection
    from pathlib import Path

UnitOfWorkFactory = Callable[[], CatalogUnitOfWork]


log = getLogger(__name__)


def _resolve_unit_of_work(unit_of_work_factory: UnitOfWorkFactory | None) -> UnitOfWorkFactory:
    if unit_of_work_factory is not None:
        return unit_of_work_factory
    if not is_started():
        startup()
    return SqlAlchemyCatalogUnitOfWork


def sync_catalog_file(
    *,
    catalog_path: Path | str | None = None,
    kinds: Collection[ConnectorKind] | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> CatalogSyncResult:
    """Reconcile the persisted catalog with the latest catalog document."""

    config = get_catalog_config(catalog_path=catalog_path)
    latest_by_kind = load_latest_catalog(config.catalog_path)
    if kinds is not None:
        latest_by_kind = {kind: latest_by_kind[kind] for kind in ConnectorKind if kind in kinds}

    effective_uow = _resolve_unit_of_work(unit_of_work_factory)
    log.info(
        "Starting catalog sync: path=%s, kinds=%s",
        config.catalog_path,
        ", ".join(latest_by_kind),
    )

    result = sync_connector_catalog(latest_by_kind, unit_of_work_factory=effective_uow)

    log.info(f"Finished catalog sync: written={result.written}")
    return result


def list_connector_definitions(
    kind: ConnectorKind,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> list[ConnectorDefinition]:
    """Return persisted definitions of ``kind`` ordered by repository."""

    effective_uow = _resolve_unit_of_work(unit_of_work_factory)
    with effective_uow() as uow:
        definitions = uow.repositories.definitions.get_by_repository(kind)
    return list(definitions.values())


def register_connector_instance(
    *,
    kind: ConnectorKind,
    repository: str,
    name: str,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> ConnectorInstance:
    """Record a configured workload, marking ``repository`` as in use."""

    effective_uow = _resolve_unit_of_work(unit_of_work_factory)
    with effective_uow() as uow:
        if uow.repositories.definitions.get(kind, repository) is None:
            raise ValueError(f"Unknown {kind} connector: {repository}")
        instance = ConnectorInstance(kind=kind, repository=repository, name=name)
        uow.repositories.instances.add(instance)
        uow.commit()
    return instance
