"""Pure merge of a latest connector catalog into the persisted catalog.

Per latest definition, keyed by repository:

- unknown repository: insert the latest definition verbatim
- unused connector with a newer latest version: replace the record wholesale
- otherwise (in use, or latest not newer): keep the persisted version and
  fill only the optional fields that are still null

Persisted definitions absent from the latest catalog are left alone. Nothing
here performs I/O; inputs are validated up front so that a rejected batch
never produces a partial plan.
"""

from __future__ import annotations

from dataclasses import replace
from logging import getLogger
from typing import TYPE_CHECKING

from catalogsync.domain.model import OPTIONAL_FIELDS

from .contracts import MergeDecision, ReconciliationPlan
from .errors import (
    ConnectorKeyMismatchError,
    DuplicateConnectorDefinitionError,
    UnknownInUseConnectorError,
)

if TYPE_CHECKING:
    from collections.abc import Collection, Mapping, Sequence

    from catalogsync.domain.model import ConnectorDefinition


log = getLogger(__name__)


def reconcile(
    latest: Sequence[ConnectorDefinition],
    in_use: Collection[str],
    current: Mapping[str, ConnectorDefinition],
) -> ReconciliationPlan:
    """Compute the inserts and updates that bring ``current`` up to ``latest``."""

    in_use_keys = frozenset(in_use)
    _validate_inputs(latest, in_use_keys, current)

    plan = ReconciliationPlan()
    for latest_def in latest:
        current_def = current.get(latest_def.repository)
        if current_def is None:
            decision, merged = MergeDecision.INSERT, latest_def
        else:
            decision, merged = merge_definition(
                current_def,
                latest_def,
                in_use=latest_def.repository in in_use_keys,
            )
        log.debug(
            "%s %s: %s (persisted=%s, latest=%s)",
            latest_def.kind,
            latest_def.repository,
            decision,
            current_def.version if current_def is not None else None,
            latest_def.version,
        )
        plan.record(decision, merged)
    return plan


def merge_definition(
    current: ConnectorDefinition,
    latest: ConnectorDefinition,
    *,
    in_use: bool,
) -> tuple[MergeDecision, ConnectorDefinition]:
    """Merge one latest definition into its persisted counterpart."""

    if not in_use and latest.parsed_version > current.parsed_version:
        return MergeDecision.REPLACE, latest

    merged = backfill(current, latest)
    if merged == current:
        return MergeDecision.UNCHANGED, current
    return MergeDecision.BACKFILL, merged


def backfill(current: ConnectorDefinition, latest: ConnectorDefinition) -> ConnectorDefinition:
    """Fill ``current``'s null optional fields from ``latest``; set values are kept."""

    changes: dict[str, object] = {}
    for name in OPTIONAL_FIELDS:
        if getattr(current, name) is None and getattr(latest, name) is not None:
            changes[name] = getattr(latest, name)
    if not changes:
        return current
    return replace(current, **changes)


def _validate_inputs(
    latest: Sequence[ConnectorDefinition],
    in_use: frozenset[str],
    current: Mapping[str, ConnectorDefinition],
) -> None:
    for key, definition in current.items():
        if key != definition.repository:
            raise ConnectorKeyMismatchError(key, definition.repository)

    unknown = in_use.difference(current)
    if unknown:
        raise UnknownInUseConnectorError(unknown)

    seen: set[str] = set()
    for definition in latest:
        if definition.repository in seen:
            raise DuplicateConnectorDefinitionError(definition.repository)
        seen.add(definition.repository)

        _ = definition.parsed_version
        existing = current.get(definition.repository)
        if existing is not None:
            _ = existing.parsed_version
