from __future__ import annotations

from dataclasses import replace

import pytest

from catalogsync.domain.model import OPTIONAL_FIELDS, ConnectorKind, ConnectorType
from catalogsync.domain.reconciliation import (
    ConnectorKeyMismatchError,
    DuplicateConnectorDefinitionError,
    MalformedVersionError,
    MergeDecision,
    ReconciliationError,
    UnknownInUseConnectorError,
    backfill,
    merge_definition,
    reconcile,
)
from tests.helpers.connectors import (
    GITHUB_REPOSITORY,
    by_repository,
    make_source,
    make_source_missing_fields,
)


def test_new_connector_is_inserted_verbatim() -> None:
    latest = make_source(version="0.1000.0")

    plan = reconcile([latest], set(), {})

    assert plan.to_insert == [latest]
    assert plan.to_update == []
    assert plan.decisions == {GITHUB_REPOSITORY: MergeDecision.INSERT}


def test_in_use_connector_with_all_fields_is_left_alone() -> None:
    current = make_source(version="0.0.0")
    latest = make_source(version="0.1000.0")

    plan = reconcile([latest], {GITHUB_REPOSITORY}, by_repository(current))

    assert plan.is_empty
    assert plan.decisions == {GITHUB_REPOSITORY: MergeDecision.UNCHANGED}


def test_in_use_connector_gets_missing_fields_but_keeps_version() -> None:
    current = make_source_missing_fields(version="0.0.0")
    latest = make_source(version="0.1000.0")

    plan = reconcile([latest], {GITHUB_REPOSITORY}, by_repository(current))

    assert plan.to_insert == []
    assert plan.to_update == [make_source(version="0.0.0")]
    assert plan.decisions == {GITHUB_REPOSITORY: MergeDecision.BACKFILL}


def test_unused_connector_with_new_version_is_replaced() -> None:
    current = make_source(version="0.0.0")
    latest = make_source(version="0.1000.0")

    plan = reconcile([latest], set(), by_repository(current))

    assert plan.to_update == [latest]
    assert plan.decisions == {GITHUB_REPOSITORY: MergeDecision.REPLACE}


def test_unused_connector_with_missing_fields_is_backfilled_not_downgraded() -> None:
    current = make_source_missing_fields(version="0.1000.0")
    latest = make_source(version="0.99.0")

    plan = reconcile([latest], set(), by_repository(current))

    assert plan.to_update == [make_source(version="0.1000.0")]
    assert plan.decisions == {GITHUB_REPOSITORY: MergeDecision.BACKFILL}


def test_replacement_takes_every_latest_field() -> None:
    current = replace(make_source(version="0.1.0"), name="Old GitHub", icon="<svg>old</svg>")
    latest = replace(make_source(version="0.2.0"), documentation_url=None)

    decision, merged = merge_definition(current, latest, in_use=False)

    assert decision is MergeDecision.REPLACE
    assert merged == latest
    assert merged.documentation_url is None


def test_equal_versions_fall_through_to_backfill() -> None:
    current = make_source_missing_fields(version="0.5.0")
    latest = make_source(version="0.5.0")

    decision, merged = merge_definition(current, latest, in_use=False)

    assert decision is MergeDecision.BACKFILL
    assert merged.version == "0.5.0"
    assert merged.missing_fields() == ()


def test_backfill_never_overwrites_set_values() -> None:
    current = replace(
        make_source(version="0.1.0"),
        name="Pinned name",
        icon=None,
        connector_type=ConnectorType.DATABASE,
    )
    latest = replace(make_source(version="0.0.1"), name="Latest name", icon="<svg>new</svg>")

    merged = backfill(current, latest)

    assert merged.icon == "<svg>new</svg>"
    assert merged.connector_type is ConnectorType.DATABASE
    assert merged.name == "Pinned name"
    assert merged.version == "0.1.0"
    assert merged.definition_id == current.definition_id


def test_backfill_returns_current_when_latest_has_nothing_new() -> None:
    current = make_source_missing_fields()
    latest = make_source_missing_fields()

    assert backfill(current, latest) is current


def test_definitions_missing_from_latest_are_untouched() -> None:
    github = make_source(version="0.1.0")
    gitlab = make_source("airbyte/source-gitlab", version="0.1.0")

    plan = reconcile([make_source(version="0.1.0")], set(), by_repository(github, gitlab))

    assert plan.is_empty
    assert "airbyte/source-gitlab" not in plan.decisions


def test_mixed_catalog_preserves_latest_order() -> None:
    in_use = make_source_missing_fields(version="1.0.0")
    unused = make_source("airbyte/source-gitlab", version="0.1.0")
    current = by_repository(in_use, replace(unused, documentation_url=None))
    latest = [
        make_source("airbyte/source-zendesk", version="0.1.0"),
        make_source(version="2.0.0"),
        make_source("airbyte/source-gitlab", version="0.2.0"),
        make_source("airbyte/source-asana", version="0.1.0"),
    ]

    plan = reconcile(latest, {GITHUB_REPOSITORY}, current)

    assert [d.repository for d in plan.to_insert] == [
        "airbyte/source-zendesk",
        "airbyte/source-asana",
    ]
    assert [d.repository for d in plan.to_update] == [GITHUB_REPOSITORY, "airbyte/source-gitlab"]
    assert plan.to_update[0].version == "1.0.0"
    assert plan.to_update[1].version == "0.2.0"
    assert plan.count(MergeDecision.INSERT) == 2


def test_versions_are_monotonic_and_set_fields_preserved() -> None:
    current = by_repository(
        make_source_missing_fields(version="0.3.0"),
        replace(make_source("airbyte/source-gitlab", version="1.2.0"), icon=None),
        make_source("airbyte/source-asana", version="0.0.1"),
    )
    latest = [
        make_source(version="0.2.9"),
        make_source("airbyte/source-gitlab", version="1.10.0"),
        replace(make_source("airbyte/source-asana", version="0.0.1"), icon="<svg>asana</svg>"),
    ]
    in_use = {"airbyte/source-gitlab"}

    plan = reconcile(latest, in_use, current)
    after = dict(current) | by_repository(*plan.to_update)

    for key, before in current.items():
        assert after[key].parsed_version >= before.parsed_version
        for name in OPTIONAL_FIELDS:
            if getattr(before, name) is not None:
                assert getattr(after[key], name) == getattr(before, name)
    assert after["airbyte/source-gitlab"].version == "1.2.0"
    assert after["airbyte/source-gitlab"].icon == "<svg>github</svg>"


def test_unknown_in_use_connector_is_rejected() -> None:
    with pytest.raises(UnknownInUseConnectorError) as exc:
        reconcile([make_source()], {GITHUB_REPOSITORY, "airbyte/source-gone"}, {})

    assert exc.value.repositories == ("airbyte/source-github", "airbyte/source-gone")
    assert isinstance(exc.value, ReconciliationError)


def test_duplicate_latest_definitions_are_rejected() -> None:
    with pytest.raises(DuplicateConnectorDefinitionError, match=GITHUB_REPOSITORY):
        reconcile([make_source(version="0.1.0"), make_source(version="0.2.0")], set(), {})


def test_current_mapping_keys_must_match_repository() -> None:
    with pytest.raises(ConnectorKeyMismatchError):
        reconcile([], set(), {"github": make_source()})


def test_malformed_latest_version_fails_the_batch() -> None:
    latest = [make_source("airbyte/source-asana"), make_source(version="latest")]

    with pytest.raises(MalformedVersionError, match=GITHUB_REPOSITORY):
        reconcile(latest, set(), {})


def test_malformed_current_version_fails_even_when_in_use() -> None:
    current = make_source(version="0.1")

    with pytest.raises(MalformedVersionError):
        reconcile([make_source(version="0.2.0")], {GITHUB_REPOSITORY}, by_repository(current))


def test_reconcile_accepts_any_collection_of_in_use_keys() -> None:
    current = make_source(version="0.1.0")

    plan = reconcile([make_source(version="0.2.0")], [GITHUB_REPOSITORY], by_repository(current))

    assert plan.decisions[GITHUB_REPOSITORY] is MergeDecision.UNCHANGED
    assert plan.to_update == []
    assert current.kind is ConnectorKind.SOURCE
