from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from catalogsync.app import (
    list_connector_definitions,
    register_connector_instance,
    sync_catalog_file,
)
from catalogsync.config import ConfigurationError, configure_logging
from catalogsync.domain.model import ConnectorKind

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_kind(value: str) -> ConnectorKind:
    try:
        return ConnectorKind(value.strip().lower())
    except ValueError as exc:
        choices = ", ".join(kind.value for kind in ConnectorKind)
        raise argparse.ArgumentTypeError(f"Invalid kind {value!r} (choose from {choices})") from exc


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile connector catalogs")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log individual merge decisions",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    sync = subparsers.add_parser("sync", help="Apply a latest catalog document")
    sync.add_argument(
        "--catalog",
        type=str,
        default=None,
        help="Path to the latest catalog JSON (defaults to CATALOGSYNC_CATALOG_PATH)",
    )
    sync.add_argument(
        "--kind",
        type=_parse_kind,
        action="append",
        default=None,
        help="Restrict the sync to one connector kind (repeatable)",
    )

    listing = subparsers.add_parser("list", help="Show persisted connector definitions")
    listing.add_argument("--kind", type=_parse_kind, required=True)

    instance = subparsers.add_parser("instance", help="Connector instance commands")
    instance_sub = instance.add_subparsers(dest="instance_command", required=True)
    instance_add = instance_sub.add_parser("add", help="Record a configured connector")
    instance_add.add_argument("--kind", type=_parse_kind, required=True)
    instance_add.add_argument(
        "--repository",
        type=str,
        required=True,
        help="Repository of an already persisted definition",
    )
    instance_add.add_argument("--name", type=str, required=True)

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        if parsed_args.command == "sync":
            sync_catalog_file(catalog_path=parsed_args.catalog, kinds=parsed_args.kind)
        elif parsed_args.command == "list":
            for definition in list_connector_definitions(parsed_args.kind):
                log.info(
                    "%s %s (%s) docs=%s",
                    definition.repository,
                    definition.version,
                    definition.name,
                    definition.documentation_url,
                )
        elif parsed_args.command == "instance" and parsed_args.instance_command == "add":
            instance = register_connector_instance(
                kind=parsed_args.kind,
                repository=parsed_args.repository,
                name=parsed_args.name,
            )
            log.info("Registered instance %s", instance.id)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during %s", parsed_args.command)
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
