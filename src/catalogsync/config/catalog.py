"""Latest-catalog source configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import require_env_var

CATALOG_PATH_ENV_VAR: Final[str] = "CATALOGSYNC_CATALOG_PATH"


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    """Where the latest connector catalog document is read from."""

    catalog_path: Path


def get_catalog_config(*, catalog_path: Path | str | None = None) -> CatalogConfig:
    """Return catalog settings, falling back to ``CATALOGSYNC_CATALOG_PATH``."""

    raw_path = catalog_path if catalog_path is not None else require_env_var(CATALOG_PATH_ENV_VAR)
    return CatalogConfig(catalog_path=Path(raw_path).expanduser())
