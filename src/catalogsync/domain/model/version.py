"""Semantic version value object.

Connector versions are ``MAJOR.MINOR.PATCH`` strings. They are compared
component by component as integers, so ``0.1000.0`` ranks above ``0.99.0``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

_SEMVER_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)$"
)


class MalformedVersionError(ValueError):
    """Raised when a version string is not ``MAJOR.MINOR.PATCH``."""

    def __init__(self, version: object, *, repository: str | None = None) -> None:
        self.version = version
        self.repository = repository
        target = f" for {repository}" if repository else ""
        super().__init__(f"Malformed semantic version{target}: {version!r}")


@dataclass(frozen=True, slots=True, order=True)
class SemanticVersion:
    major: int
    minor: int
    patch: int

    @classmethod
    def parse(cls, value: str, *, repository: str | None = None) -> SemanticVersion:
        if not isinstance(value, str):
            raise MalformedVersionError(value, repository=repository)
        match = _SEMVER_PATTERN.fullmatch(value)
        if match is None:
            raise MalformedVersionError(value, repository=repository)
        major, minor, patch = (int(part) for part in match.groups())
        return cls(major, minor, patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def compare_versions(left: str, right: str) -> int:
    """Return -1, 0 or 1 as ``left`` is lower than, equal to or higher than ``right``."""

    left_version = SemanticVersion.parse(left)
    right_version = SemanticVersion.parse(right)
    if left_version < right_version:
        return -1
    if left_version > right_version:
        return 1
    return 0
