"""Type definitions for action shrinking."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import NamedTuple, Protocol


class AccessLevel(StrEnum):
    """Access levels an action can be classified under."""

    LIST = "List"
    READ = "Read"
    WRITE = "Write"
    TAGGING = "Tagging"
    PERMISSIONS_MANAGEMENT = "Permissions management"


ALL_ACCESS_LEVELS = frozenset(AccessLevel)


class ActionOracle(Protocol):
    """Resolves action patterns against a catalog of known actions."""

    def expand(
        self,
        patterns: str | Iterable[str],
        *,
        expand_service_asterisk: bool = False,
    ) -> list[str]:
        """Expand patterns into the sorted, unique actions they match."""
        ...

    def classify(self, service: str, action: str) -> AccessLevel:
        """Return the access level of a single action."""
        ...


class SequenceFrequency(NamedTuple):
    """How many actions contain a sequence."""

    sequence: str
    frequency: int
    length: int


class ActionGroup(NamedTuple):
    """Actions of one service, with and without the service prefix."""

    with_service: list[str]
    without_service: list[str]


@dataclass(frozen=True)
class ShrinkOptions:
    """Options for a shrink run."""

    # Zero or less runs until the pattern list stops shrinking
    iterations: int = 2
    # Empty means every access level is reduced
    levels: frozenset[AccessLevel] = field(default_factory=frozenset)
    max_workers: int = 1

    @property
    def all_levels(self) -> bool:
        """Whether every access level is selected for reduction."""
        return not self.levels or self.levels >= ALL_ACCESS_LEVELS
