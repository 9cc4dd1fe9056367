"""In-memory catalog of actions that resolves patterns and access levels."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from logging import getLogger
from typing import TypeAlias

from shrink.tokens import collapse_asterisks, regex_for_wildcard_action
from shrink.types import AccessLevel

logger = getLogger(__name__)

Services: TypeAlias = Mapping[str, Mapping[str, AccessLevel | str]]


class CatalogError(Exception):
    """The catalog could not be read or does not know an action."""


class ActionCatalog:
    """Actions per service, each classified by access level."""

    def __init__(
        self,
        services: Services,
        *,
        version: str | None = None,
        updated_at: str | None = None,
    ) -> None:
        """Initialize the catalog from a service to action mapping."""
        try:
            self._services = {
                service: {
                    action: AccessLevel(level) for action, level in actions.items()
                }
                for service, actions in services.items()
            }
        except ValueError as err:
            msg = f"Unknown access level in catalog: {err}"
            raise CatalogError(msg) from err
        self.version = version
        self.updated_at = updated_at

    @property
    def services(self) -> list[str]:
        """Service prefixes known to the catalog."""
        return sorted(self._services)

    def __len__(self) -> int:
        """Total number of actions."""
        return sum(len(actions) for actions in self._services.values())

    def _expand_pattern(self, pattern: str, *, expand_service_asterisk: bool) -> set[str]:
        """Resolve a single pattern."""
        if collapse_asterisks(pattern) == "*":
            return {
                f"{service}:{action}"
                for service, actions in self._services.items()
                for action in actions
            }

        if ":" not in pattern:
            logger.warning("Invalid action pattern, missing service: %s", pattern)
            return set()

        service_pattern, action_pattern = pattern.split(":", 1)
        service_regex = regex_for_wildcard_action(service_pattern)
        services = [s for s in self._services if service_regex.match(s)]
        if not services:
            logger.warning("Unknown service in pattern: %s", pattern)
            return set()

        if (
            not expand_service_asterisk
            and "*" not in service_pattern
            and collapse_asterisks(action_pattern) == "*"
        ):
            return {f"{service}:*" for service in services}

        action_regex = regex_for_wildcard_action(action_pattern)
        return {
            f"{service}:{action}"
            for service in services
            for action in self._services[service]
            if action_regex.match(action)
        }

    def expand(
        self,
        patterns: str | Iterable[str],
        *,
        expand_service_asterisk: bool = False,
    ) -> list[str]:
        """Expand patterns into the sorted, unique actions they match.

        Without ``expand_service_asterisk`` a "service:*" pattern is returned
        as it is instead of listing every action of the service.
        """
        if isinstance(patterns, str):
            patterns = [patterns]
        found: set[str] = set()
        for pattern in patterns:
            found |= self._expand_pattern(
                pattern.strip(),
                expand_service_asterisk=expand_service_asterisk,
            )
        return sorted(found)

    def classify(self, service: str, action: str) -> AccessLevel:
        """Return the access level of a single action."""
        try:
            return self._services[service][action]
        except KeyError as err:
            msg = f"Unknown action: {service}:{action}"
            raise CatalogError(msg) from err
