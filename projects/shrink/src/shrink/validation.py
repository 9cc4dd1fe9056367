"""Round-trip validation of shrunk patterns."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from shrink.types import ActionOracle


def validate_shrink_results(
    desired_actions: Iterable[str],
    patterns: list[str],
    oracle: ActionOracle,
) -> str | None:
    """Check that the patterns resolve to exactly the desired actions.

    Args:
        desired_actions: Actions the patterns should match
        patterns: Patterns derived by the shrink
        oracle: Resolves the patterns back into actions

    Returns:
        A description of the first mismatch, or None when the sets are equal

    """
    desired = list(desired_actions)
    desired_set = set(desired)
    expanded = oracle.expand(patterns, expand_service_asterisk=True)
    expanded_set = set(expanded)

    if undesired := next((a for a in expanded if a not in desired_set), None):
        return f"Undesired action: {undesired}"

    if missing := next((a for a in desired if a not in expanded_set), None):
        return f"Missing action: {missing}"

    return None
