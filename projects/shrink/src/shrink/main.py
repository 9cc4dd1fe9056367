"""Main module for shrinking action lists into wildcard patterns."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from itertools import chain
from logging import getLogger
from typing import TYPE_CHECKING

from shrink.errors import ShrinkValidationError
from shrink.reduction import consolidate_wildcard_patterns, reduce_action
from shrink.sequences import find_common_sequences
from shrink.tokens import collapse_asterisks
from shrink.types import ActionGroup, ShrinkOptions
from shrink.validation import validate_shrink_results

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from shrink.types import ActionOracle

logger = getLogger(__name__)


def map_actions(actions: Iterable[str]) -> list[str]:
    """Strip the service prefix, "s3:GetObject" -> "GetObject"."""
    return [action.split(":", 1)[1] for action in actions]


def group_actions_by_service(actions: Iterable[str]) -> dict[str, ActionGroup]:
    """Group service:action strings by service, in first-seen order."""
    groups: dict[str, ActionGroup] = {}
    for action_string in actions:
        service, action = action_string.split(":", 1)
        group = groups.setdefault(service, ActionGroup([], []))
        group.with_service.append(action_string)
        group.without_service.append(action)
    return groups


def shrink_iteration(
    desired_actions: list[str],
    undesired_actions: Sequence[str],
    *,
    deep: bool,
) -> list[str]:
    """Run one reduction pass over the desired actions.

    A shallow pass reduces by the most common sequence only, a deep pass by
    every common sequence, most frequent first. Each sequence works on the
    output of the previous one.
    """
    common_sequences = sorted(
        (s for s in find_common_sequences(desired_actions) if s.sequence != "*"),
        key=lambda s: s.frequency,
        reverse=True,
    )
    sequences_to_process = common_sequences if deep else common_sequences[:1]

    reduced_actions = desired_actions
    for common in sequences_to_process:
        reduced_iteration = dict.fromkeys(
            reduce_action(action, common.sequence, undesired_actions)
            for action in reduced_actions
        )
        reduced_actions = consolidate_wildcard_patterns(reduced_iteration)

    return reduced_actions


def shrink_resolved_list(
    desired_actions: list[str],
    possible_actions: list[str],
    iterations: int,
) -> list[str]:
    """Shrink resolved actions to patterns matching none of the other possible ones.

    Shallow passes run until the pattern count stops dropping, then deep
    passes do the same. Every pass uses one iteration; zero or less iterations
    means no limit.

    Args:
        desired_actions: Actions to match, without service prefix
        possible_actions: Every action of the service, without service prefix
        iterations: Maximum number of passes

    Returns:
        Patterns matching the desired actions and no other possible action

    """
    desired_set = set(desired_actions)
    undesired_actions = [a for a in possible_actions if a not in desired_set]

    if not undesired_actions:
        # Every possible action is wanted
        return ["*"]

    remaining = iterations if iterations > 0 else None
    action_list = list(desired_actions)

    for deep in (False, True):
        while True:
            previous_length = len(action_list)
            action_list = shrink_iteration(action_list, undesired_actions, deep=deep)
            logger.debug(
                "%s pass: %d -> %d patterns",
                "Deep" if deep else "Shallow",
                previous_length,
                len(action_list),
            )
            if remaining is not None:
                remaining -= 1
                if remaining <= 0:
                    return action_list
            if len(action_list) >= previous_length:
                break

    return action_list


def _split_by_level(
    service: str,
    actions: list[str],
    oracle: ActionOracle,
    options: ShrinkOptions,
) -> tuple[list[str], list[str]]:
    """Split actions into those to reduce and those kept as they are."""
    if options.all_levels:
        return actions, []

    reducible: list[str] = []
    kept: list[str] = []
    for action in actions:
        if oracle.classify(service, action) in options.levels:
            reducible.append(action)
        else:
            kept.append(action)
    return reducible, kept


def _shrink_service(
    service: str,
    group: ActionGroup,
    desired_patterns: list[str],
    oracle: ActionOracle,
    options: ShrinkOptions,
) -> list[str]:
    """Shrink and validate the actions of a single service."""
    reducible, kept = _split_by_level(service, group.without_service, oracle, options)

    reduced: list[str] = []
    if reducible:
        possible_actions = map_actions(
            oracle.expand(f"{service}:*", expand_service_asterisk=True),
        )
        reduced = shrink_resolved_list(reducible, possible_actions, options.iterations)

    patterns = [f"{service}:{action}" for action in chain(reduced, kept)]
    logger.debug(
        "Service %s: %d actions shrunk to %d patterns",
        service,
        len(group.with_service),
        len(patterns),
    )

    if error_match := validate_shrink_results(group.with_service, patterns, oracle):
        raise ShrinkValidationError(desired_patterns, error_match)

    return patterns


def shrink(
    desired_patterns: Iterable[str],
    oracle: ActionOracle,
    options: ShrinkOptions | None = None,
) -> list[str]:
    """Shrink patterns to the smallest list matching exactly the same actions.

    Args:
        desired_patterns: Patterns to include, e.g. ["s3:Get*", "s3:PutObject"]
        oracle: Resolves patterns into actions and classifies actions
        options: Iteration budget, access levels to reduce and worker count

    Returns:
        Patterns matching only the actions the desired patterns resolve to,
        grouped by service in ascending order

    Raises:
        ShrinkValidationError: If the shrunk patterns fail to resolve to the
            same actions, which is a defect in the reduction

    """
    desired_patterns = list(desired_patterns)
    options = options or ShrinkOptions()

    if options.all_levels and any(
        collapse_asterisks(pattern) == "*" for pattern in desired_patterns
    ):
        logger.debug("All actions wildcard found in %s", desired_patterns)
        return ["*"]

    target_actions = oracle.expand(desired_patterns, expand_service_asterisk=True)
    groups = group_actions_by_service(target_actions)
    services = sorted(groups)

    def shrink_service(service: str) -> list[str]:
        return _shrink_service(service, groups[service], desired_patterns, oracle, options)

    if options.max_workers > 1 and len(services) > 1:
        # map yields in service order and re-raises the first failure
        with ThreadPoolExecutor(max_workers=options.max_workers) as pool:
            results = list(pool.map(shrink_service, services))
    else:
        results = [shrink_service(service) for service in services]

    return list(chain.from_iterable(results))


minimize = shrink
