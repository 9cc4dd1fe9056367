"""Greedy wildcard reduction and consolidation of action patterns."""

from collections.abc import Iterable, Sequence

from shrink.tokens import (
    collapse_asterisks,
    matches_pattern,
    split_action_into_parts,
    wildcard_action_matches_any_string,
)


def _replace_until_match(
    parts: list[str],
    indices: Iterable[int],
    undesired_actions: Sequence[str],
) -> str | None:
    """Replace parts with asterisks, in order, until an undesired action matches.

    ``parts`` is updated in place. The replacement that caused the match is
    reverted and the walk stops there.

    Returns:
        The last collapsed pattern that matched no undesired action, or None

    """
    accepted = None
    for index in indices:
        original = parts[index]
        parts[index] = "*"
        candidate = collapse_asterisks("".join(parts))
        if wildcard_action_matches_any_string(candidate, undesired_actions):
            parts[index] = original
            break
        accepted = candidate
    return accepted


def reduce_action(
    desired_action: str,
    sequence: str,
    undesired_actions: Sequence[str],
) -> str:
    """Reduce an action by widening wildcards outward from a sequence.

    Parts after a leading sequence, before a trailing sequence, or on both
    sides of a sequence in the middle are replaced with asterisks one at a
    time. Each direction stops at the first replacement that would match an
    undesired action. The forward walk runs first and the backward walk
    continues from its result.

    Args:
        desired_action: Action or pattern to reduce, e.g. "GetObjectTagging"
        sequence: Part of the action to keep literally, e.g. "Get"
        undesired_actions: Actions the reduced pattern must not match

    Returns:
        The most wildcarded form found, or the action unchanged when the
        sequence is not one of its parts or it has a single part

    """
    parts = split_action_into_parts(desired_action)
    if len(parts) == 1 or sequence not in parts:
        return desired_action

    position = parts.index(sequence)
    forward = range(position + 1, len(parts))
    backward = range(position - 1, -1, -1)

    if position == 0:
        walks = (forward,)
    elif position == len(parts) - 1:
        walks = (backward,)
    else:
        walks = (forward, backward)

    shorter = desired_action
    for indices in walks:
        accepted = _replace_until_match(parts, indices, undesired_actions)
        if accepted is not None:
            shorter = accepted
    return shorter


def consolidate_wildcard_patterns(patterns: Iterable[str]) -> list[str]:
    """Drop patterns already covered by a more general pattern.

    For example:
        ["*Object", "Object*", "*Object*"] -> ["*Object*"]
        ["Get*", "*Get*"] -> ["*Get*"]
    """
    # Longest first, so general patterns arrive after the ones they cover
    ordered = sorted(patterns, key=len, reverse=True)

    consolidated: list[str] = []
    for pattern in ordered:
        if any(matches_pattern(kept, pattern) for kept in consolidated):
            continue
        consolidated = [kept for kept in consolidated if not matches_pattern(pattern, kept)]
        consolidated.append(pattern)
    return consolidated
