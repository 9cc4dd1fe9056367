"""Frequency analysis of the parts shared between actions."""

from collections.abc import Iterable

from shrink.tokens import split_action_into_parts
from shrink.types import SequenceFrequency


def count_substrings(substrings: Iterable[str], actions: list[str]) -> dict[str, int]:
    """Count how many actions contain each substring.

    Substrings that appear in no action are left out of the result.
    """
    counts = {
        substring: sum(1 for action in actions if substring in action)
        for substring in substrings
    }
    return {substring: count for substring, count in counts.items() if count > 0}


def find_common_sequences(actions: list[str]) -> list[SequenceFrequency]:
    """Find every part of the actions along with its frequency and length."""
    # dict keeps the parts in the order they are first seen
    all_parts = dict.fromkeys(
        part for action in actions for part in split_action_into_parts(action)
    )
    return [
        SequenceFrequency(sequence=sequence, frequency=frequency, length=len(sequence))
        for sequence, frequency in count_substrings(all_parts, actions).items()
    ]
