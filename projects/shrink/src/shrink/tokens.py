"""Tokenizing and wildcard matching for action names."""

import re
from collections.abc import Iterable

# Reusable regex components for better readability
LOWER_TO_UPPER = r"(?<=[a-z])(?=[A-Z])"  # "GetObject" -> "Get" | "Object"
ACRONYM_TO_WORD = r"(?<=[A-Z])(?=[A-Z][a-z])"  # "ACLPolicy" -> "ACL" | "Policy"
BEFORE_ASTERISK = r"(?=[*])"
AFTER_ASTERISK = r"(?<=[*])"

PART_BOUNDARY = re.compile(
    "|".join((LOWER_TO_UPPER, ACRONYM_TO_WORD, BEFORE_ASTERISK, AFTER_ASTERISK)),
)
ASTERISKS = re.compile(r"\*+")


def split_action_into_parts(value: str) -> list[str]:
    """Split an action or wildcard pattern into parts.

    A new part starts on a lowercase to uppercase transition, where a run of
    capitals gives way to a capitalized word, and around every asterisk:

    - "CreateAccessPointForObjectLambda" -> Create, Access, Point, For, Object, Lambda
    - "*ObjectTagging*" -> *, Object, Tagging, *
    - "GET" -> GET
    """
    # Zero-width splits at the edges yield empty strings, drop them
    return [part for part in PART_BOUNDARY.split(value) if part]


def collapse_asterisks(pattern: str) -> str:
    """Collapse consecutive asterisks into a single asterisk."""
    return ASTERISKS.sub("*", pattern)


def regex_for_wildcard_action(pattern: str) -> re.Pattern[str]:
    """Compile a case-insensitive, anchored regex for a wildcard action."""
    literals = collapse_asterisks(pattern).split("*")
    return re.compile(
        "^" + ".*?".join(re.escape(literal) for literal in literals) + "$",
        re.IGNORECASE,
    )


def wildcard_action_matches_any_string(pattern: str, strings: Iterable[str]) -> bool:
    """Check whether a wildcard action matches any of the given strings."""
    regex = regex_for_wildcard_action(pattern)
    return any(regex.match(string) for string in strings)


def matches_pattern(general: str, specific: str) -> bool:
    """Check the literal text of a specific pattern against a general one.

    Asterisks in ``specific`` are plain characters here, so ``Get*`` covers
    ``Get*Tagging`` while ``GetObject*Tagging`` does not cover ``Get*Tagging``.
    Matching is case-sensitive.
    """
    literals = general.split("*")
    regex = ".*".join(re.escape(literal) for literal in literals)
    return re.fullmatch(regex, specific) is not None
