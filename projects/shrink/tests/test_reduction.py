"""Tests for greedy reduction and pattern consolidation."""

import pytest

from shrink.reduction import consolidate_wildcard_patterns, reduce_action


@pytest.mark.parametrize(
    ("action", "sequence", "undesired_actions", "expected"),
    [
        # Sequence at the beginning
        ("GetObjectTagging", "Get", ["GetObjectAcl"], "Get*Tagging"),
        ("GetObjectTagging", "Get", ["PutObjectTagging"], "Get*"),
        # Sequence in the middle, beginning replaced
        (
            "GetObjectTagging",
            "Object",
            ["PutObjectVersion", "GetObjectVersion"],
            "*ObjectTagging",
        ),
        (
            "GetIntelligentTieringConfiguration",
            "Tiering",
            ["GetIntelligentTieringStructure"],
            "*TieringConfiguration",
        ),
        # Sequence in the middle, end replaced
        ("GetObjectTagging", "Object", ["PutObjectTagging"], "GetObject*"),
        ("GetObjectTaggingVersion", "Object", ["PutObjectTagging"], "GetObject*"),
        # Sequence in the middle, both sides replaced
        ("GetObjectTagging", "Object", ["ListBucketVersions"], "*Object*"),
        # Sequence at the end
        ("GetObjectTagging", "Tagging", ["PutObjectTagging"], "Get*Tagging"),
        ("GetObjectTagging", "Tagging", ["GetObjectAcl"], "*Tagging"),
        # Single part
        ("GET", "GET", ["PUT"], "GET"),
    ],
)
def test_reduce_action(
    action: str,
    sequence: str,
    undesired_actions: list[str],
    expected: str,
) -> None:
    """Test reducing an action around a sequence."""
    assert reduce_action(action, sequence, undesired_actions) == expected


def test_reduce_action_sequence_not_a_part() -> None:
    """Test that a sequence found only inside a part leaves the action alone."""
    assert reduce_action("GetObjectTagging", "Tag", []) == "GetObjectTagging"


def test_reduce_action_stops_at_first_failure() -> None:
    """Test that a walk does not try parts past a failing replacement."""
    # "GetObjectTagging*" is safe, but "GetObject*Version" fails first
    result = reduce_action("GetObjectTaggingVersion", "Object", ["GetObjectAclVersion"])
    assert result == "*ObjectTaggingVersion"


def test_reduce_action_matches_case_insensitively() -> None:
    """Test that undesired actions are matched regardless of case."""
    assert reduce_action("GetObjectTagging", "Get", ["getobjectacl"]) == "Get*Tagging"


def test_reduce_wildcard_pattern() -> None:
    """Test reducing a pattern that already holds asterisks."""
    assert reduce_action("Get*Tagging", "Tagging", ["GetObjectAcl"]) == "*Tagging"


def test_consolidate_wildcard_patterns() -> None:
    """Test that covered patterns are dropped."""
    assert consolidate_wildcard_patterns(["*Object", "Object*", "*Object*"]) == ["*Object*"]


def test_consolidate_prefers_general_pattern() -> None:
    """Test that a general pattern replaces a specific one."""
    assert consolidate_wildcard_patterns(["Get*", "*Get*"]) == ["*Get*"]


def test_consolidate_does_not_merge_middle_wildcards() -> None:
    """Test that distinct wildcards in the middle are kept apart."""
    patterns = [
        "Delete*Tagging",
        "GetJobTagging",
        "GetObjectTagging",
        "GetObject*Tagging",
        "GetStorage*Tagging",
        "Put*Tagging",
    ]

    result = consolidate_wildcard_patterns(patterns)

    assert sorted(result) == [
        "Delete*Tagging",
        "GetJobTagging",
        "GetObject*Tagging",
        "GetStorage*Tagging",
        "Put*Tagging",
    ]


def test_consolidate_is_idempotent() -> None:
    """Test that consolidating twice gives the same patterns."""
    patterns = ["Get*Tagging", "GetObjectTagging", "*Version*", "PutObjectTagging", "*Tagging"]

    once = consolidate_wildcard_patterns(patterns)

    assert set(consolidate_wildcard_patterns(once)) == set(once)


def test_consolidate_does_not_modify_input() -> None:
    """Test that the input list is left in its order."""
    patterns = ["Get*", "GetObject"]
    consolidate_wildcard_patterns(patterns)
    assert patterns == ["Get*", "GetObject"]


def test_consolidate_empty() -> None:
    """Test that nothing in gives nothing out."""
    assert consolidate_wildcard_patterns([]) == []
