"""Shrink lists of actions into the smallest equivalent wildcard patterns."""

from shrink.document import shrink_json_document
from shrink.errors import ShrinkValidationError
from shrink.main import (
    group_actions_by_service,
    map_actions,
    minimize,
    shrink,
    shrink_iteration,
    shrink_resolved_list,
)
from shrink.reduction import consolidate_wildcard_patterns, reduce_action
from shrink.sequences import count_substrings, find_common_sequences
from shrink.tokens import (
    collapse_asterisks,
    regex_for_wildcard_action,
    split_action_into_parts,
    wildcard_action_matches_any_string,
)
from shrink.types import (
    ALL_ACCESS_LEVELS,
    AccessLevel,
    ActionGroup,
    ActionOracle,
    SequenceFrequency,
    ShrinkOptions,
)
from shrink.validation import validate_shrink_results

__all__ = [
    "ALL_ACCESS_LEVELS",
    "AccessLevel",
    "ActionGroup",
    "ActionOracle",
    "SequenceFrequency",
    "ShrinkOptions",
    "ShrinkValidationError",
    "collapse_asterisks",
    "consolidate_wildcard_patterns",
    "count_substrings",
    "find_common_sequences",
    "group_actions_by_service",
    "map_actions",
    "minimize",
    "reduce_action",
    "regex_for_wildcard_action",
    "shrink",
    "shrink_iteration",
    "shrink_json_document",
    "shrink_resolved_list",
    "split_action_into_parts",
    "validate_shrink_results",
    "wildcard_action_matches_any_string",
]
