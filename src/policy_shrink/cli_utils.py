"""Input handling helpers for the command line interface."""

from __future__ import annotations

import json
import re
from typing import TYPE_CHECKING, Any, NamedTuple

from shrink import shrink_json_document

if TYPE_CHECKING:
    from shrink import ActionOracle, ShrinkOptions

# Optional leading colon so "arn:aws:s3:::bucket" style matches can be dropped
ACTION_PATTERN = re.compile(r":?([a-zA-Z0-9-]+:[a-zA-Z0-9*]+)")


class StdinResult(NamedTuple):
    """What was read from stdin, either loose actions or a shrunk document."""

    strings: list[str] | None = None
    document: Any = None


def convert_iterations(iterations: int) -> int:
    """Map any non-positive iteration count to zero, meaning no limit."""
    return max(iterations, 0)


def extract_actions_from_line(line: str) -> list[str]:
    """Find service:action strings in a line of free-form text."""
    return [
        match[1]
        for match in ACTION_PATTERN.finditer(line)
        if not match[0].startswith(("arn:", ":"))
    ]


def parse_stdin(
    data: str,
    oracle: ActionOracle,
    options: ShrinkOptions,
    *,
    remove_sids: bool = False,
) -> StdinResult:
    """Interpret stdin as a JSON document or as lines containing actions.

    A JSON object or array has its action lists shrunk in place. Anything else
    is scanned line by line for actions.
    """
    if not data.strip():
        return StdinResult()

    try:
        document = json.loads(data)
    except json.JSONDecodeError:
        document = None

    if isinstance(document, dict | list):
        return StdinResult(
            document=shrink_json_document(
                document,
                oracle,
                options,
                remove_sids=remove_sids,
            ),
        )

    actions = [
        action for line in data.splitlines() for action in extract_actions_from_line(line)
    ]
    return StdinResult(strings=actions)
