"""Shrinking the action lists found inside policy documents."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from shrink.main import shrink

if TYPE_CHECKING:
    from shrink.types import ActionOracle, ShrinkOptions

ACTION_KEYS = {"Action", "NotAction"}


def shrink_json_document(
    document: Any,  # noqa: ANN401
    oracle: ActionOracle,
    options: ShrinkOptions | None = None,
    *,
    remove_sids: bool = False,
    key: str | None = None,
) -> Any:  # noqa: ANN401
    """Shrink every Action and NotAction list of strings in a JSON document.

    The document is modified in place. A single string under an action key is
    left as it is.

    Args:
        document: Parsed JSON value to walk
        oracle: Resolves patterns into actions
        options: Options passed through to each shrink
        remove_sids: Delete string "Sid" fields along the way
        key: Key the current value was found under, if any

    Returns:
        The document with its action lists shrunk

    """
    if (
        key in ACTION_KEYS
        and isinstance(document, list)
        and document
        and isinstance(document[0], str)
    ):
        return shrink(document, oracle, options)

    if isinstance(document, list):
        return [
            shrink_json_document(item, oracle, options, remove_sids=remove_sids)
            for item in document
        ]

    if isinstance(document, dict):
        for child_key in list(document):
            if child_key == "Sid" and isinstance(document[child_key], str) and remove_sids:
                del document[child_key]
            else:
                document[child_key] = shrink_json_document(
                    document[child_key],
                    oracle,
                    options,
                    remove_sids=remove_sids,
                    key=child_key,
                )
        return document

    return document
