"""Errors raised while shrinking actions."""

from json import dumps


class ShrinkValidationError(Exception):
    """Shrunk patterns did not resolve to exactly the desired actions.

    This always points at a defect in the reduction logic rather than at the
    input, so the whole shrink is abandoned.
    """

    def __init__(self, desired_patterns: list[str], error_match: str) -> None:
        """Capture the input patterns and the mismatch that was detected."""
        self.desired_patterns = list(desired_patterns)
        self.error_match = error_match
        super().__init__(
            "Shrink failed validation and this is a bug. "
            f"{error_match} while shrinking patterns {dumps(self.desired_patterns)}",
        )
