"""Exception hierarchy for selection-list.

All exceptions derive from SelectionListError, enabling broad catch patterns
at the application boundary. Selection operations themselves never raise;
only decoding and configuration do.
"""

from __future__ import annotations


class SelectionListError(Exception):
    """Base exception for all selection-list errors."""


class DecodeError(SelectionListError):
    """External data could not be decoded into a Selection.

    Raised when the top-level document is not a sequence, is not valid JSON,
    holds more items than allowed, or when one element fails its element
    decoder.

    Attributes:
        index: Position of the offending element, or None when the failure
            concerns the document as a whole or the selected key.
    """

    def __init__(self, message: str, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index


class ConfigValidationError(SelectionListError):
    """Configuration field validation failed.

    Raised when overrides name unknown fields or carry values that fail
    type validation.
    """
