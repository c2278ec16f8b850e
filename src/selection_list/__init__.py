"""selection-list: an immutable list with at most one selected item.

The selected item is stored by value and is always a member of the list.
Every operation returns a new value; a failed select keeps the previous
selection, and filtering out the selected item clears it.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("selection-list")
except PackageNotFoundError:
    __version__ = "0.0.0"

from selection_list.config import SelectionListConfig, resolve_config
from selection_list.decoding import SelectionDecoder, decoder
from selection_list.exceptions import ConfigValidationError, DecodeError, SelectionListError
from selection_list.logging import TransitionLogger
from selection_list.selection import Selection, Some

__all__ = [
    "ConfigValidationError",
    "DecodeError",
    "Selection",
    "SelectionDecoder",
    "SelectionListConfig",
    "SelectionListError",
    "Some",
    "TransitionLogger",
    "__version__",
    "decoder",
    "resolve_config",
]
