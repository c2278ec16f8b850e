"""Selection subsystem for selection-list.

An immutable sequence with at most one selected item, stored by value.
Operations are available as methods on :class:`Selection` and as free
functions in :mod:`selection_list.selection.functions`.
"""

from selection_list.selection.selection import Selection
from selection_list.selection.types import SelectedHandlers, Some

__all__ = [
    "SelectedHandlers",
    "Selection",
    "Some",
]
