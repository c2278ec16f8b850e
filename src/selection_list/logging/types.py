"""Data types for the transition logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TransitionRecord:
    """Immutable record of one operation applied to a Selection.

    Attributes:
        timestamp_ns: Wall-clock time of the transition (nanoseconds since epoch).
        operation: Name of the operation, e.g. ``"select"`` or ``"filter"``.
        items_before: Number of items before the operation.
        items_after: Number of items after the operation.
        selected_before: ``repr`` of the selected value before, or None.
        selected_after: ``repr`` of the selected value after, or None.
        selection_changed: True if the selected value differs before/after.
    """

    timestamp_ns: int
    operation: str

    items_before: int
    items_after: int

    selected_before: str | None
    selected_after: str | None
    selection_changed: bool
