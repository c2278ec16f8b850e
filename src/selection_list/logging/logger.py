"""Transition logger for Selection operations.

Uses the standard ``logging`` module with the ``"selection_list"`` logger.
Selection values stay pure; an application that wants an audit trail hands
each before/after pair to :class:`TransitionLogger` itself.
"""

from __future__ import annotations

import json
import logging
import time
from collections import Counter
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

from selection_list.logging.types import TransitionRecord

if TYPE_CHECKING:
    from selection_list.config import SelectionListConfig
    from selection_list.selection.selection import Selection

logger = logging.getLogger("selection_list")

_SELECT_OPERATIONS = frozenset({"select", "select_by"})


def _describe_selected(selection: Selection[Any]) -> str | None:
    current = selection.selected()
    if current is None:
        return None
    return repr(current.value)


class TransitionLogger:
    """Records and logs transitions between Selection values.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per transition (operation, item counts,
        selected value before and after).

        ``"full"``: Full JSON dump of all record fields.

    Diagnostic mode stores all records in memory for inspection via
    ``get_diagnostic_data()`` and ``get_summary_stats()``.
    """

    def __init__(self, config: SelectionListConfig) -> None:
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[TransitionRecord] = []

    def log_transition(
        self,
        operation: str,
        before: Selection[Any],
        after: Selection[Any],
    ) -> TransitionRecord:
        """Record that *operation* turned *before* into *after*.

        Args:
            operation: Name of the operation that was applied.
            before: Selection the operation was applied to.
            after: Selection the operation returned.

        Returns:
            The TransitionRecord that was logged.
        """
        record = TransitionRecord(
            timestamp_ns=time.time_ns(),
            operation=operation,
            items_before=len(before),
            items_after=len(after),
            selected_before=_describe_selected(before),
            selected_after=_describe_selected(after),
            selection_changed=before.selected() != after.selected(),
        )

        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "summary":
            logger.info(
                "op=%s items=%d->%d selected=%s->%s%s",
                record.operation,
                record.items_before,
                record.items_after,
                record.selected_before,
                record.selected_after,
                "" if record.selection_changed else " [UNCHANGED]",
            )
        elif self._log_level == "full":
            logger.info("transition_record: %s", json.dumps(asdict(record), default=str))

        return record

    def get_diagnostic_data(self) -> list[TransitionRecord]:
        """Return all stored records (empty unless ``diagnostic_mode=True``)."""
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        n = len(self._records)
        changed = sum(1 for r in self._records if r.selection_changed)
        cleared = sum(
            1 for r in self._records if r.selected_before is not None and r.selected_after is None
        )
        noop_selects = sum(
            1
            for r in self._records
            if r.operation in _SELECT_OPERATIONS and not r.selection_changed
        )
        return {
            "total_transitions": n,
            "operations": dict(Counter(r.operation for r in self._records)),
            "changed_count": changed,
            "change_rate": changed / n,
            "cleared_count": cleared,
            "noop_select_count": noop_selects,
        }
