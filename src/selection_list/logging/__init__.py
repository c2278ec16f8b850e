"""Transition logging subsystem for selection-list.

Provides immutable per-operation transition records and a configurable
logger that supports none/summary/full verbosity and in-memory diagnostic
mode.
"""

from selection_list.logging.logger import TransitionLogger
from selection_list.logging.types import TransitionRecord

__all__ = [
    "TransitionLogger",
    "TransitionRecord",
]
