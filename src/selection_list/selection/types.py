"""Data types for the selection subsystem."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypedDict, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Some(Generic[T]):
    """Present half of an optional value.

    ``None`` stands for "nothing selected", so a selected item that is itself
    ``None`` is still representable as ``Some(None)``.

    Attributes:
        value: The wrapped value.
    """

    value: T


class SelectedHandlers(TypedDict):
    """Handler pair accepted by the free ``map_selected`` function.

    Attributes:
        selected: Transform for items equal to the selected value.
        rest: Transform for every other item.
    """

    selected: Callable[[Any], Any]
    rest: Callable[[Any], Any]
