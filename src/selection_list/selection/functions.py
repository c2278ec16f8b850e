"""Free-function form of the Selection operations.

Each function takes the selection as its last argument so that operations
read as a pipeline when partially applied:

>>> from functools import partial
>>> pick_two = partial(select, 2)
>>> pick_two(from_list([1, 2, 3]))
Selection([1, 2, 3], selected=2)
>>> map_selected({"selected": lambda x: x * 10, "rest": abs}, pick_two(from_list([-1, 2, 2])))
Selection([1, 20, 20], selected=20)

They delegate to the methods of :class:`Selection` and add no behaviour.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from selection_list.selection.selection import Selection

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from selection_list.selection.types import SelectedHandlers, Some

T = TypeVar("T")
U = TypeVar("U")


def from_list(items: Iterable[T]) -> Selection[T]:
    return Selection.from_list(items)


def to_list(selection: Selection[T]) -> list[T]:
    return selection.to_list()


def to_list_with_selected(selection: Selection[T]) -> list[tuple[T, bool]]:
    return selection.to_list_with_selected()


def select(target: T, selection: Selection[T]) -> Selection[T]:
    return selection.select(target)


def select_by(predicate: Callable[[T], bool], selection: Selection[T]) -> Selection[T]:
    return selection.select_by(predicate)


def deselect(selection: Selection[T]) -> Selection[T]:
    return selection.deselect()


def selected(selection: Selection[T]) -> Some[T] | None:
    return selection.selected()


def selected_value(selection: Selection[T], default: Any = None) -> Any:
    return selection.selected_value(default)


def is_selected(selection: Selection[T]) -> bool:
    return selection.is_selected


def map(func: Callable[[T], U], selection: Selection[T]) -> Selection[U]:  # noqa: A001
    return selection.map(func)


def map_selected(handlers: SelectedHandlers, selection: Selection[T]) -> Selection[Any]:
    """Apply ``handlers["selected"]`` to selected items and ``handlers["rest"]`` to the others."""
    return selection.map_selected(selected=handlers["selected"], rest=handlers["rest"])


def filter(predicate: Callable[[T], bool], selection: Selection[T]) -> Selection[T]:  # noqa: A001
    return selection.filter(predicate)
