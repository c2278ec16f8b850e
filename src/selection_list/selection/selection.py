"""Immutable list with at most one selected item.

The selection is stored by value, not by position: it survives edits of the
surrounding items, but it cannot tell equal items apart. Selecting stores the
first matching item, while ``to_list_with_selected()`` and ``map_selected()``
treat every item equal to it as selected.

Every operation returns a new Selection; nothing mutates in place:

>>> fruits = Selection.from_list(["apple", "banana", "cherry"]).select("banana")
>>> fruits.selected()
Some(value='banana')
>>> fruits.select("kiwi").selected_value()
'banana'
>>> fruits.filter(lambda fruit: fruit != "banana")
Selection(['apple', 'cherry'])
>>> fruits.map_selected(selected=str.upper, rest=len)
Selection([5, 'BANANA', 6], selected='BANANA')
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from selection_list.selection.types import Some

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True, repr=False)
class Selection(Generic[T]):
    """A sequence of items in which at most one item may be selected.

    Build instances with :meth:`from_list`. Direct construction converts the
    items to a tuple and rejects a selected value that is not among them.

    Attributes:
        _items: Items in insertion order.
        _selected: The selected value, or None when nothing is selected.
            Always equal to some member of ``_items``.
    """

    _items: tuple[T, ...]
    _selected: Some[T] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "_items", tuple(self._items))
        if self._selected is not None and self._selected.value not in self._items:
            raise ValueError(f"Selected value {self._selected.value!r} is not one of the items")

    @classmethod
    def _create(cls, items: tuple[Any, ...], selected: Some[Any] | None = None) -> Selection[Any]:
        """Assemble a Selection from parts already known to be consistent.

        Skips ``__post_init__`` so that mapping with functions whose results
        only compare by identity still yields a value.
        """
        instance = object.__new__(cls)
        object.__setattr__(instance, "_items", items)
        object.__setattr__(instance, "_selected", selected)
        return instance

    @classmethod
    def from_list(cls, items: Iterable[T]) -> Selection[T]:
        """Wrap *items* verbatim with nothing selected.

        No validation and no deduplication is performed.

        Args:
            items: Any finite iterable; it is materialised once.

        Returns:
            An unselected Selection over the items.
        """
        return cls._create(tuple(items))

    def to_list(self) -> list[T]:
        """Return the items as a new list, dropping the selection."""
        return list(self._items)

    def to_list_with_selected(self) -> list[tuple[T, bool]]:
        """Pair each item with whether it equals the selected value.

        Every item equal to the selected value is flagged, not only the first.

        Returns:
            List of ``(item, is_selected)`` tuples in item order.
        """
        if self._selected is None:
            return [(item, False) for item in self._items]
        target = self._selected.value
        return [(item, bool(item == target)) for item in self._items]

    def select(self, target: T) -> Selection[T]:
        """Select the first item equal to *target*.

        A target that is not among the items leaves the current selection
        in place.
        """
        return self.select_by(lambda item: item == target)

    def select_by(self, predicate: Callable[[T], bool]) -> Selection[T]:
        """Select the first item for which *predicate* holds.

        Args:
            predicate: Called on items in order until it returns true.

        Returns:
            A Selection with the matching item selected, or this Selection
            unchanged when nothing matches.
        """
        for item in self._items:
            if predicate(item):
                return Selection._create(self._items, Some(item))
        return self

    def deselect(self) -> Selection[T]:
        """Clear the selection, keeping the items."""
        if self._selected is None:
            return self
        return Selection._create(self._items)

    def selected(self) -> Some[T] | None:
        """Return the selected value wrapped in :class:`Some`, or None."""
        return self._selected

    def selected_value(self, default: Any = None) -> Any:
        """Return the bare selected value, or *default* when unselected."""
        if self._selected is None:
            return default
        return self._selected.value

    @property
    def is_selected(self) -> bool:
        """True when some item is selected."""
        return self._selected is not None

    def map(self, func: Callable[[T], U]) -> Selection[U]:
        """Apply *func* to every item and, separately, to the selected value.

        ``func`` should be deterministic so that the mapped selected value
        stays equal to the mapped item it came from.
        """
        items = tuple(func(item) for item in self._items)
        if self._selected is None:
            return Selection._create(items)
        return Selection._create(items, Some(func(self._selected.value)))

    def map_selected(
        self,
        *,
        selected: Callable[[T], U],
        rest: Callable[[T], U],
    ) -> Selection[U]:
        """Transform selected and unselected items with different functions.

        Every item equal to the selected value, and the selected value
        itself, goes through *selected*; all other items go through *rest*.
        When nothing is selected, *rest* is applied to every item.

        Args:
            selected: Transform for items equal to the selected value.
            rest: Transform for all other items.

        Returns:
            The transformed Selection. Passing the same function for both
            handlers gives the same result as :meth:`map`.
        """
        if self._selected is None:
            return Selection._create(tuple(rest(item) for item in self._items))

        target = self._selected.value
        items = tuple(selected(item) if item == target else rest(item) for item in self._items)
        return Selection._create(items, Some(selected(target)))

    def filter(self, predicate: Callable[[T], bool]) -> Selection[T]:
        """Keep only the items satisfying *predicate*, order preserved.

        The selection survives when the selected value satisfies *predicate*
        and is cleared otherwise.
        """
        kept: Selection[T] = Selection._create(
            tuple(item for item in self._items if predicate(item))
        )
        if self._selected is None or not predicate(self._selected.value):
            return kept
        return kept.select(self._selected.value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __repr__(self) -> str:
        if self._selected is None:
            return f"Selection({list(self._items)!r})"
        return f"Selection({list(self._items)!r}, selected={self._selected.value!r})"
