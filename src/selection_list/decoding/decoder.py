"""Decode a Selection from a sequence of encoded elements.

Decoding builds the items only; the result is always unselected. Callers
that persist a selection separately pass it back as ``selected=`` and it is
applied with :meth:`Selection.select` after the items are decoded, so a key
that no longer matches any item is silently ignored.

Element validation is delegated to pydantic. Python sequences are validated
in python mode; JSON documents are parsed by pydantic and each element is
validated in JSON mode, so strict decoding still accepts ISO dates, UUID
strings and the like. A failing element raises :class:`DecodeError`
carrying the element's index.
"""

from __future__ import annotations

import logging
import reprlib
from collections.abc import Sequence
from typing import Any, Generic, TypeVar, get_origin

from pydantic import TypeAdapter, ValidationError
from pydantic_core import from_json, to_json

from selection_list.config import SelectionListConfig
from selection_list.exceptions import DecodeError
from selection_list.selection.selection import Selection

logger = logging.getLogger("selection_list")

T = TypeVar("T")


class _Missing:
    """Sentinel type for "no selected key given"."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def _is_type_like(element: Any) -> bool:
    """Check whether pydantic should build a TypeAdapter for *element*."""
    return element is Any or isinstance(element, type) or get_origin(element) is not None


def _describe(exc: Exception) -> str:
    if isinstance(exc, ValidationError):
        return "; ".join(err["msg"] for err in exc.errors())
    return str(exc) or type(exc).__name__


def _where(index: int | None) -> str:
    return "selected value" if index is None else f"element at index {index}"


class SelectionDecoder(Generic[T]):
    """Decoder producing an unselected Selection from encoded elements.

    Args:
        element: Decoder for a single element. Either a pydantic
            ``TypeAdapter``, a type pydantic can validate (``int``,
            ``list[str]``, a ``BaseModel`` subclass, ...), or any callable
            taking one raw value. Any exception raised by a callable is
            reported as a DecodeError for that element.
        strict: Validate typed elements in pydantic strict mode.
        max_items: Reject sequences longer than this (<=0 disables).

    Raises:
        TypeError: If *element* is neither type-like nor callable.
    """

    def __init__(self, element: Any, *, strict: bool = False, max_items: int = 0) -> None:
        self._adapter: TypeAdapter[Any] | None = None
        if isinstance(element, TypeAdapter):
            self._adapter = element
        elif _is_type_like(element):
            self._adapter = TypeAdapter(element)
        elif not callable(element):
            raise TypeError(f"Cannot build an element decoder from {element!r}")
        self._element = element
        self._strict = strict
        self._max_items = max_items

    def decode(self, data: Any, selected: Any = MISSING) -> Selection[T]:
        """Decode a sequence of encoded elements.

        Args:
            data: A list or other non-string sequence of raw element values.
            selected: Optional raw value of a previously selected element.
                It is decoded like any element and then selected if present.

        Returns:
            A Selection over the decoded items, selected only when
            *selected* was given and matches an item.

        Raises:
            DecodeError: If *data* is not a sequence, is too long, or an
                element (or the selected key) fails to decode.
        """
        if isinstance(data, (str, bytes, bytearray)) or not isinstance(data, Sequence):
            raise DecodeError(f"Expected a sequence of elements, got {type(data).__name__}")
        self._check_length(data)

        items = [self._decode_python(raw, index) for index, raw in enumerate(data)]
        selection: Selection[T] = Selection.from_list(items)
        if selected is MISSING:
            return selection
        return selection.select(self._decode_python(selected, None))

    def decode_json(self, text: str | bytes, selected: Any = MISSING) -> Selection[T]:
        """Parse a JSON array and decode its elements.

        Args:
            text: JSON document whose top level is an array.
            selected: Optional selected value in its JSON-compatible form
                (e.g. ``"2024-01-02"`` for a date element).

        Returns:
            The decoded Selection.

        Raises:
            DecodeError: If *text* is not valid JSON (including invalid
                UTF-8), its top level is not an array, or decoding fails as
                described in :meth:`decode`.
        """
        try:
            data = from_json(text)
        except ValueError as exc:
            logger.debug("Rejected JSON document: %s", exc)
            raise DecodeError(f"Invalid JSON document: {exc}") from exc

        if not isinstance(data, list):
            raise DecodeError(f"Expected a JSON array, got {type(data).__name__}")
        self._check_length(data)

        items = [self._decode_json(raw, index) for index, raw in enumerate(data)]
        selection: Selection[T] = Selection.from_list(items)
        if selected is MISSING:
            return selection
        return selection.select(self._decode_json(selected, None))

    def _check_length(self, data: Sequence[Any]) -> None:
        if self._max_items > 0 and len(data) > self._max_items:
            raise DecodeError(f"Expected at most {self._max_items} elements, got {len(data)}")

    def _decode_python(self, raw: Any, index: int | None) -> Any:
        """Decode one already-parsed element."""
        if self._adapter is not None:
            try:
                return self._adapter.validate_python(raw, strict=self._strict)
            except ValidationError as exc:
                raise self._failure(raw, index, exc) from exc
        try:
            return self._element(raw)
        except Exception as exc:  # Intentional: caller code may fail any way it likes
            raise self._failure(raw, index, exc) from exc

    def _decode_json(self, raw: Any, index: int | None) -> Any:
        """Decode one element parsed from JSON, validating typed elements in JSON mode."""
        if self._adapter is None:
            return self._decode_python(raw, index)
        try:
            return self._adapter.validate_json(to_json(raw), strict=self._strict)
        except ValueError as exc:
            raise self._failure(raw, index, exc) from exc

    def _failure(self, raw: Any, index: int | None, exc: Exception) -> DecodeError:
        logger.debug("Failed to decode %s: %r", _where(index), raw)
        return DecodeError(
            f"Could not decode {_where(index)} ({reprlib.repr(raw)}): {_describe(exc)}",
            index=index,
        )


def decoder(element: Any, config: SelectionListConfig | None = None) -> SelectionDecoder[Any]:
    """Build a SelectionDecoder honouring the decoding settings of *config*.

    Args:
        element: Element decoder, as accepted by :class:`SelectionDecoder`.
        config: Settings to use; loaded from the environment when omitted.

    Returns:
        A configured SelectionDecoder.
    """
    if config is None:
        config = SelectionListConfig()
    return SelectionDecoder(
        element,
        strict=config.decode_strict,
        max_items=config.decode_max_items,
    )
