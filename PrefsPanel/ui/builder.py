"""Sequence builder for declarative view lists.

A block is written as an ordinary generator function: ``if`` branches that are
not taken, loops over empty iterables, and unwrapped optionals that are absent
simply yield nothing. :func:`build_array` evaluates the block into a flat list
in evaluation order.

Example:

    .. code-block:: python

        @array_builder
        def views():
            yield header
            if show_details:
                yield details
            for key in keys:
                yield key.render()

This module provides:
    - build_array: evaluate a block into a list
    - array_builder: decorator form of build_array
    - ArrayBuilder: an explicit accumulator for callers that prefer method calls
    - deduplicated, class_deduplicated: opt-in, order-preserving de-duplication
"""
import functools
from typing import Any, Callable, Iterable, List, Optional, TypeVar, Union

T = TypeVar('T')

Block = Union[Iterable[T], Callable[[], Optional[Iterable[T]]]]


def _is_void(item: Any) -> bool:
    # A bare ``()`` is the no-op statement of a block
    return isinstance(item, tuple) and not item


def build_array(block: Block) -> List[T]:
    """Evaluate a declarative block into an ordered list.

    Args:
        block: An iterable, or a callable returning one (typically a generator function).

    Returns:
        list: The yielded elements in evaluation order. ``()`` entries are dropped,
        ``None`` entries are kept. A yielded list is kept as a single element; use
        ``yield from`` or :meth:`ArrayBuilder.append_all` to flatten it one level.
    """
    if block is None:
        return []
    if callable(block):
        block = block()
    if block is None:
        return []
    return [item for item in block if not _is_void(item)]


def array_builder(func: Callable[..., Iterable[T]]) -> Callable[..., List[T]]:
    """Decorator that evaluates the wrapped generator function with :func:`build_array`."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> List[T]:
        return build_array(func(*args, **kwargs))

    return wrapper


class ArrayBuilder:
    """Explicit accumulator equivalent of :func:`build_array`.

    Each method returns the builder so calls can be chained.
    """

    def __init__(self) -> None:
        self._items: List[Any] = []

    def append(self, item: Any) -> 'ArrayBuilder':
        if not _is_void(item):
            self._items.append(item)
        return self

    def append_all(self, items: Optional[Iterable[Any]]) -> 'ArrayBuilder':
        """Append the elements of ``items``, flattening it one level."""
        for item in build_array(items):
            self._items.append(item)
        return self

    def if_present(self, optional: Any, func: Callable[[Any], Any]) -> 'ArrayBuilder':
        """Append ``func(optional)`` unless ``optional`` is None."""
        if optional is None:
            return self
        return self.append(func(optional))

    def build(self) -> List[Any]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)


def deduplicated(items: Iterable[T]) -> List[T]:
    """Remove duplicates by value equality, keeping the first occurrence.

    Unhashable items are compared with ``==`` against the items kept so far.
    """
    seen = set()
    seen_unhashable = []
    result = []
    for item in items:
        try:
            if item in seen:
                continue
            seen.add(item)
        except TypeError:
            if item in seen_unhashable:
                continue
            seen_unhashable.append(item)
        result.append(item)
    return result


def class_deduplicated(items: Iterable[T]) -> List[T]:
    """Remove duplicates by identity, keeping the first occurrence.

    Use this for objects that do not implement a meaningful equality, such as widgets.
    """
    seen = set()
    result = []
    for item in items:
        if id(item) in seen:
            continue
        seen.add(id(item))
        result.append(item)
    return result
