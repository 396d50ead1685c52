from dataclasses import replace
from typing import Sequence, Tuple, TypeVar

T = TypeVar("T")


def sort_by_order(items: Sequence[T], order_field: str = "order") -> Tuple[T, ...]:
    """Stable ascending sort on the explicit order field."""
    return tuple(sorted(items, key=lambda item: getattr(item, order_field)))


def compact_order(items: Sequence[T], order_field: str = "order") -> Tuple[T, ...]:
    """
    Re-assigns sequential order values (0..N-1) following the current
    sequence position.
    """
    return tuple(
        item if getattr(item, order_field) == index else replace(item, **{order_field: index})
        for index, item in enumerate(items)
    )
