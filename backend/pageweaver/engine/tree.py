"""
Structural helpers shared by the page, section and element operations.

Each helper rebuilds only the path to the edited node. When nothing
changes the original tuple/record is returned as-is, so callers detect a
no-op with ``new is old``.
"""
from dataclasses import replace
from typing import Any, Callable, Iterable, Mapping, Tuple, TypeVar

T = TypeVar("T")


def map_by_id(items: Tuple[T, ...], item_id: str, fn: Callable[[T], T]) -> Tuple[T, ...]:
    changed = False
    result = []

    for item in items:
        if item.id == item_id:
            updated = fn(item)
            changed = changed or updated is not item
            result.append(updated)
        else:
            result.append(item)

    return tuple(result) if changed else items


def remove_by_id(items: Tuple[T, ...], item_id: str) -> Tuple[T, ...]:
    kept = tuple(item for item in items if item.id != item_id)
    return kept if len(kept) != len(items) else items


def index_of(items: Tuple[Any, ...], item_id: str) -> int:
    return next((i for i, item in enumerate(items) if item.id == item_id), -1)


def merge_fields(
    record: T,
    changes: Mapping[str, Any],
    allowed: Iterable[str],
    coerce: Mapping[str, Callable[[Any], Any]] = None,
) -> T:
    """
    Shallow-merge whitelisted ``changes`` into a frozen record.
    Unknown keys are ignored; an update that changes nothing is a no-op.
    """
    coerce = coerce or {}
    allowed = set(allowed)
    updates = {}

    for key, value in changes.items():
        if key not in allowed:
            continue
        if key in coerce and value is not None:
            value = coerce[key](value)
        if getattr(record, key) != value:
            updates[key] = value

    if not updates:
        return record

    return replace(record, **updates)
