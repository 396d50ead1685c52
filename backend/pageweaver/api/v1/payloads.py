# pageweaver/api/v1/payloads.py
import math
from dataclasses import fields
from typing import Any, Dict

from dateutil.parser import parse

from pageweaver.engine.commands import COMMANDS
from pageweaver.engine.grid import DropEvent
from pageweaver.normalizers.element import element_from_dict
from pageweaver.normalizers.navigation import navigation_entry_from_dict
from pageweaver.normalizers.page import page_from_dict
from pageweaver.normalizers.section import section_from_dict


def _drop_from_dict(data: Dict[str, Any]) -> DropEvent:
    values = {name: float(data[name]) for name in ("width", "height", "x", "y")}

    for name, value in values.items():
        if not math.isfinite(value):
            raise ValueError(f"Drop '{name}' must be a finite number")

    return DropEvent(element_id=data.get("element_id"), **values)


def _object(key: str):
    def check(value):
        if not isinstance(value, dict):
            raise ValueError(f"'{key}' must be an object")
        return value
    return check


# Nested values inside "changes" that arrive in normalized form
_CHANGE_DECODERS = {
    "sections": lambda items: tuple(section_from_dict(s) for s in items),
    "elements": lambda items: tuple(element_from_dict(e) for e in items),
    "published_at": parse,
    "properties": _object("properties"),
    "style": _object("style"),
    "grid_position": _object("grid_position"),
}


def _changes_from_dict(data: Dict[str, Any]) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError("'changes' must be an object")

    return {
        key: _CHANGE_DECODERS[key](value) if key in _CHANGE_DECODERS and value is not None else value
        for key, value in data.items()
    }


_FIELD_DECODERS = {
    "page": page_from_dict,
    "section": section_from_dict,
    "element": element_from_dict,
    "entries": lambda items: tuple(navigation_entry_from_dict(n) for n in items),
    "drop": _drop_from_dict,
    "published_at": parse,
    "changes": _changes_from_dict,
}

_NULLABLE_FIELDS = {"published_at"}


def command_from_payload(data: Any):
    """
    Build a command from ``{"type": "<name>", ...fields}``.
    Raises ValueError for unknown types and malformed fields.
    """
    if not isinstance(data, dict):
        raise ValueError("Command payload must be a JSON object")

    name = data.get("type")
    command_cls = COMMANDS.get(name)
    if command_cls is None:
        raise ValueError(f"Unknown command type: {name!r}")

    kwargs = {}
    try:
        for f in fields(command_cls):
            if f.name not in data:
                continue
            value = data[f.name]
            decoder = _FIELD_DECODERS.get(f.name)
            if value is None and decoder and f.name not in _NULLABLE_FIELDS:
                raise ValueError(f"'{f.name}' may not be null")
            kwargs[f.name] = decoder(value) if decoder and value is not None else value

        return command_cls(**kwargs)
    except (KeyError, TypeError, AttributeError) as exc:
        raise ValueError(f"Malformed '{name}' command: {exc}") from exc
