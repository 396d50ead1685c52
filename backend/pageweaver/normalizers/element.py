from typing import Any, Dict

from pageweaver.domain.document import Element, ElementStyle, ElementType, GridPosition
from pageweaver.domain.styles import FONT_FLAGS, STYLE_ATTRIBUTES, coerce_style_value


def normalize_style(style: ElementStyle) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        name: getattr(style, name).value if getattr(style, name) is not None else None
        for name in STYLE_ATTRIBUTES
    }
    for flag in FONT_FLAGS:
        data[flag] = getattr(style, flag)
    data["custom_class"] = style.custom_class
    return data


def normalize_element(element: Element) -> Dict[str, Any]:
    position = element.grid_position

    return {
        "id": element.id,
        "type": element.type.value,
        "content": element.content,
        "style": normalize_style(element.style),
        "grid_position": {
            "column": position.column,
            "row": position.row,
            "column_span": position.column_span,
            "row_span": position.row_span,
        } if position else None,
    }


def style_from_dict(data: Dict[str, Any] | None) -> ElementStyle:
    data = data or {}
    values: Dict[str, Any] = {
        name: coerce_style_value(name, data.get(name))
        for name in STYLE_ATTRIBUTES
    }
    for flag in FONT_FLAGS:
        values[flag] = bool(data.get(flag, False))
    values["custom_class"] = data.get("custom_class", "")
    return ElementStyle(**values)


def element_from_dict(data: Dict[str, Any]) -> Element:
    """
    Rebuild an Element from its normalized form.
    Raises KeyError/ValueError on malformed input.
    """
    position = data.get("grid_position")

    return Element(
        id=data["id"],
        type=ElementType(data["type"]),
        content=data.get("content", ""),
        style=style_from_dict(data.get("style")),
        grid_position=GridPosition(
            column=int(position.get("column", 1)),
            row=int(position.get("row", 1)),
            column_span=int(position.get("column_span", 1)),
            row_span=int(position.get("row_span", 1)),
        ) if position else None,
    )
