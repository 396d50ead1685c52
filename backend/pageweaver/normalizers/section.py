from typing import Any, Dict

from pageweaver.domain.document import Section, SectionProperties, SectionType
from pageweaver.domain.layout import GridGap, GridType
from .element import element_from_dict, normalize_element


def normalize_section(section: Section, include_elements: bool = True) -> Dict[str, Any]:
    props = section.properties
    data = {
        "id": section.id,
        "type": section.section_type.value,
        "properties": {
            "background_color": props.background_color,
            "padding_x": props.padding_x,
            "padding_y": props.padding_y,
            "height": props.height,
            "is_grid_layout": props.is_grid_layout,
            "grid_columns": props.grid_columns,
            "grid_rows": props.grid_rows,
            "grid_gap": props.grid_gap.value,
            "grid_type": props.grid_type.value,
            "is_draggable_grid": props.is_draggable_grid,
        },
    }

    if include_elements:
        data["elements"] = [normalize_element(e) for e in section.elements]

    return data


def properties_from_dict(data: Dict[str, Any] | None) -> SectionProperties:
    data = data or {}
    defaults = SectionProperties()

    return SectionProperties(
        background_color=data.get("background_color", defaults.background_color),
        padding_x=data.get("padding_x", defaults.padding_x),
        padding_y=data.get("padding_y", defaults.padding_y),
        height=data.get("height"),
        is_grid_layout=bool(data.get("is_grid_layout", False)),
        grid_columns=data.get("grid_columns", defaults.grid_columns),
        grid_rows=data.get("grid_rows", defaults.grid_rows),
        grid_gap=GridGap(data.get("grid_gap", defaults.grid_gap.value)),
        grid_type=GridType(data.get("grid_type", defaults.grid_type.value)),
        is_draggable_grid=bool(data.get("is_draggable_grid", False)),
    )


def section_from_dict(data: Dict[str, Any]) -> Section:
    return Section(
        id=data["id"],
        type=SectionType(data.get("type") or SectionType.CONTENT.value),
        properties=properties_from_dict(data.get("properties")),
        elements=tuple(element_from_dict(e) for e in data.get("elements", [])),
    )
