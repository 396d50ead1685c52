from dataclasses import fields, replace
from typing import Any, Callable, Mapping

from pageweaver.domain.document import Element, ElementStyle, ElementType, GridPosition, Page, Section
from pageweaver.domain.styles import FONT_FLAGS, STYLE_ATTRIBUTES, coerce_style_value
from .pages import Pages
from .tree import map_by_id, merge_fields, remove_by_id

ELEMENT_UPDATE_FIELDS = {"type", "content", "style", "grid_position"}
GRID_POSITION_FIELDS = {f.name for f in fields(GridPosition)}


def add_element(pages: Pages, page_id: str, section_id: str, element: Element) -> Pages:
    return _map_section(
        pages,
        page_id,
        section_id,
        lambda section: replace(section, elements=section.elements + (element,)),
    )


def update_element(
    pages: Pages,
    page_id: str,
    section_id: str,
    element_id: str,
    changes: Mapping[str, Any],
) -> Pages:
    """
    Shallow-merge ``changes`` into an element. ``style`` and
    ``grid_position`` accept either a full record or a mapping of fields
    merged into the current one.
    """
    def _update(element: Element) -> Element:
        updates = dict(changes)

        style = updates.get("style")
        if isinstance(style, Mapping):
            updates["style"] = _merge_style(element.style, style)

        position = updates.get("grid_position")
        if isinstance(position, Mapping):
            updates["grid_position"] = merge_fields(
                element.grid_position or GridPosition(),
                position,
                GRID_POSITION_FIELDS,
                coerce={name: int for name in GRID_POSITION_FIELDS},
            )

        return merge_fields(element, updates, ELEMENT_UPDATE_FIELDS, coerce={"type": ElementType})

    return _map_element(pages, page_id, section_id, element_id, _update)


def remove_element(pages: Pages, page_id: str, section_id: str, element_id: str) -> Pages:
    def _remove(section: Section) -> Section:
        remaining = remove_by_id(section.elements, element_id)
        return section if remaining is section.elements else replace(section, elements=remaining)

    return _map_section(pages, page_id, section_id, _remove)


def set_element_style(
    pages: Pages,
    page_id: str,
    section_id: str,
    element_id: str,
    attribute: str,
    value,
) -> Pages:
    """
    Assign one style attribute (font family, size, alignment, colour, ...).
    Replaces any previous value of that attribute only.
    """
    value = coerce_style_value(attribute, value)
    return update_element(pages, page_id, section_id, element_id, {"style": {attribute: value}})


def toggle_element_style(pages: Pages, page_id: str, section_id: str, element_id: str, flag: str) -> Pages:
    if flag not in FONT_FLAGS:
        raise ValueError(f"Unknown font style flag: {flag}")

    def _toggle(element: Element) -> Element:
        style = replace(element.style, **{flag: not getattr(element.style, flag)})
        return replace(element, style=style)

    return _map_element(pages, page_id, section_id, element_id, _toggle)


def _merge_style(style: ElementStyle, changes: Mapping[str, Any]) -> ElementStyle:
    coerce = {
        name: (lambda value, name=name: coerce_style_value(name, value))
        for name in STYLE_ATTRIBUTES
    }
    coerce.update({flag: bool for flag in FONT_FLAGS})
    return merge_fields(style, changes, {f.name for f in fields(ElementStyle)}, coerce=coerce)


def _map_section(pages: Pages, page_id: str, section_id: str, fn: Callable[[Section], Section]) -> Pages:
    def _in_page(page: Page) -> Page:
        sections = map_by_id(page.sections, section_id, fn)
        return page if sections is page.sections else replace(page, sections=sections)

    return map_by_id(pages, page_id, _in_page)


def _map_element(
    pages: Pages,
    page_id: str,
    section_id: str,
    element_id: str,
    fn: Callable[[Element], Element],
) -> Pages:
    def _in_section(section: Section) -> Section:
        elements = map_by_id(section.elements, element_id, fn)
        return section if elements is section.elements else replace(section, elements=elements)

    return _map_section(pages, page_id, section_id, _in_section)
