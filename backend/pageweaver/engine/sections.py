from dataclasses import fields, replace
from typing import Any, Mapping

from pageweaver.domain.document import Page, Section, SectionProperties, SectionType, find_section
from pageweaver.domain.layout import GridGap, GridType, grid_preset
from pageweaver.utils.ids import new_id
from .pages import Pages
from .tree import map_by_id, merge_fields, remove_by_id

SECTION_UPDATE_FIELDS = {"type", "elements", "properties"}
SECTION_PROPERTY_FIELDS = {f.name for f in fields(SectionProperties)}


def add_section(pages: Pages, page_id: str, section: Section) -> Pages:
    return map_by_id(
        pages,
        page_id,
        lambda page: replace(page, sections=page.sections + (section,)),
    )


def update_section(pages: Pages, page_id: str, section_id: str, changes: Mapping[str, Any]) -> Pages:
    """
    Shallow-merge ``changes`` into a section.

    ``properties`` may be a full SectionProperties (replaces the record) or
    a mapping of property fields, merged field by field into the current
    properties. A ``grid_preset`` such as "3x2" in that mapping expands to
    the matching column and row descriptors.
    """
    def _update(section: Section) -> Section:
        updates = dict(changes)
        properties = updates.get("properties")

        if isinstance(properties, Mapping):
            properties = dict(properties)
            preset = properties.pop("grid_preset", None)
            if preset is not None:
                properties["grid_columns"], properties["grid_rows"] = grid_preset(preset)

            updates["properties"] = merge_fields(
                section.properties,
                properties,
                SECTION_PROPERTY_FIELDS,
                coerce={"grid_gap": GridGap, "grid_type": GridType},
            )

        return merge_fields(
            section,
            updates,
            SECTION_UPDATE_FIELDS,
            coerce={"type": SectionType, "elements": tuple},
        )

    return map_by_id(pages, page_id, lambda page: _map_sections(page, section_id, _update))


def remove_section(pages: Pages, page_id: str, section_id: str) -> Pages:
    def _remove(page: Page) -> Page:
        remaining = remove_by_id(page.sections, section_id)
        return page if remaining is page.sections else replace(page, sections=remaining)

    return map_by_id(pages, page_id, _remove)


def clone_section(section: Section) -> Section:
    """Deep copy with a fresh section id and fresh element ids."""
    return replace(
        section,
        id=new_id("section"),
        elements=tuple(
            replace(element, id=new_id(f"element-{element.type.value}"))
            for element in section.elements
        ),
    )


def duplicate_section(pages: Pages, page_id: str, section_id: str) -> Pages:
    def _duplicate(page: Page) -> Page:
        section = find_section(page, section_id)
        # header and footer are singletons
        if section is None or section.is_banner:
            return page

        index = page.sections.index(section)
        sections = page.sections[: index + 1] + (clone_section(section),) + page.sections[index + 1 :]
        return replace(page, sections=sections)

    return map_by_id(pages, page_id, _duplicate)


def move_section_up(pages: Pages, page_id: str, section_id: str) -> Pages:
    return _move_section(pages, page_id, section_id, -1)


def move_section_down(pages: Pages, page_id: str, section_id: str) -> Pages:
    return _move_section(pages, page_id, section_id, 1)


def replace_header_section(pages: Pages, page_id: str, section: Section) -> Pages:
    return _replace_banner(pages, page_id, section, SectionType.HEADER)


def replace_footer_section(pages: Pages, page_id: str, section: Section) -> Pages:
    return _replace_banner(pages, page_id, section, SectionType.FOOTER)


def _map_sections(page: Page, section_id: str, fn) -> Page:
    sections = map_by_id(page.sections, section_id, fn)
    return page if sections is page.sections else replace(page, sections=sections)


def _move_section(pages: Pages, page_id: str, section_id: str, step: int) -> Pages:
    """
    Swap a content section with its neighbour in the content sequence.
    Header and footer keep their slots.
    """
    def _move(page: Page) -> Page:
        slots = [i for i, s in enumerate(page.sections) if not s.is_banner]
        ids = [page.sections[i].id for i in slots]

        if section_id not in ids:
            return page

        position = ids.index(section_id)
        target = position + step
        if target < 0 or target >= len(slots):
            return page

        sections = list(page.sections)
        a, b = slots[position], slots[target]
        sections[a], sections[b] = sections[b], sections[a]
        return replace(page, sections=tuple(sections))

    return map_by_id(pages, page_id, _move)


def _replace_banner(pages: Pages, page_id: str, section: Section, banner_type: SectionType) -> Pages:
    banner = replace(section, type=banner_type)

    def _replace(page: Page) -> Page:
        index = next(
            (i for i, s in enumerate(page.sections) if s.section_type == banner_type),
            -1,
        )

        if index >= 0:
            if page.sections[index] == banner:
                return page
            sections = page.sections[:index] + (banner,) + page.sections[index + 1 :]
        elif banner_type == SectionType.HEADER:
            sections = (banner,) + page.sections
        else:
            sections = page.sections + (banner,)

        return replace(page, sections=sections)

    return map_by_id(pages, page_id, _replace)
