from dataclasses import replace

from pageweaver.domain.document import ElementType, SectionType, find_element, find_page, find_section
from pageweaver.domain.invariants.element import assert_element_content
from pageweaver.domain.invariants.page import assert_page_removable, assert_unique_slug
from pageweaver.domain.invariants.section import assert_single_banner
from pageweaver.engine import commands as cmd


def check_invariants(state, command, *, reject_duplicate_slugs: bool = True) -> None:
    """
    Caller-side preconditions the reducer deliberately does not enforce.
    Raises InvariantViolation; returns None when the command is safe.
    """
    if isinstance(command, cmd.RemovePage):
        assert_page_removable(state.pages, command.page_id, command.fallback_page_id)

    elif isinstance(command, cmd.AddPage):
        if reject_duplicate_slugs:
            assert_unique_slug(state.pages, command.page.slug, page_id=command.page.id)

    elif isinstance(command, cmd.UpdatePage):
        slug = command.changes.get("slug")
        if reject_duplicate_slugs and slug is not None:
            assert_unique_slug(state.pages, slug, page_id=command.page_id)

    elif isinstance(command, cmd.AddSection):
        page = find_page(state.pages, command.page_id)
        if page is not None:
            assert_single_banner(page, command.section)

    elif isinstance(command, cmd.UpdateSection):
        _check_section_retype(state, command)

    elif isinstance(command, cmd.AddElement):
        assert_element_content(command.element)

    elif isinstance(command, cmd.UpdateElement):
        _check_element_update(state, command)


def _check_section_retype(state, command) -> None:
    new_type = command.changes.get("type")
    page = find_page(state.pages, command.page_id)
    section = find_section(page, command.section_id) if page else None
    if new_type is None or section is None:
        return

    assert_single_banner(page, replace(section, type=SectionType(new_type)), replacing=section.id)


def _check_element_update(state, command) -> None:
    page = find_page(state.pages, command.page_id)
    section = find_section(page, command.section_id) if page else None
    element = find_element(section, command.element_id) if section else None
    if element is None:
        return

    changes = command.changes
    updated = replace(
        element,
        type=ElementType(changes.get("type") or element.type),
        content=changes["content"] if "content" in changes else element.content,
    )
    assert_element_content(updated)
