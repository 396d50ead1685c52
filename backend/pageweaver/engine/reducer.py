"""
Reducer: (state, command) -> CommandResult.

Pure and synchronous. Every handler is wrapped by ``requires_role`` so the
role check happens in exactly one place; handlers themselves only express
the edit and return the state unchanged (same object) when a target id
does not resolve.
"""
import logging
from dataclasses import replace
from datetime import datetime, timezone

from pageweaver.domain.document import find_element, find_page, find_section
from pageweaver.domain.roles import ADMIN_ROLES, ALL_ROLES, EDITING_ROLES, Role, can_edit
from pageweaver.utils.audit import log_action
from pageweaver.utils.decorators import requires_role
from . import commands as cmd
from .elements import add_element, remove_element, set_element_style, toggle_element_style, update_element
from .grid import drop_element
from .navigation import move_navigation_entry, sync_navigation_entry, update_navigation
from .pages import add_page, publish_page, remove_page, unpublish_page, update_page
from .results import CommandResult
from .sections import (
    add_section,
    duplicate_section,
    move_section_down,
    move_section_up,
    remove_section,
    replace_footer_section,
    replace_header_section,
    update_section,
)
from .state import EditorState

_HANDLERS = {}


def handles(command_cls):
    def register(fn):
        _HANDLERS[command_cls] = fn
        return fn
    return register


def reduce(state: EditorState, command) -> CommandResult:
    handler = _HANDLERS.get(type(command))
    if handler is None:
        raise ValueError(f"Unknown command: {command!r}")

    result = handler(state, command)

    entity_type, entity_id = _target_of(command)
    log_action(
        action=f"command.{command.name}",
        entity_type=entity_type,
        entity_id=entity_id,
        payload={"status": result.status.value, "role": state.role.value},
        level=logging.WARNING if result.denied else logging.INFO,
    )
    return result


def allowed_roles(command_cls) -> frozenset:
    handler = _HANDLERS.get(command_cls)
    return handler.allowed_roles if handler else frozenset()


def _evolve(state: EditorState, **changes) -> EditorState:
    """replace() that keeps the original object when nothing changed."""
    updates = {
        key: value
        for key, value in changes.items()
        if value is not getattr(state, key) and value != getattr(state, key)
    }
    return replace(state, **updates) if updates else state


# ------------------------
# Pages
# ------------------------

@handles(cmd.AddPage)
@requires_role(*EDITING_ROLES)
def _add_page(state, command):
    return _evolve(state, pages=add_page(state.pages, command.page))


@handles(cmd.RemovePage)
@requires_role(*ADMIN_ROLES)
def _remove_page(state, command):
    removed = find_page(state.pages, command.page_id)
    pages, navigation = remove_page(state.pages, state.navigation, command.page_id)
    if pages is state.pages:
        return state

    active_page_id = state.active_page_id
    if active_page_id == command.page_id:
        fallback = find_page(pages, command.fallback_page_id)
        active_page_id = fallback.id if fallback else (pages[0].id if pages else "")

    selected = state.selected_element_id
    if selected and any(e.id == selected for s in removed.sections for e in s.elements):
        selected = None

    return _evolve(
        state,
        pages=pages,
        navigation=navigation,
        active_page_id=active_page_id,
        selected_element_id=selected,
    )


@handles(cmd.UpdatePage)
@requires_role(*EDITING_ROLES)
def _update_page(state, command):
    pages, navigation = update_page(state.pages, state.navigation, command.page_id, command.changes)
    return _evolve(state, pages=pages, navigation=navigation)


@handles(cmd.PublishPage)
@requires_role(*ADMIN_ROLES)
def _publish_page(state, command):
    now = command.published_at or datetime.now(timezone.utc)
    return _evolve(state, pages=publish_page(state.pages, command.page_id, now))


@handles(cmd.UnpublishPage)
@requires_role(*ADMIN_ROLES)
def _unpublish_page(state, command):
    return _evolve(state, pages=unpublish_page(state.pages, command.page_id))


# ------------------------
# Sections
# ------------------------

@handles(cmd.AddSection)
@requires_role(*EDITING_ROLES)
def _add_section(state, command):
    return _evolve(state, pages=add_section(state.pages, command.page_id, command.section))


@handles(cmd.UpdateSection)
@requires_role(*EDITING_ROLES)
def _update_section(state, command):
    return _evolve(
        state,
        pages=update_section(state.pages, command.page_id, command.section_id, command.changes),
    )


@handles(cmd.RemoveSection)
@requires_role(*EDITING_ROLES)
def _remove_section(state, command):
    pages = remove_section(state.pages, command.page_id, command.section_id)
    if pages is state.pages:
        return state

    section = find_section(find_page(state.pages, command.page_id), command.section_id)
    selected = state.selected_element_id
    if selected and find_element(section, selected) is not None:
        selected = None

    return _evolve(state, pages=pages, selected_element_id=selected)


@handles(cmd.DuplicateSection)
@requires_role(*EDITING_ROLES)
def _duplicate_section(state, command):
    return _evolve(state, pages=duplicate_section(state.pages, command.page_id, command.section_id))


@handles(cmd.MoveSectionUp)
@requires_role(*EDITING_ROLES)
def _move_section_up(state, command):
    return _evolve(state, pages=move_section_up(state.pages, command.page_id, command.section_id))


@handles(cmd.MoveSectionDown)
@requires_role(*EDITING_ROLES)
def _move_section_down(state, command):
    return _evolve(state, pages=move_section_down(state.pages, command.page_id, command.section_id))


@handles(cmd.ReplaceHeaderSection)
@requires_role(*ADMIN_ROLES)
def _replace_header(state, command):
    return _evolve(state, pages=replace_header_section(state.pages, command.page_id, command.section))


@handles(cmd.ReplaceFooterSection)
@requires_role(*ADMIN_ROLES)
def _replace_footer(state, command):
    return _evolve(state, pages=replace_footer_section(state.pages, command.page_id, command.section))


# ------------------------
# Elements
# ------------------------

@handles(cmd.AddElement)
@requires_role(*EDITING_ROLES)
def _add_element(state, command):
    return _evolve(
        state,
        pages=add_element(state.pages, command.page_id, command.section_id, command.element),
    )


@handles(cmd.UpdateElement)
@requires_role(*EDITING_ROLES)
def _update_element(state, command):
    return _evolve(
        state,
        pages=update_element(
            state.pages, command.page_id, command.section_id, command.element_id, command.changes
        ),
    )


@handles(cmd.RemoveElement)
@requires_role(*EDITING_ROLES)
def _remove_element(state, command):
    pages = remove_element(state.pages, command.page_id, command.section_id, command.element_id)
    selected = None if state.selected_element_id == command.element_id else state.selected_element_id
    if pages is state.pages:
        return state
    return _evolve(state, pages=pages, selected_element_id=selected)


@handles(cmd.SetElementStyle)
@requires_role(*EDITING_ROLES)
def _set_element_style(state, command):
    return _evolve(
        state,
        pages=set_element_style(
            state.pages,
            command.page_id,
            command.section_id,
            command.element_id,
            command.attribute,
            command.value,
        ),
    )


@handles(cmd.ToggleElementStyle)
@requires_role(*EDITING_ROLES)
def _toggle_element_style(state, command):
    return _evolve(
        state,
        pages=toggle_element_style(
            state.pages, command.page_id, command.section_id, command.element_id, command.flag
        ),
    )


@handles(cmd.DropOnGrid)
@requires_role(*EDITING_ROLES)
def _drop_on_grid(state, command):
    return _evolve(state, pages=drop_element(state.pages, command.page_id, command.section_id, command.drop))


# ------------------------
# Navigation
# ------------------------

@handles(cmd.UpdateNavigation)
@requires_role(*ADMIN_ROLES)
def _update_navigation(state, command):
    return _evolve(state, navigation=update_navigation(state.navigation, command.entries))


@handles(cmd.MoveNavigationEntry)
@requires_role(*ADMIN_ROLES)
def _move_navigation_entry(state, command):
    return _evolve(
        state,
        navigation=move_navigation_entry(state.navigation, command.from_index, command.to_index),
    )


@handles(cmd.SyncNavigationEntry)
@requires_role(*ADMIN_ROLES)
def _sync_navigation_entry(state, command):
    page = find_page(state.pages, command.page_id)
    return _evolve(state, navigation=sync_navigation_entry(state.navigation, command.entry_id, page))


# ------------------------
# Session
# ------------------------

@handles(cmd.SetActivePage)
@requires_role(*ALL_ROLES)
def _set_active_page(state, command):
    if find_page(state.pages, command.page_id) is None:
        return state
    return _evolve(state, active_page_id=command.page_id)


@handles(cmd.SetRole)
@requires_role(*ALL_ROLES)
def _set_role(state, command):
    role = Role(command.role)
    if role == Role.VIEWER:
        # viewers cannot stay in edit mode
        return _evolve(state, role=role, edit_mode=False, selected_element_id=None)
    return _evolve(state, role=role)


@handles(cmd.ToggleEditMode)
@requires_role(*ALL_ROLES)
def _toggle_edit_mode(state, command):
    if not can_edit(state.role):
        return state
    if state.edit_mode:
        return _evolve(state, edit_mode=False, selected_element_id=None)
    return _evolve(state, edit_mode=True)


@handles(cmd.Select)
@requires_role(*ALL_ROLES)
def _select(state, command):
    return _evolve(state, selected_element_id=command.element_id or None)


def _target_of(command):
    for attr, entity_type in (
        ("element_id", "element"),
        ("section_id", "section"),
        ("entry_id", "navigation"),
        ("page_id", "page"),
    ):
        value = getattr(command, attr, None)
        if value:
            return entity_type, value

    for attr, entity_type in (("page", "page"), ("section", "section"), ("element", "element")):
        record = getattr(command, attr, None)
        if record is not None:
            return entity_type, record.id

    return "session", None
