from dataclasses import replace

import pytest

from pageweaver.domain.document import Page, Section, find_page
from pageweaver.domain.roles import Role, can_edit, is_admin
from pageweaver.engine import commands as cmd
from pageweaver.engine.grid import DropEvent
from pageweaver.engine.reducer import allowed_roles, reduce
from pageweaver.engine.results import CommandStatus
from pageweaver.engine.state import initial_state


def test_applied_command_returns_new_state(editor_state):
    result = reduce(editor_state, cmd.AddSection("home", Section(id="extra")))

    assert result.status == CommandStatus.APPLIED
    assert result.state is not editor_state
    assert find_page(result.state.pages, "home").sections[-1].id == "extra"


def test_unresolved_target_is_noop(editor_state):
    result = reduce(editor_state, cmd.RemoveSection("home", "missing"))

    assert result.status == CommandStatus.NOOP
    assert result.state is editor_state


def test_viewer_cannot_edit_document(viewer_state):
    result = reduce(viewer_state, cmd.AddSection("home", Section(id="extra")))

    assert result.denied
    assert result.state is viewer_state
    assert "viewer" in result.reason


@pytest.mark.parametrize(
    "command",
    [
        cmd.RemovePage("about", "home"),
        cmd.PublishPage("about"),
        cmd.UnpublishPage("about"),
        cmd.ReplaceHeaderSection("home", Section(id="h")),
        cmd.MoveNavigationEntry(0, 1),
    ],
)
def test_editor_is_denied_admin_commands(editor_state, command):
    assert reduce(editor_state, command).denied


def test_role_sets_per_command():
    assert allowed_roles(cmd.AddElement) == {Role.EDITOR, Role.ADMIN}
    assert allowed_roles(cmd.RemovePage) == {Role.ADMIN}
    assert allowed_roles(cmd.Select) == {Role.VIEWER, Role.EDITOR, Role.ADMIN}


def test_unknown_command_raises(admin_state):
    with pytest.raises(ValueError):
        reduce(admin_state, object())


def test_remove_active_page_moves_to_fallback(admin_state):
    state = reduce(admin_state, cmd.SetActivePage("about")).state
    state = replace(state, selected_element_id="about-text")

    result = reduce(state, cmd.RemovePage("about", "home"))

    assert result.applied
    assert result.state.active_page_id == "home"
    assert result.state.selected_element_id is None
    assert [n.id for n in result.state.navigation] == ["nav-home", "nav-blog"]


def test_remove_inactive_page_keeps_active_page(admin_state):
    result = reduce(admin_state, cmd.RemovePage("about", "home"))
    assert result.state.active_page_id == "home"


def test_publish_page(admin_state):
    result = reduce(admin_state, cmd.PublishPage("about"))

    about = find_page(result.state.pages, "about")
    assert about.is_published
    assert about.published_at is not None


def test_update_page_repoints_navigation(editor_state):
    result = reduce(editor_state, cmd.UpdatePage("about", {"slug": "/team"}))

    urls = [n.url for n in result.state.navigation]
    assert "/team" in urls
    assert "/about" not in urls


def test_add_page(editor_state):
    result = reduce(editor_state, cmd.AddPage(Page(id="contact", title="Contact", slug="/contact")))
    assert [p.id for p in result.state.pages] == ["home", "about", "contact"]


def test_remove_selected_element_clears_selection(editor_state):
    state = reduce(editor_state, cmd.Select("outro-text")).state
    result = reduce(state, cmd.RemoveElement("home", "outro", "outro-text"))

    assert result.state.selected_element_id is None


def test_set_active_page_unknown_is_noop(viewer_state):
    assert reduce(viewer_state, cmd.SetActivePage("missing")).status == CommandStatus.NOOP


def test_viewer_cannot_enter_edit_mode(viewer_state):
    result = reduce(viewer_state, cmd.ToggleEditMode())

    assert result.status == CommandStatus.NOOP
    assert result.state.edit_mode is False


def test_leaving_edit_mode_clears_selection(editor_state):
    state = reduce(editor_state, cmd.ToggleEditMode()).state
    state = reduce(state, cmd.Select("intro-title")).state
    assert state.edit_mode is True

    state = reduce(state, cmd.ToggleEditMode()).state
    assert state.edit_mode is False
    assert state.selected_element_id is None


def test_switching_to_viewer_exits_edit_mode(admin_state):
    state = reduce(admin_state, cmd.ToggleEditMode()).state
    state = reduce(state, cmd.Select("intro-title")).state

    state = reduce(state, cmd.SetRole("viewer")).state

    assert state.role == Role.VIEWER
    assert state.edit_mode is False
    assert state.selected_element_id is None


def test_select_same_element_is_noop(viewer_state):
    state = reduce(viewer_state, cmd.Select("intro-title")).state
    assert reduce(state, cmd.Select("intro-title")).status == CommandStatus.NOOP


def test_invalid_role_raises(admin_state):
    with pytest.raises(ValueError):
        reduce(admin_state, cmd.SetRole("owner"))


def test_drop_on_grid(grid_pages, navigation):
    state = initial_state(grid_pages, navigation, Role.EDITOR)
    result = reduce(state, cmd.DropOnGrid("home", "gallery", DropEvent(300, 200, 210, 150, "photo")))

    assert result.applied


@pytest.mark.parametrize(
    "role, editable, admin",
    [("viewer", False, False), ("editor", True, False), ("admin", True, True), ("owner", False, False)],
)
def test_capability_predicates(role, editable, admin):
    assert can_edit(role) is editable
    assert is_admin(role) is admin


def test_remove_section_clears_selection_inside_it(editor_state):
    state = reduce(editor_state, cmd.Select("feature-b")).state
    result = reduce(state, cmd.RemoveSection("home", "features"))

    assert result.applied
    assert result.state.selected_element_id is None


def test_remove_other_section_keeps_selection(editor_state):
    state = reduce(editor_state, cmd.Select("feature-b")).state
    result = reduce(state, cmd.RemoveSection("home", "outro"))

    assert result.state.selected_element_id == "feature-b"
