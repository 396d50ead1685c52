from typing import Any, Dict

from pageweaver.domain.roles import can_edit, is_admin
from pageweaver.engine.selection import SelectedElement
from pageweaver.engine.state import EditorState
from .element import normalize_element
from .navigation import normalize_navigation_entry
from .page import normalize_page


def normalize_state(state: EditorState) -> Dict[str, Any]:
    return {
        "pages": [normalize_page(p) for p in state.pages],
        "navigation": [normalize_navigation_entry(n) for n in state.navigation],
        "active_page_id": state.active_page_id,
        "edit_mode": state.edit_mode,
        "selected_element_id": state.selected_element_id,
        "role": state.role.value,
        "can_edit": can_edit(state.role),
        "is_admin": is_admin(state.role),
    }


def normalize_selection(selection: SelectedElement | None) -> Dict[str, Any] | None:
    if selection is None:
        return None

    return {
        "page_id": selection.page_id,
        "section_id": selection.section_id,
        "element": normalize_element(selection.element),
    }
