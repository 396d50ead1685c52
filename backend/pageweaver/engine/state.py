from dataclasses import dataclass
from typing import Optional, Tuple

from pageweaver.domain.document import NavigationEntry, Page
from pageweaver.domain.roles import Role


@dataclass(frozen=True)
class EditorState:
    """
    Complete editing session state.

    Read surface for consumers (renderer, router, persistence); only the
    reducer produces new instances.
    """
    pages: Tuple[Page, ...]
    navigation: Tuple[NavigationEntry, ...]
    active_page_id: str
    edit_mode: bool = False
    selected_element_id: Optional[str] = None
    role: Role = Role.VIEWER

    @property
    def active_page(self) -> Optional[Page]:
        return next((p for p in self.pages if p.id == self.active_page_id), None)


def initial_state(pages, navigation, role=Role.VIEWER) -> EditorState:
    pages = tuple(pages)
    return EditorState(
        pages=pages,
        navigation=tuple(sorted(navigation, key=lambda n: n.order)),
        active_page_id=pages[0].id if pages else "",
        role=Role(role),
    )
