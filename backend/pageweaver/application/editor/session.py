from typing import Optional

from pageweaver.domain.document import Page
from pageweaver.engine.reducer import allowed_roles, reduce
from pageweaver.engine.results import CommandResult
from pageweaver.engine.selection import SelectedElement, get_selected_element
from pageweaver.engine.state import EditorState, initial_state
from .guards import check_invariants


class EditorSession:
    """
    Owns the editing state of one local editing session.

    Responsibilities:
    - hold the current EditorState (the only writer is ``dispatch``)
    - run caller-side invariant guards before a permitted command
    - accept a full document replacement on load
    """

    def __init__(self, state: EditorState, *, reject_duplicate_slugs: bool = True):
        self._state = state
        self.reject_duplicate_slugs = reject_duplicate_slugs

    @classmethod
    def start(cls, pages, navigation, role, **kwargs) -> "EditorSession":
        return cls(initial_state(pages, navigation, role), **kwargs)

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def selection(self) -> Optional[SelectedElement]:
        return get_selected_element(
            self._state.selected_element_id,
            self._state.active_page_id,
            self._state.pages,
        )

    def dispatch(self, command) -> CommandResult:
        # Denied commands never raise; the reducer reports them
        if self._state.role in allowed_roles(type(command)):
            check_invariants(
                self._state,
                command,
                reject_duplicate_slugs=self.reject_duplicate_slugs,
            )

        result = reduce(self._state, command)
        self._state = result.state
        return result

    def replace_document(self, pages, navigation) -> None:
        fresh = initial_state(pages, navigation, self._state.role)
        active = next((p.id for p in fresh.pages if p.id == self._state.active_page_id), None)

        self._state = EditorState(
            pages=fresh.pages,
            navigation=fresh.navigation,
            active_page_id=active or fresh.active_page_id,
            role=self._state.role,
        )

    def page_for_path(self, path: str) -> Optional[Page]:
        """Routing correlation: a page's slug is its public path."""
        normalized = "/" + path.strip("/") if path else "/"
        return next(
            (p for p in self._state.pages if ("/" + p.slug.strip("/")) == normalized),
            None,
        )
