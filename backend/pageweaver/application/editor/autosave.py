from flask import current_app

from .exceptions import PersistenceError
from .persistence import save_document
from .session import EditorSession


def autosave(session: EditorSession, *, pages_key: str, navigation_key: str) -> bool:
    """
    Fire-and-forget save of whatever the session holds right now.

    Never raises: a failed save is logged and reported as False, editing
    continues on the in-memory state.
    """
    state = session.state

    try:
        save_document(
            pages=state.pages,
            navigation=state.navigation,
            pages_key=pages_key,
            navigation_key=navigation_key,
        )
    except PersistenceError as exc:
        current_app.logger.error(f"Autosave failed: {exc}")
        return False

    return True
