from enum import Enum
from typing import FrozenSet


class Role(str, Enum):
    VIEWER = "viewer"
    EDITOR = "editor"
    ADMIN = "admin"


EDITING_ROLES: FrozenSet[Role] = frozenset({Role.EDITOR, Role.ADMIN})
ADMIN_ROLES: FrozenSet[Role] = frozenset({Role.ADMIN})
ALL_ROLES: FrozenSet[Role] = frozenset(Role)


def can_edit(role) -> bool:
    """Editors and admins may mutate content; viewers are read-only."""
    return _as_role(role) in EDITING_ROLES


def is_admin(role) -> bool:
    """Site-level structure (banners, deletion, publishing, navigation)."""
    return _as_role(role) == Role.ADMIN


def _as_role(role):
    try:
        return Role(role)
    except ValueError:
        return None
