"""
Commands accepted by the reducer.

Each command is a frozen record; ``name`` is the wire name used in audit
logs and by the HTTP layer.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Tuple

from pageweaver.domain.document import Element, NavigationEntry, Page, Section
from .grid import DropEvent

COMMANDS: Dict[str, type] = {}


def command(name: str):
    def register(cls):
        cls.name = name
        COMMANDS[name] = cls
        return cls
    return register


# ------------------------
# Pages
# ------------------------

@command("addPage")
@dataclass(frozen=True)
class AddPage:
    page: Page


@command("removePage")
@dataclass(frozen=True)
class RemovePage:
    page_id: str
    fallback_page_id: str


@command("updatePage")
@dataclass(frozen=True)
class UpdatePage:
    page_id: str
    changes: Mapping[str, Any] = field(default_factory=dict)


@command("publishPage")
@dataclass(frozen=True)
class PublishPage:
    page_id: str
    published_at: Optional[datetime] = None


@command("unpublishPage")
@dataclass(frozen=True)
class UnpublishPage:
    page_id: str


# ------------------------
# Sections
# ------------------------

@command("addSection")
@dataclass(frozen=True)
class AddSection:
    page_id: str
    section: Section


@command("updateSection")
@dataclass(frozen=True)
class UpdateSection:
    page_id: str
    section_id: str
    changes: Mapping[str, Any] = field(default_factory=dict)


@command("removeSection")
@dataclass(frozen=True)
class RemoveSection:
    page_id: str
    section_id: str


@command("duplicateSection")
@dataclass(frozen=True)
class DuplicateSection:
    page_id: str
    section_id: str


@command("moveSectionUp")
@dataclass(frozen=True)
class MoveSectionUp:
    page_id: str
    section_id: str


@command("moveSectionDown")
@dataclass(frozen=True)
class MoveSectionDown:
    page_id: str
    section_id: str


@command("replaceHeaderSection")
@dataclass(frozen=True)
class ReplaceHeaderSection:
    page_id: str
    section: Section


@command("replaceFooterSection")
@dataclass(frozen=True)
class ReplaceFooterSection:
    page_id: str
    section: Section


# ------------------------
# Elements
# ------------------------

@command("addElement")
@dataclass(frozen=True)
class AddElement:
    page_id: str
    section_id: str
    element: Element


@command("updateElement")
@dataclass(frozen=True)
class UpdateElement:
    page_id: str
    section_id: str
    element_id: str
    changes: Mapping[str, Any] = field(default_factory=dict)


@command("removeElement")
@dataclass(frozen=True)
class RemoveElement:
    page_id: str
    section_id: str
    element_id: str


@command("setElementStyle")
@dataclass(frozen=True)
class SetElementStyle:
    page_id: str
    section_id: str
    element_id: str
    attribute: str
    value: Any


@command("toggleElementStyle")
@dataclass(frozen=True)
class ToggleElementStyle:
    page_id: str
    section_id: str
    element_id: str
    flag: str


@command("dropOnGrid")
@dataclass(frozen=True)
class DropOnGrid:
    page_id: str
    section_id: str
    drop: DropEvent


# ------------------------
# Navigation
# ------------------------

@command("updateNavigation")
@dataclass(frozen=True)
class UpdateNavigation:
    entries: Tuple[NavigationEntry, ...]


@command("moveNavigationEntry")
@dataclass(frozen=True)
class MoveNavigationEntry:
    from_index: int
    to_index: int


@command("syncNavigationEntry")
@dataclass(frozen=True)
class SyncNavigationEntry:
    entry_id: str
    page_id: str


# ------------------------
# Session
# ------------------------

@command("setActivePage")
@dataclass(frozen=True)
class SetActivePage:
    page_id: str


@command("setRole")
@dataclass(frozen=True)
class SetRole:
    role: str


@command("toggleEditMode")
@dataclass(frozen=True)
class ToggleEditMode:
    pass


@command("select")
@dataclass(frozen=True)
class Select:
    element_id: Optional[str] = None
