"""
Document model for the page builder.

A site is a forest of pages; each page owns an ordered tuple of sections and
each section an ordered tuple of elements. Every record is frozen: edits build
new records with ``dataclasses.replace`` and leave the originals untouched.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

from .layout import GridGap, GridType
from .styles import FontFamily, FontSize, LetterSpacing, LineHeight, TextAlign, TextColor


class SectionType(str, Enum):
    CONTENT = "content"
    HEADER = "header"
    FOOTER = "footer"


BANNER_TYPES = (SectionType.HEADER, SectionType.FOOTER)


class ElementType(str, Enum):
    HEADING = "heading"
    TEXT = "text"
    IMAGE = "image"
    BUTTON = "button"


@dataclass(frozen=True)
class GridPosition:
    column: int = 1
    row: int = 1
    column_span: int = 1
    row_span: int = 1


@dataclass(frozen=True)
class ElementStyle:
    font_family: Optional[FontFamily] = None
    font_size: Optional[FontSize] = None
    line_height: Optional[LineHeight] = None
    letter_spacing: Optional[LetterSpacing] = None
    text_align: Optional[TextAlign] = None
    text_color: Optional[TextColor] = None
    bold: bool = False
    italic: bool = False
    underline: bool = False
    custom_class: str = ""  # layout utilities (margins, widths, ...)


@dataclass(frozen=True)
class Element:
    id: str
    type: ElementType
    content: str = ""  # literal text, or a URI for images
    style: ElementStyle = field(default_factory=ElementStyle)
    grid_position: Optional[GridPosition] = None


@dataclass(frozen=True)
class SectionProperties:
    background_color: str = "bg-white"
    padding_x: str = "px-4"
    padding_y: str = "py-12"
    height: Optional[str] = None
    is_grid_layout: bool = False
    grid_columns: str = "grid-cols-1"
    grid_rows: str = "grid-rows-1"
    grid_gap: GridGap = GridGap.MEDIUM
    grid_type: GridType = GridType.FIXED
    is_draggable_grid: bool = False


@dataclass(frozen=True)
class Section:
    id: str
    type: Optional[SectionType] = SectionType.CONTENT
    elements: Tuple[Element, ...] = ()
    properties: SectionProperties = field(default_factory=SectionProperties)

    @property
    def section_type(self) -> SectionType:
        # absent type reads as content
        return self.type or SectionType.CONTENT

    @property
    def is_banner(self) -> bool:
        return self.section_type in BANNER_TYPES


@dataclass(frozen=True)
class Page:
    id: str
    title: str
    slug: str
    sections: Tuple[Section, ...] = ()
    is_published: bool = False
    published_at: Optional[datetime] = None


@dataclass(frozen=True)
class NavigationEntry:
    id: str
    title: str
    url: str
    order: int = 0


def find_page(pages: Tuple[Page, ...], page_id: str) -> Optional[Page]:
    return next((p for p in pages if p.id == page_id), None)


def find_section(page: Page, section_id: str) -> Optional[Section]:
    return next((s for s in page.sections if s.id == section_id), None)


def find_element(section: Section, element_id: str) -> Optional[Element]:
    return next((e for e in section.elements if e.id == element_id), None)
