"""
Grid placement: maps a pointer drop inside a section container to a
1-indexed grid cell and merges that cell into the dropped element's
grid position.
"""
import math
import re
from dataclasses import dataclass
from typing import Optional

from pageweaver.domain.document import find_page, find_section
from .elements import update_element
from .pages import Pages

_COUNT_PATTERNS = (
    re.compile(r"^\s*(\d+)\s*$"),
    re.compile(r"^grid-(?:cols|rows)-(\d+)$"),
    re.compile(r"^repeat\(\s*(\d+)\s*,"),
)


@dataclass(frozen=True)
class GridCell:
    column: int
    row: int


@dataclass(frozen=True)
class GridPlacement:
    column_start: int
    row_start: int

    def as_style(self) -> dict:
        return {"gridColumnStart": self.column_start, "gridRowStart": self.row_start}


@dataclass(frozen=True)
class DropEvent:
    """Pointer drop: container size and offset of the drop point within it."""
    width: float
    height: float
    x: float
    y: float
    element_id: Optional[str] = None


def parse_track_count(descriptor) -> int:
    """
    Number of tracks declared by a column/row descriptor.

    Accepts 3, "3", "grid-cols-3", "grid-rows-2", "repeat(3, 1fr)" or an
    explicit track list such as "1fr 1fr 1fr". Anything else counts as 1.
    """
    if isinstance(descriptor, bool):
        return 1
    if isinstance(descriptor, int):
        return max(descriptor, 1)
    if not isinstance(descriptor, str) or not descriptor.strip():
        return 1

    for pattern in _COUNT_PATTERNS:
        match = pattern.match(descriptor.strip())
        if match:
            return max(int(match.group(1)), 1)

    tracks = descriptor.split()
    if len(tracks) > 1 and all(_looks_like_track(t) for t in tracks):
        return len(tracks)

    return 1


def resolve_drop_cell(width: float, height: float, x: float, y: float, columns: int, rows: int) -> GridCell:
    return GridCell(
        column=_resolve_track(x, width, columns),
        row=_resolve_track(y, height, rows),
    )


def placement_for(cell: GridCell) -> GridPlacement:
    return GridPlacement(column_start=cell.column, row_start=cell.row)


def drop_element(pages: Pages, page_id: str, section_id: str, drop: DropEvent) -> Pages:
    """
    Place a dragged element at the cell under the drop point, keeping its
    spans. Ignored unless the section is a draggable grid and the drag
    carried an element id.
    """
    if not drop.element_id:
        return pages

    page = find_page(pages, page_id)
    section = find_section(page, section_id) if page else None
    if section is None:
        return pages

    properties = section.properties
    if not (properties.is_grid_layout and properties.is_draggable_grid):
        return pages

    cell = resolve_drop_cell(
        drop.width,
        drop.height,
        drop.x,
        drop.y,
        parse_track_count(properties.grid_columns),
        parse_track_count(properties.grid_rows),
    )
    placement = placement_for(cell)

    return update_element(
        pages,
        page_id,
        section_id,
        drop.element_id,
        {"grid_position": {"column": placement.column_start, "row": placement.row_start}},
    )


def _resolve_track(offset: float, extent: float, count: int) -> int:
    count = max(int(count), 1)
    if extent <= 0:
        return 1

    ratio = offset / (extent / count)
    # clamp before flooring: a tiny container can push the ratio to inf
    if math.isnan(ratio) or ratio < 0:
        return 1
    if not math.isfinite(ratio) or ratio >= count:
        return count
    return min(math.floor(ratio) + 1, count)


def _looks_like_track(token: str) -> bool:
    return bool(re.match(r"^(\d+(\.\d+)?(fr|px|%|rem|em)|auto|min-content|max-content|minmax\(.*\))$", token))
