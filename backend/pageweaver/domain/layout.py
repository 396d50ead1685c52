from enum import Enum
from typing import Dict, Tuple


class GridType(str, Enum):
    FIXED = "fixed"
    AUTO = "auto"


class GridGap(str, Enum):
    NONE = "gap-0"
    SMALL = "gap-2"
    MEDIUM = "gap-4"
    LARGE = "gap-8"


# Label -> (columns, rows)
GRID_DIMENSION_PRESETS: Dict[str, Tuple[int, int]] = {
    "1x1": (1, 1),
    "2x1": (2, 1),
    "2x2": (2, 2),
    "3x1": (3, 1),
    "3x2": (3, 2),
    "3x3": (3, 3),
    "4x1": (4, 1),
    "4x2": (4, 2),
    "4x4": (4, 4),
}


def grid_preset(label: str) -> Tuple[str, str]:
    """
    Column/row descriptors for a dimension preset, e.g. "3x2" ->
    ("grid-cols-3", "grid-rows-2").
    """
    if label not in GRID_DIMENSION_PRESETS:
        raise ValueError(f"Unknown grid preset: {label}")

    columns, rows = GRID_DIMENSION_PRESETS[label]
    return f"grid-cols-{columns}", f"grid-rows-{rows}"
