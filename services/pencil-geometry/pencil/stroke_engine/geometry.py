"""
Pure geometry for pencil strokes.
Bounding boxes, proximity tests, distances and rotation remapping of raw input coordinates.
"""
import math
from enum import IntEnum
from collections.abc import Mapping
from typing import Optional, Tuple
from ..ingestion.models import Bounds

DEFAULT_STROKE_WIDTH = 3.0
DEFAULT_NEAR_THRESHOLD = 20.0


class Rotation(IntEnum):
    # Matches the framebuffer rotation codes of the host device
    UPRIGHT = 0
    CLOCKWISE = 1
    UPSIDE_DOWN = 2
    COUNTER_CLOCKWISE = 3


ROTATION_UPRIGHT = Rotation.UPRIGHT
ROTATION_CLOCKWISE = Rotation.CLOCKWISE
ROTATION_UPSIDE_DOWN = Rotation.UPSIDE_DOWN
ROTATION_COUNTER_CLOCKWISE = Rotation.COUNTER_CLOCKWISE


def _field(record, name):
    # Records come either as models (attributes) or as plain mappings
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _points(stroke) -> list:
    if stroke is None:
        return []
    return _field(stroke, "points") or []


def _xy(point) -> Tuple[float, float]:
    if isinstance(point, Mapping):
        return point["x"], point["y"]
    return point.x, point.y


def get_stroke_bounds(stroke) -> Optional[Bounds]:
    """
    Bounding box of a stroke, grown by the stroke width on every side.
    Returns None when the stroke is missing or has no points.
    """
    points = _points(stroke)
    if not points:
        return None

    min_x = min_y = math.inf
    max_x = max_y = -math.inf
    for p in points:
        x, y = _xy(p)
        min_x = min(min_x, x)
        min_y = min(min_y, y)
        max_x = max(max_x, x)
        max_y = max(max_y, y)

    width = _field(stroke, "width")
    if width is None:
        width = DEFAULT_STROKE_WIDTH

    return Bounds(
        x=min_x - width,
        y=min_y - width,
        w=max_x - min_x + width * 2,
        h=max_y - min_y + width * 2,
    )


def is_point_near_stroke(px: float, py: float, stroke, threshold: Optional[float] = None) -> bool:
    """
    True if (px, py) is within `threshold` of any point of the stroke (inclusive).
    Compares squared distances, so no sqrt per point.
    """
    points = _points(stroke)
    if not points:
        return False

    if threshold is None:
        threshold = DEFAULT_NEAR_THRESHOLD
    threshold_sq = threshold * threshold

    for p in points:
        x, y = _xy(p)
        if distance_squared(px, py, x, y) <= threshold_sq:
            return True
    return False


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.sqrt(distance_squared(x1, y1, x2, y2))


def distance_squared(x1: float, y1: float, x2: float, y2: float) -> float:
    """Squared distance, for comparisons that only need ordering."""
    dx = x2 - x1
    dy = y2 - y1
    return dx * dx + dy * dy


def transform_for_rotation(
    x: float,
    y: float,
    rotation: int,
    screen_width: float,
    screen_height: float,
) -> Tuple[float, float]:
    """
    Maps hardware input coordinates into logical display coordinates.
    `screen_width`/`screen_height` are the current logical (post-rotation) dimensions.
    Unknown rotation codes pass the point through unchanged.
    """
    if isinstance(rotation, bool):
        return x, y
    if rotation == Rotation.UPRIGHT:
        return x, y
    elif rotation == Rotation.CLOCKWISE:
        return screen_width - y, x
    elif rotation == Rotation.UPSIDE_DOWN:
        return screen_width - x, screen_height - y
    elif rotation == Rotation.COUNTER_CLOCKWISE:
        return y, screen_height - x
    # Identity for unvalidated codes coming from the device
    return x, y
