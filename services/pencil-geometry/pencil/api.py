from fastapi import APIRouter
from pydantic import BaseModel
from typing import Any, List, Optional
import logging
from .ingestion.models import Stroke, Point, Bounds
from .stroke_engine.geometry import (
    get_stroke_bounds,
    distance,
    distance_squared,
    transform_for_rotation,
)
from .stroke_engine.hit_test import strokes_near_point, erase_at, union_bounds, nearest_stroke
from .config import eraser_threshold

logger = logging.getLogger("pencil.api")

router = APIRouter(prefix="/api/v1/pencil", tags=["pencil"])

class StrokesRequest(BaseModel):
    strokes: List[Stroke]

class BoundsResponse(BaseModel):
    bounds: List[Optional[Bounds]]  # One entry per stroke, null for empty strokes
    region: Optional[Bounds] = None

class HitTestRequest(BaseModel):
    x: float
    y: float
    strokes: List[Stroke]
    threshold: Optional[float] = None

class TransformRequest(BaseModel):
    points: List[Point]
    rotation: Any = None  # Unvalidated device code; unknown values map to identity
    screen_width: float
    screen_height: float

class DistanceRequest(BaseModel):
    x1: float
    y1: float
    x2: float
    y2: float

@router.post("/bounds", response_model=BoundsResponse)
async def stroke_bounds(request: StrokesRequest):
    """
    Bounding box of each stroke plus the combined redraw region.
    """
    return BoundsResponse(
        bounds=[get_stroke_bounds(s) for s in request.strokes],
        region=union_bounds(request.strokes),
    )

@router.post("/hit-test")
async def hit_test(request: HitTestRequest):
    threshold = request.threshold if request.threshold is not None else eraser_threshold()
    hits = strokes_near_point(request.x, request.y, request.strokes, threshold)
    nearest = nearest_stroke(request.x, request.y, request.strokes)

    logger.debug("Hit test at (%s, %s): %d hits", request.x, request.y, len(hits))
    return {
        "hit_ids": [s.id for s in hits],
        "nearest_id": nearest.id if nearest else None,
    }

@router.post("/erase")
async def erase(request: HitTestRequest):
    """
    Removes every stroke the eraser touches and returns what remains.
    """
    threshold = request.threshold if request.threshold is not None else eraser_threshold()
    kept, erased = erase_at(request.x, request.y, request.strokes, threshold)

    logger.info("Erase: %d kept, %d erased", len(kept), len(erased))
    return {
        "strokes": kept,
        "erased_ids": [s.id for s in erased],
        "region": union_bounds(erased),
    }

@router.post("/transform")
async def transform_points(request: TransformRequest):
    points = []
    for p in request.points:
        x, y = transform_for_rotation(p.x, p.y, request.rotation, request.screen_width, request.screen_height)
        points.append(Point(x=x, y=y, p=p.p, t=p.t))
    return {"points": points}

@router.post("/distance")
async def point_distance(request: DistanceRequest):
    return {
        "distance": distance(request.x1, request.y1, request.x2, request.y2),
        "distance_squared": distance_squared(request.x1, request.y1, request.x2, request.y2),
    }
