from pydantic import BaseModel
from typing import List, Optional

class Point(BaseModel):
    x: float
    y: float
    p: float = 0.5  # Pressure
    t: float = 0.0  # Timestamp

class Stroke(BaseModel):
    id: Optional[str] = None
    points: List[Point] = []
    color: str = "#000000"
    width: Optional[float] = None  # None -> DEFAULT_STROKE_WIDTH
    completed: bool = True

class Bounds(BaseModel):
    x: float
    y: float
    w: float
    h: float
