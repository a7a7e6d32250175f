# Re-export core geometry API for convenience
from .geometry import (
    FILLED_MARKER,
    Shape,
    Point,
    Line,
    Circle,
    Triangle,
    Composite,
    Filled,
)
from .third_party import ThirdPartyTriangle


