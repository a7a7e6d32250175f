import os
from typing import Any, Iterable, List, Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt
from shapely.geometry import LineString, Point as ShapelyPoint, Polygon

from shapes import Shape, Point, Line, Circle, Triangle, Composite, Filled

POINT_RADIUS = 1.0
BW_RGB = np.array([0.0, 0.0, 0.0])
PALETTE = {
    Point: np.array([0.84, 0.15, 0.16]),
    Line: np.array([0.17, 0.63, 0.17]),
    Circle: np.array([0.12, 0.47, 0.71]),
    Triangle: np.array([0.58, 0.40, 0.74]),
}
FORMATS = ("png", "svg")

Patch = Tuple[Any, bool, np.ndarray]


def _rgb_for(shape: Shape) -> np.ndarray:
    if not shape.colored:
        return BW_RGB
    return PALETTE[type(shape)]


def shape_to_geometries(shape: Shape, filled: bool = False) -> List[Patch]:
    """
    Returns a list of tuples [(shapely_geometry, filled, numpy_rgb_color)].
    Composites are flattened in drawing order; Filled marks its component as filled.
    """
    if isinstance(shape, Filled):
        return shape_to_geometries(shape.component, filled=True)

    if isinstance(shape, Composite):
        out: List[Patch] = []
        for child in shape.children:
            out.extend(shape_to_geometries(child, filled=filled))
        return out

    if isinstance(shape, Point):
        geom = ShapelyPoint(shape.x, shape.y).buffer(POINT_RADIUS, resolution=16)
        return [(geom, True, _rgb_for(shape))]
    if isinstance(shape, Line):
        geom = LineString(shape.coords)
    elif isinstance(shape, Circle):
        geom = ShapelyPoint(*shape.center).buffer(shape.r, resolution=64)
    elif isinstance(shape, Triangle):
        geom = Polygon(shape.vertices)
    else:
        raise ValueError(f"Unknown shape {type(shape).__name__}")
    return [(geom, filled, _rgb_for(shape))]


def draw_scene_on_axis(
    ax: plt.Axes,
    shapes: Iterable[Shape]
) -> None:
    """
    Draws the shapes onto a given Matplotlib axis inside a square frame
    fitted to their combined bounds.
    """
    patches = []
    for shape in shapes:
        patches.extend(p for p in shape_to_geometries(shape) if not p[0].is_empty)

    ax.set_aspect('equal')
    ax.axis('off')
    if not patches:
        return

    bounds = np.array([geom.bounds for geom, _, _ in patches])
    minx, miny = bounds[:, 0].min(), bounds[:, 1].min()
    maxx, maxy = bounds[:, 2].max(), bounds[:, 3].max()

    half_side = max(maxx - minx, maxy - miny) / 2 + POINT_RADIUS
    center_x = (minx + maxx) / 2
    center_y = (miny + maxy) / 2
    ax.set_xlim(center_x - half_side, center_x + half_side)
    ax.set_ylim(center_y - half_side, center_y + half_side)

    for geom, filled, rgb in patches:
        rgba = np.append(rgb[:3], 1.0)
        if isinstance(geom, LineString):
            x, y = geom.xy
            ax.plot(x, y, color=rgba, linewidth=1.5)
            continue
        x, y = geom.exterior.xy
        if filled:
            ax.fill(x, y, fc=rgba, ec=rgba, linewidth=0.5, joinstyle='round')
        else:
            ax.plot(x, y, color=rgba, linewidth=1.5)


def save_scene(
    shapes: Iterable[Shape],
    filename: str,
    format: Optional[str] = None,
    dpi: int = 150,
) -> str:
    """
    Saves the shapes (a Scene or any iterable of shapes) as PNG or SVG.
    The format defaults to the filename extension.
    """
    if format is None:
        format = os.path.splitext(filename)[1].lstrip(".").lower()
    if format not in FORMATS:
        raise ValueError(f"Unsupported export format {format!r}, expected one of {FORMATS}")

    fig, ax = plt.subplots(figsize=(6, 6))
    try:
        draw_scene_on_axis(ax, list(shapes))
        out_dir = os.path.dirname(filename)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        fig.savefig(
            filename,
            format=format,
            dpi=dpi,
            bbox_inches='tight',
            facecolor='white'
        )
    finally:
        plt.close(fig)
    return filename
