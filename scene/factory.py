from __future__ import annotations

import abc
from typing import Optional

from shapes import Shape, Point, Line, Circle

from .registry import Scene, get_scene


class GraphFactory(abc.ABC):
    """
    Creates primitives and registers them into a scene.

    The returned shape is owned by the scene; callers only observe it.
    Subclasses decide the color policy through `colored`.
    """
    colored: bool = True

    def __init__(self, scene: Optional[Scene] = None):
        self.scene = scene if scene is not None else get_scene()

    def _register(self, shape: Shape) -> Shape:
        self.scene.add_object(shape)
        return shape

    @abc.abstractmethod
    def create_point(self, x: float = 0, y: float = 0) -> Shape:
        ...

    @abc.abstractmethod
    def create_line(self, x1: float = 0, y1: float = 0, x2: float = 0, y2: float = 0) -> Shape:
        ...

    @abc.abstractmethod
    def create_circle(self, cx: float = 0, cy: float = 0, r: float = 1) -> Shape:
        ...


class ColorGraphFactory(GraphFactory):
    colored = True

    def create_point(self, x: float = 0, y: float = 0) -> Shape:
        return self._register(Point(x, y, colored=self.colored))

    def create_line(self, x1: float = 0, y1: float = 0, x2: float = 0, y2: float = 0) -> Shape:
        return self._register(Line(x1, y1, x2, y2, colored=self.colored))

    def create_circle(self, cx: float = 0, cy: float = 0, r: float = 1) -> Shape:
        return self._register(Circle(cx, cy, r, colored=self.colored))


class MonochromeGraphFactory(ColorGraphFactory):
    colored = False
