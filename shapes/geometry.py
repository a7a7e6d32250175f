from __future__ import annotations

import sys
from typing import Iterable, Iterator, Optional, Tuple

import numpy as np

from .third_party import ThirdPartyTriangle, fmt_number


FILLED_MARKER = "   >>> This graphic object is filled! <<<"


def _as_coords(*values: float) -> np.ndarray:
    try:
        coords = np.array(values, dtype=float)
    except (TypeError, ValueError) as e:
        raise ValueError(f"coordinates must be real numbers, got {values!r}") from e
    if not np.all(np.isfinite(coords)):
        raise ValueError(f"coordinates must be finite, got {values!r}")
    return coords


class Shape:
    def __init__(self, colored: bool = True):
        self.colored = bool(colored)

    def clone(self) -> "Shape":
        raise NotImplementedError

    def draw(self) -> str:
        raise NotImplementedError

    def size(self) -> int:
        raise NotImplementedError

    @property
    def color_label(self) -> str:
        return "Color" if self.colored else "B/W"

    def show(self, file=None) -> str:
        """
        Print draw() to file (stdout by default) and return the text.
        """
        text = self.draw()
        print(text, file=file if file is not None else sys.stdout)
        return text

    # ---- Composition DSL ----
    def filled(self) -> "Filled":
        return Filled(self)

    def __or__(self, other: "Shape") -> "Composite":
        return Composite(children=(self, other))


class Point(Shape):
    def __init__(self, x: float = 0, y: float = 0, colored: bool = True):
        super().__init__(colored)
        self.coords = _as_coords(x, y)

    @property
    def x(self) -> float:
        return float(self.coords[0])

    @property
    def y(self) -> float:
        return float(self.coords[1])

    def clone(self) -> "Point":
        return Point(self.x, self.y, colored=self.colored)

    def draw(self) -> str:
        return f"{self.color_label} Point ({fmt_number(self.x)}, {fmt_number(self.y)})"

    def size(self) -> int:
        return sys.getsizeof(self) + self.coords.nbytes


class Line(Shape):
    def __init__(self, x1: float = 0, y1: float = 0, x2: float = 0, y2: float = 0, colored: bool = True):
        super().__init__(colored)
        # rows: start, end
        self.coords = _as_coords(x1, y1, x2, y2).reshape(2, 2)

    def clone(self) -> "Line":
        (x1, y1), (x2, y2) = self.coords
        return Line(x1, y1, x2, y2, colored=self.colored)

    def draw(self) -> str:
        (x1, y1), (x2, y2) = self.coords
        return (
            f"{self.color_label} Line ({fmt_number(x1)},{fmt_number(y1)})"
            f"-({fmt_number(x2)},{fmt_number(y2)})"
        )

    def size(self) -> int:
        return sys.getsizeof(self) + self.coords.nbytes


class Circle(Shape):
    def __init__(self, cx: float = 0, cy: float = 0, r: float = 1, colored: bool = True):
        super().__init__(colored)
        self.center = _as_coords(cx, cy)
        self.r = float(_as_coords(r)[0])

    def clone(self) -> "Circle":
        return Circle(self.center[0], self.center[1], self.r, colored=self.colored)

    def draw(self) -> str:
        cx, cy = self.center
        return f"{self.color_label} Circle ({fmt_number(cx)},{fmt_number(cy)}) r={fmt_number(self.r)}"

    def size(self) -> int:
        return sys.getsizeof(self) + self.center.nbytes


class Triangle(Shape):
    """
    Adapter: exposes a ThirdPartyTriangle through the Shape interface.
    The foreign renderer is owned exclusively and never shared between clones.
    """
    def __init__(self, x1: float = 0, y1: float = 0,
                 x2: float = 0, y2: float = 0,
                 x3: float = 0, y3: float = 0,
                 colored: bool = True):
        super().__init__(colored)
        coords = _as_coords(x1, y1, x2, y2, x3, y3)
        self._triangle = ThirdPartyTriangle(*coords)

    @property
    def vertices(self) -> np.ndarray:
        return self._triangle.vertices

    def clone(self) -> "Triangle":
        return Triangle(*self.vertices.ravel(), colored=self.colored)

    def draw(self) -> str:
        return f"{self.color_label} {self._triangle.render()}"

    def size(self) -> int:
        return sys.getsizeof(self) + sys.getsizeof(self._triangle) + self.vertices.nbytes


class Composite(Shape):
    def __init__(self, colored: bool = True, children: Iterable[Optional[Shape]] = ()):
        super().__init__(colored)
        self._children: list[Shape] = []
        for ch in children:
            self.add(ch)

    def add(self, shape: Optional[Shape]) -> Optional[Shape]:
        if shape is not None:
            self._children.append(shape)
        return shape

    @property
    def children(self) -> Tuple[Shape, ...]:
        return tuple(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.children)

    def clone(self) -> "Composite":
        return Composite(self.colored, children=[ch.clone() for ch in self._children])

    def draw(self) -> str:
        lines = [f"Composite (contains {len(self._children)} elements):"]
        lines.extend(ch.draw() for ch in self._children)
        return "\n".join(lines)

    def size(self) -> int:
        return sys.getsizeof(self)


class Filled(Shape):
    """
    Decorator marking a shape as filled. Takes ownership of the wrapped shape;
    callers hand it over and stop using it directly.
    """
    def __init__(self, shape: Shape):
        if shape is None:
            raise ValueError("Filled requires a shape to wrap")
        super().__init__(shape.colored)
        self.component = shape

    def clone(self) -> "Filled":
        return Filled(self.component.clone())

    def draw(self) -> str:
        return f"{self.component.draw()}\n{FILLED_MARKER}"

    def size(self) -> int:
        return sys.getsizeof(self)
