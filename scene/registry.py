from __future__ import annotations

import logging
import sys
import threading
from typing import Iterator, Optional, Tuple

from shapes import Shape

logger = logging.getLogger(__name__)

HEADER = "=== What the scene contains ==="
FOOTER = "========================"


class Scene:
    """
    Root owner of every top-level shape.

    Shapes handed to add_object belong to the scene from then on; clear()
    forgets all of them (nested shapes go with their composite/decorator).
    All operations share one lock so clear/add/draw never interleave.
    """

    def __init__(self):
        self._objects: list[Shape] = []
        self._lock = threading.RLock()

    def add_object(self, shape: Optional[Shape]) -> Optional[Shape]:
        if shape is None:
            return None
        with self._lock:
            self._objects.append(shape)
            logger.debug("registered %s (%d objects)", type(shape).__name__, len(self._objects))
        return shape

    @property
    def objects(self) -> Tuple[Shape, ...]:
        with self._lock:
            return tuple(self._objects)

    def __len__(self) -> int:
        with self._lock:
            return len(self._objects)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.objects)

    def draw_all(self, file=None) -> str:
        """
        Print every shape between the scene header and footer.

        Args:
            file: Stream to write to (stdout when None).

        Returns:
            The printed text.
        """
        with self._lock:
            lines = [HEADER]
            lines.extend(obj.draw() for obj in self._objects)
        lines.extend([FOOTER, ""])
        text = "\n".join(lines)
        print(text, file=file if file is not None else sys.stdout)
        return text

    def clear(self) -> None:
        with self._lock:
            if self._objects:
                logger.debug("clearing %d objects", len(self._objects))
            self._objects.clear()


_scene: Optional[Scene] = None
_scene_lock = threading.Lock()


def get_scene() -> Scene:
    """Process-wide scene, created on first access."""
    global _scene
    with _scene_lock:
        if _scene is None:
            _scene = Scene()
        return _scene


def reset_scene() -> None:
    """Drop the process-wide scene so the next get_scene() starts fresh."""
    global _scene
    with _scene_lock:
        if _scene is not None:
            _scene.clear()
        _scene = None
