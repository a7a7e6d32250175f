from __future__ import annotations

import pytest

from scene import ColorGraphFactory, GraphFactory, MonochromeGraphFactory, Scene, get_scene
from shapes import Circle, Line, Point


def test_color_factory_creates_and_registers(scene: Scene):
    factory = ColorGraphFactory(scene)
    p = factory.create_point(10, 20)
    l = factory.create_line(0, 0, 3, 4)
    c = factory.create_circle(50, 50, 25)

    assert isinstance(p, Point) and isinstance(l, Line) and isinstance(c, Circle)
    assert all(s.colored for s in (p, l, c))
    assert scene.objects == (p, l, c)


def test_factory_defaults(scene: Scene):
    factory = ColorGraphFactory(scene)
    assert factory.create_point().draw() == "Color Point (0, 0)"
    assert factory.create_line().draw() == "Color Line (0,0)-(0,0)"
    assert factory.create_circle().draw() == "Color Circle (0,0) r=1"


def test_monochrome_factory_creates_bw_shapes(scene: Scene):
    factory = MonochromeGraphFactory(scene)
    assert factory.create_point(1, 1).draw() == "B/W Point (1, 1)"
    assert factory.create_circle(1, 1, 2).colored is False
    assert len(scene) == 2


def test_factory_defaults_to_process_scene():
    factory = ColorGraphFactory()
    assert factory.scene is get_scene()
    factory.create_point()
    assert len(get_scene()) == 1


def test_abstract_factory_cannot_be_instantiated():
    with pytest.raises(TypeError):
        GraphFactory()
