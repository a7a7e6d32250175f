from __future__ import annotations

import pytest

from scene import Scene, ColorGraphFactory, GraphicsFacade, reset_scene


@pytest.fixture(autouse=True)
def _fresh_global_scene():
    reset_scene()
    yield
    reset_scene()


@pytest.fixture
def scene() -> Scene:
    return Scene()


@pytest.fixture
def facade(scene: Scene) -> GraphicsFacade:
    return GraphicsFacade(ColorGraphFactory(scene))
