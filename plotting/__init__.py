from .vectorizer import (
    shape_to_geometries,
    draw_scene_on_axis,
    save_scene,
)
