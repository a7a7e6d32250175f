from __future__ import annotations

import build_scene
from scene import get_scene
from shapes import FILLED_MARKER


def test_default_run_prints_query_and_scene(capsys):
    build_scene.main([])
    out = capsys.readouterr().out
    assert out.startswith(f"Facade query-string: {build_scene.DEFAULT_COMMAND}\n\n")
    assert "Color Point (10, 20)\nColor Circle (50,50) r=25\n" in out
    assert FILLED_MARKER in out
    assert len(get_scene()) == 3


def test_bw_flag_and_composite_demo(capsys):
    build_scene.main(["P 1,2", "--bw", "--demo-composite"])
    out = capsys.readouterr().out
    assert "B/W Point (1, 2)" in out
    assert out.rstrip().endswith(
        "=== Composite demonstration ===\n"
        "Composite (contains 2 elements):\n"
        "Color Point (1, 1)\n"
        "Color Circle (5,5) r=10"
    )


def test_discard_pending_flag():
    build_scene.main(["T 0,0,1,0,0,1; T 1,1,2,1,1,2", "--discard-pending"])
    assert len(get_scene()) == 1
