from __future__ import annotations

import argparse
import logging

from shapes import Composite, Point, Circle
from scene import (
    ColorGraphFactory,
    MonochromeGraphFactory,
    FacadeConfig,
    GraphicsFacade,
    get_scene,
)

DEFAULT_COMMAND = "P 10,20; C 50,50,25; T 0,0,100,0,50,80; F"


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Build a scene from a command string and print it.")
    p.add_argument("command", nargs="?", default=DEFAULT_COMMAND,
                   help=f'semicolon-separated instructions (default: "{DEFAULT_COMMAND}")')
    p.add_argument("--bw", action="store_true", help="create black/white shapes instead of colored ones")
    p.add_argument("--discard-pending", action="store_true",
                   help="drop an unfilled triangle when another T replaces it (default: register it)")
    p.add_argument("--out", type=str, default="", help="also export the scene to this .png or .svg file")
    p.add_argument("--demo-composite", action="store_true", help="print a directly built composite afterwards")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p.parse_args(argv)


def demo_composite() -> Composite:
    group = Composite()
    group.add(Point(1, 1))
    group.add(Circle(5, 5, 10))
    return group


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    scene = get_scene()
    factory = MonochromeGraphFactory(scene) if args.bw else ColorGraphFactory(scene)
    config = FacadeConfig(pending_policy="discard" if args.discard_pending else "register")
    facade = GraphicsFacade(factory, config)

    print(f"Facade query-string: {args.command}\n")
    facade.build_scene_from_string(args.command)
    scene.draw_all()

    if args.out:
        from plotting import save_scene
        print(f"Saved: {save_scene(scene, args.out)}")

    if args.demo_composite:
        print("=== Composite demonstration ===")
        demo_composite().show()


if __name__ == "__main__":
    main()
