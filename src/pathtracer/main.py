# main.py
import argparse
import logging
import sys
import time

from pathtracer.config import QUALITY_LEVELS, RenderConfig
from pathtracer.renderer import RenderError, Renderer, write_image
from pathtracer.scenes import SCENES, build_scene

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pathtracer",
                                     description="Render a demo scene to an image file.")
    parser.add_argument("--scene", default="cornell_box", choices=sorted(SCENES))
    parser.add_argument("--output", default="image.png", help="Output image path (format from extension)")
    parser.add_argument("--quality", choices=list(QUALITY_LEVELS),
                        help="Preset for samples per pixel and bounce depth")
    parser.add_argument("--width", type=int, help="Image width in pixels")
    parser.add_argument("--samples", type=int, help="Samples per pixel")
    parser.add_argument("--depth", type=int, help="Maximum bounce depth")
    parser.add_argument("--workers", type=int, help="Worker processes (default: 3/4 of the CPUs)")
    parser.add_argument("--seed", type=int, help="Seed for a reproducible image")
    parser.add_argument("--texture", help="Earth map image for the earth and final_scene scenes")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log per-batch progress")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
    return parser.parse_args(argv)


def log_level(args: argparse.Namespace) -> int:
    if args.verbose:
        return logging.DEBUG
    if args.quiet:
        return logging.WARNING
    return logging.INFO


def run(config: RenderConfig) -> None:
    camera, world = build_scene(config.scene, seed=config.seed, texture_path=config.texture)
    config.apply(camera)
    camera.initialize()

    renderer = Renderer(camera, world, workers=config.workers, seed=config.seed)
    start = time.perf_counter()
    pixels = renderer.render()
    write_image(config.output, pixels, renderer.width, renderer.height)
    logger.info("Finished %s in %.2fs", config.scene, time.perf_counter() - start)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=log_level(args),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        run(RenderConfig.from_args(args))
    except (ValueError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        return 2
    except RenderError as exc:
        logger.error("Render failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
