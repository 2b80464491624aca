import sys
import logging
import argparse
from core.scene import RenderSettings
from scene_builders.default_scene_builder import DefaultSceneBuilder
from renderers.base_renderer import RendererFactory

# imported for its registration side effect
import renderers.cpu_renderer  # noqa: F401

logger = logging.getLogger(__name__)

_defaults = RenderSettings()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Monte Carlo sphere ray tracer')
    parser.add_argument('--renderer', '-r',
                        choices=RendererFactory.list_available(),
                        default='cpu_raytracer',
                        help='renderer to use')
    parser.add_argument('--height', type=int, default=_defaults.image_height,
                        help='image height in pixels (width follows the aspect ratio)')
    parser.add_argument('--aspect', type=float, default=_defaults.aspect_ratio,
                        help='image and viewport aspect ratio (width / height)')
    parser.add_argument('--samples', '-s', type=int, default=_defaults.samples_per_pixel,
                        help='samples per pixel')
    parser.add_argument('--depth', '-d', type=int, default=_defaults.max_depth,
                        help='maximum bounce depth')
    parser.add_argument('--seed', type=int, default=None,
                        help='random seed for a reproducible render')
    parser.add_argument('--output', '-o', default='output.ppm',
                        help='output file (.ppm is written as plain text, '
                             'other extensions go through Pillow)')
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('--verbose', '-v', action='store_true',
                           help='log per-scanline progress')
    verbosity.add_argument('--quiet', '-q', action='store_true',
                           help='only log warnings and errors')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(level=level,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    try:
        settings = RenderSettings(
            aspect_ratio=args.aspect,
            image_height=args.height,
            samples_per_pixel=args.samples,
            max_depth=args.depth,
            seed=args.seed,
        )
    except ValueError as e:
        logger.error("Invalid render settings: %s", e)
        return 2

    scene_builder = DefaultSceneBuilder()
    scene = scene_builder.build_scene()
    camera = scene_builder.create_camera(settings)

    renderer = RendererFactory.create(args.renderer)
    logger.info("Renderer: %s", renderer.get_name())

    image = renderer.render(scene, camera, settings)

    try:
        image.save(args.output)
    except OSError as e:
        logger.error("Could not write %s: %s", args.output, e)
        return 1

    logger.info("Image saved: %s", args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
