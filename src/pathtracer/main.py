# main.py
import argparse
import sys
import time

import numpy as np

from pathtracer.geometry.world import build_scene
from pathtracer.renderer.export import save_image
from pathtracer.renderer.raytracer import DEFAULT_SEED, Renderer
from pathtracer.renderer.tone_mapping import quantize
from pathtracer.scenes import SCENES, make_camera, validate_entries

# Samples per pixel and maximum bounce depth for each quality level
QUALITY_LEVELS = {
    "preview": {"samples": 4, "bounces": 8},
    "balanced": {"samples": 32, "bounces": 25},
    "final": {"samples": 100, "bounces": 50},
}

DEFAULT_WIDTH = 400
DEFAULT_ASPECT_RATIO = 16.0 / 9.0


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a scene of spheres with a Monte Carlo path tracer.",
    )
    parser.add_argument("--scene", choices=sorted(SCENES), default="three_spheres",
                        help="Scene to render (default: three_spheres)")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH,
                        help=f"Image width in pixels (default: {DEFAULT_WIDTH})")
    parser.add_argument("--height", type=int, default=None,
                        help="Image height in pixels (default: width / (16/9))")
    parser.add_argument("--quality", choices=list(QUALITY_LEVELS), default="preview",
                        help="Sample and bounce preset (default: preview)")
    parser.add_argument("--samples", type=int, default=None,
                        help="Samples per pixel, overrides --quality")
    parser.add_argument("--max-depth", type=int, default=None,
                        help="Maximum bounce depth, overrides --quality")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED,
                        help=f"Random seed (default: {DEFAULT_SEED})")
    parser.add_argument("--output", type=str, default="image.png",
                        help="Output file path (default: image.png)")
    parser.add_argument("--quiet", action="store_true",
                        help="Suppress progress output")
    return parser.parse_args(argv)


def render_scene(scene: str, width: int, height: int, samples: int, max_depth: int,
                 seed: int = DEFAULT_SEED, verbose: bool = False) -> np.ndarray:
    """
    Build the named scene, render it and return the 8-bit image buffer.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {width}x{height}")

    rng = np.random.default_rng(seed)
    entries, view = SCENES[scene](rng)
    validate_entries(entries)

    world = build_scene(entries)
    camera = make_camera(view, width / height)

    if verbose:
        print(f"Scene '{scene}': {len(world)} spheres")

    renderer = Renderer(width, height, samples_per_pixel=samples,
                        max_depth=max_depth, seed=seed, verbose=verbose)
    return quantize(renderer.render(camera, world))


def main(argv=None) -> int:
    args = parse_args(argv)
    verbose = not args.quiet

    quality = QUALITY_LEVELS[args.quality]
    samples = args.samples if args.samples is not None else quality["samples"]
    max_depth = args.max_depth if args.max_depth is not None else quality["bounces"]
    height = args.height if args.height is not None else max(1, int(args.width / DEFAULT_ASPECT_RATIO))

    try:
        start_time = time.time()
        pixels = render_scene(args.scene, args.width, height, samples, max_depth,
                              seed=args.seed, verbose=verbose)
        save_image(pixels, args.output)
        if verbose:
            print(f"Saved to: {args.output}")
            print(f"Total time: {time.time() - start_time:.2f}s")
        return 0
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
