# renderer/raytracer.py
import numpy as np

from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable
from pathtracer.renderer.integrator import MAX_DEPTH, radiance

DEFAULT_SEED = 42


class Renderer:
    """
    Renders a still frame by averaging jittered radiance samples per pixel.

    Every scanline gets its own generator spawned from a single seed sequence,
    so a frame is reproducible from its seed and no random state is shared
    between scanlines.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = 16,
                 max_depth: int = MAX_DEPTH, seed: int = DEFAULT_SEED, verbose: bool = False):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image dimensions must be positive, got {width}x{height}")
        if samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {samples_per_pixel}")

        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.seed = seed
        self.verbose = verbose
        self.frame_buffer = np.zeros((height, width, 3), dtype=np.float32)

    def scanline_generators(self):
        """One independent generator per scanline, top to bottom."""
        children = np.random.SeedSequence(self.seed).spawn(self.height)
        return [np.random.default_rng(child) for child in children]

    def render_pixel(self, x: int, y: int, camera: Camera, world: Hittable,
                     rng: np.random.Generator) -> Vector3:
        """
        Averages samples_per_pixel radiance estimates for pixel (x, y), where
        y = 0 is the top row.
        """
        color = Vector3(0.0, 0.0, 0.0)
        for _ in range(self.samples_per_pixel):
            u = (x + rng.random()) / self.width
            v = 1.0 - (y + rng.random()) / self.height
            ray = camera.get_ray(u, v, rng)
            color = color + radiance(ray, world, self.max_depth, rng)
        return color / self.samples_per_pixel

    def render(self, camera: Camera, world: Hittable) -> np.ndarray:
        """
        Renders the frame and returns the linear colour buffer as a float32
        array of shape (height, width, 3), row 0 at the top.
        """
        if self.verbose:
            print(f"Rendering {self.width}x{self.height}, "
                  f"{self.samples_per_pixel} samples per pixel, max depth {self.max_depth}")

        for y, rng in enumerate(self.scanline_generators()):
            if self.verbose:
                print(f"\rScanlines remaining: {self.height - y} ", end="", flush=True)
            for x in range(self.width):
                color = self.render_pixel(x, y, camera, world, rng)
                self.frame_buffer[y, x] = (color.x, color.y, color.z)

        if self.verbose:
            print("\nDone.")
        return self.frame_buffer.copy()

