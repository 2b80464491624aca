import random

from core.math import Vec3, Ray
from core.scene import Scene, RenderSettings
from core.camera import Camera
from renderers.base_renderer import BaseRenderer, RendererFactory

# lower bound on hit t so a scattered ray does not re-hit its own surface
T_MIN = 1e-3

WHITE = Vec3(1.0, 1.0, 1.0)
SKY_BLUE = Vec3(0.5, 0.7, 1.0)
BLACK = Vec3(0.0, 0.0, 0.0)


def sky_color(ray: Ray) -> Vec3:
    """Vertical white-to-blue gradient, on a 0..255 scale."""
    w = 0.5 * (ray.direction.y + 1.0)
    return (WHITE * (1.0 - w) + SKY_BLUE * w) * 255.0


def trace(ray: Ray, scene: Scene, depth: int, rng=random) -> Vec3:
    """Radiance carried back along ``ray``, on a 0..255 scale.

    Each bounce spends one unit of ``depth``; at zero the path contributes
    nothing.
    """
    if depth <= 0:
        return BLACK

    rec = scene.closest_hit(ray, T_MIN, float('inf'))
    if rec is None:
        return sky_color(ray)

    scattered = rec.material.scatter(ray, rec, rng)
    if scattered is None:
        return BLACK

    attenuation, new_ray = scattered
    return attenuation * trace(new_ray, scene, depth - 1, rng)


class CPURenderer(BaseRenderer):
    """Single-threaded recursive path tracer."""

    def __init__(self):
        super().__init__("cpu_raytracer")

    def render_pixel(self, x: int, y: int, scene: Scene, camera: Camera,
                     settings: RenderSettings, rng=random) -> Vec3:
        """Mean of ``samples_per_pixel`` jittered traces through the pixel."""
        # a 1-pixel axis has no span to interpolate across
        u_scale = max(settings.image_width - 1, 1)
        v_scale = max(settings.image_height - 1, 1)

        col = Vec3(0, 0, 0)
        for _ in range(settings.samples_per_pixel):
            u = (x + rng.random()) / u_scale
            v = (y + rng.random()) / v_scale
            ray = camera.get_ray(u, v)
            col += trace(ray, scene, settings.max_depth, rng)

        return col / settings.samples_per_pixel


RendererFactory.register("cpu_raytracer", CPURenderer)
