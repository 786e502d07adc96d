import math
import random

from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color, Vector3

BLACK = Vector3(0.0, 0.0, 0.0)

# Ignore hits this close to the ray origin (shadow acne).
T_MIN = 0.001


def ray_color(ray: Ray, world, depth: int, background: Color, rng=None) -> Color:
    """
    Monte Carlo estimate of the radiance arriving along ray.

    Each bounce adds the surface's emission to its attenuation times the
    radiance along the scattered ray. The recursion stops after depth
    bounces, contributing black.
    """
    if depth <= 0:
        return BLACK
    rng = rng or random

    rec = world.hit(ray, Interval(T_MIN, math.inf), rng)
    if rec is None:
        return background

    emission = rec.material.emitted(rec.u, rec.v, rec.p)
    scatter = rec.material.scatter(ray, rec, rng)
    if scatter is None:
        return emission

    scattered, attenuation = scatter
    return emission + attenuation * ray_color(scattered, world, depth - 1, background, rng)


def sample_pixel(camera, world, i: int, j: int, rng=None) -> Color:
    """Average of camera.samples_per_pixel estimates for pixel (i, j)."""
    rng = rng or random
    r = g = b = 0.0
    for _ in range(camera.samples_per_pixel):
        ray = camera.get_ray(i, j, rng)
        color = ray_color(ray, world, camera.max_depth, camera.background, rng)
        r += color.x
        g += color.y
        b += color.z
    scale = 1.0 / camera.samples_per_pixel
    return Vector3(r * scale, g * scale, b * scale)
