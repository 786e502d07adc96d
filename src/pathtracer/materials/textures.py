import math
from typing import Optional

import numpy as np

from pathtracer.core.interval import Interval
from pathtracer.core.vector import Color, Vector3

UNIT_INTERVAL = Interval(0.0, 1.0)


class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Vector3) -> Color:
        """Color at surface coordinates (u, v) and world-space point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")


class SolidColor(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Color:
        return self.color


def as_texture(albedo) -> Texture:
    """Wraps a bare color in a SolidColor; textures pass through."""
    if isinstance(albedo, Vector3):
        return SolidColor(albedo)
    return albedo


class CheckerTexture(Texture):
    """
    A 3D checker pattern: cells of size scale alternate between the even and
    odd textures by the parity of floor(x) + floor(y) + floor(z).
    """
    def __init__(self, even: Texture, odd: Texture, scale: float = 1.0):
        if scale == 0:
            raise ValueError("Checker scale must be non-zero")
        self.inv_scale = 1.0 / scale
        self.even = even
        self.odd = odd

    @classmethod
    def from_colors(cls, color1: Color, color2: Color, scale: float = 1.0) -> "CheckerTexture":
        return cls(SolidColor(color1), SolidColor(color2), scale)

    def value(self, u: float, v: float, p: Vector3) -> Color:
        x = math.floor(self.inv_scale * p.x)
        y = math.floor(self.inv_scale * p.y)
        z = math.floor(self.inv_scale * p.z)
        is_even = (x + y + z) % 2 == 0
        return self.even.value(u, v, p) if is_even else self.odd.value(u, v, p)


class ImageTexture(Texture):
    """
    Nearest-pixel lookup into a decoded raster.

    data is a (height, width, 3) array of linear colors in [0, 1]; row 0 is
    the top of the image.
    """
    def __init__(self, data: Optional[np.ndarray]):
        if data is not None:
            data = np.asarray(data, dtype=np.float64)
            if data.ndim != 3 or data.shape[2] < 3:
                raise ValueError(f"Expected a (height, width, 3) raster, got shape {data.shape}")
            self.data = data[:, :, :3].tolist()
            self.height, self.width = data.shape[0], data.shape[1]
        else:
            self.data = None
            self.width = self.height = 0

    @classmethod
    def from_file(cls, image_path: str) -> "ImageTexture":
        from pathtracer.materials.texture_loader import load_image
        return cls(load_image(image_path))

    def value(self, u: float, v: float, p: Vector3) -> Color:
        # Debug cyan makes a missing raster obvious in the render.
        if not self.data:
            return Vector3(0.0, 1.0, 1.0)

        u = UNIT_INTERVAL.clamp(u)
        v = 1.0 - UNIT_INTERVAL.clamp(v)  # Flip V to image row order

        i = min(int(u * self.width), self.width - 1)
        j = min(int(v * self.height), self.height - 1)
        r, g, b = self.data[j][i]
        return Vector3(r, g, b)


class Perlin:
    """
    Gradient lattice noise over 256 random unit vectors and three
    permutation tables, with Hermite-smoothed trilinear interpolation.
    """
    POINT_COUNT = 256

    def __init__(self, seed: Optional[int] = None):
        gen = np.random.default_rng(seed)
        vectors = gen.uniform(-1.0, 1.0, size=(self.POINT_COUNT, 3))
        vectors /= np.linalg.norm(vectors, axis=1, keepdims=True)
        self.randvec = [Vector3(*row) for row in vectors.tolist()]
        self.perm_x = gen.permutation(self.POINT_COUNT).tolist()
        self.perm_y = gen.permutation(self.POINT_COUNT).tolist()
        self.perm_z = gen.permutation(self.POINT_COUNT).tolist()

    def noise(self, p: Vector3) -> float:
        fx, fy, fz = math.floor(p.x), math.floor(p.y), math.floor(p.z)
        u, v, w = p.x - fx, p.y - fy, p.z - fz
        i, j, k = int(fx), int(fy), int(fz)

        uu = u * u * (3 - 2 * u)
        vv = v * v * (3 - 2 * v)
        ww = w * w * (3 - 2 * w)

        accum = 0.0
        for di in range(2):
            px = self.perm_x[(i + di) & 255]
            for dj in range(2):
                py = self.perm_y[(j + dj) & 255]
                for dk in range(2):
                    grad = self.randvec[px ^ py ^ self.perm_z[(k + dk) & 255]]
                    weight = Vector3(u - di, v - dj, w - dk)
                    accum += ((di * uu + (1 - di) * (1 - uu))
                              * (dj * vv + (1 - dj) * (1 - vv))
                              * (dk * ww + (1 - dk) * (1 - ww))
                              * grad.dot(weight))
        return accum

    def turbulence(self, p: Vector3, depth: int = 7) -> float:
        """Sum of depth octaves, each at double frequency and half weight."""
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2
        return abs(accum)


class NoiseTexture(Texture):
    """Marble-like pattern: sine bands along z phase-shifted by turbulence."""
    def __init__(self, scale: float = 1.0, seed: Optional[int] = None):
        self.scale = scale
        self.noise = Perlin(seed)

    def value(self, u: float, v: float, p: Vector3) -> Color:
        shade = 0.5 * (1 + math.sin(self.scale * p.z + 10 * self.noise.turbulence(p, 7)))
        return Vector3(shade, shade, shade)
