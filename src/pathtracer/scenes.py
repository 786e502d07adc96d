"""
Demo scenes. Each builder returns a configured Camera and the root of the
world to render.
"""
import inspect
import logging
import os
import random
from typing import Callable, Dict, Optional, Tuple

from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Color, Point3, Vector3
from pathtracer.geometry import (
    BVHNode,
    ConstantMedium,
    Hittable,
    HittableList,
    Quad,
    RotateY,
    Sphere,
    Translate,
    make_box,
)
from pathtracer.materials import (
    CheckerTexture,
    Dielectric,
    DiffuseLight,
    ImageTexture,
    Lambertian,
    Metal,
    NoiseTexture,
)

logger = logging.getLogger(__name__)

Scene = Tuple[Camera, Hittable]

DEFAULT_EARTH_TEXTURE = os.path.join("misc", "earthmap.png")


def _camera(aspect_ratio: float, width: int, samples: int, vfov: float,
            look_from: Point3, look_at: Point3, background: Color,
            depth: int = 50, defocus_angle: float = 0.0, focus_dist: float = 10.0) -> Camera:
    camera = Camera()
    camera.set_aspect_ratio(aspect_ratio)
    camera.set_image_width(width)
    camera.set_samples_per_pixel(samples)
    camera.set_max_depth(depth)
    camera.set_background(background)
    camera.set_vfov(vfov)
    camera.set_look_from(look_from)
    camera.set_look_at(look_at)
    camera.set_vup(Vector3(0, 1, 0))
    camera.set_defocus_angle(defocus_angle)
    camera.set_focus_dist(focus_dist)
    return camera


def _earth_texture(path: Optional[str]) -> ImageTexture:
    """
    Load the earth map. An explicit path must exist; the default one falls
    back to the debug color when absent.
    """
    if path is not None:
        return ImageTexture.from_file(path)
    path = DEFAULT_EARTH_TEXTURE
    if not os.path.exists(path):
        logger.warning("Earth texture %s not found, rendering it in debug cyan; pass --texture to choose one", path)
        return ImageTexture(None)
    return ImageTexture.from_file(path)


def bouncing_spheres(seed: Optional[int] = None) -> Scene:
    """Ground plane with a grid of small random spheres, some in motion."""
    rng = random.Random(seed)
    world = HittableList()

    checker = CheckerTexture.from_colors(Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9), 0.32)
    world.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(checker)))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Point3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = Vector3.random(rng) * Vector3.random(rng)
                center2 = center + Vector3(0, rng.uniform(0, 0.5), 0)
                world.add(Sphere.moving(center, center2, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                albedo = Vector3.random(rng, 0.5, 1)
                fuzz = rng.uniform(0, 0.5)
                world.add(Sphere(center, 0.2, Metal(albedo, fuzz)))
            else:
                world.add(Sphere(center, 0.2, Dielectric(1.5)))

    world.add(Sphere(Point3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))

    camera = _camera(16 / 9, 400, 100, 20, Point3(13, 2, 3), Point3(0, 0, 0),
                     Color(0.7, 0.8, 1.0), defocus_angle=0.6, focus_dist=10.0)
    return camera, BVHNode.from_list(world)


def checkered_spheres() -> Scene:
    world = HittableList()
    checker = CheckerTexture.from_colors(Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9), 0.32)
    world.add(Sphere(Point3(0, -10, 0), 10, Lambertian(checker)))
    world.add(Sphere(Point3(0, 10, 0), 10, Lambertian(checker)))

    camera = _camera(16 / 9, 400, 100, 20, Point3(13, 2, 3), Point3(0, 0, 0),
                     Color(0.7, 0.8, 1.0))
    return camera, BVHNode.from_list(world)


def earth(texture_path: Optional[str] = None) -> Scene:
    globe = Sphere(Point3(0, 0, 0), 2, Lambertian(_earth_texture(texture_path)))
    camera = _camera(16 / 9, 400, 100, 20, Point3(0, 0, 12), Point3(0, 0, 0),
                     Color(0.7, 0.8, 1.0))
    return camera, BVHNode.from_list([globe])


def perlin_spheres(seed: Optional[int] = None) -> Scene:
    world = HittableList()
    pertext = NoiseTexture(4, seed=seed)
    world.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(pertext)))
    world.add(Sphere(Point3(0, 2, 0), 2, Lambertian(pertext)))

    camera = _camera(16 / 9, 400, 100, 20, Point3(13, 2, 3), Point3(0, 0, 0),
                     Color(0.7, 0.8, 1.0))
    return camera, BVHNode.from_list(world)


def quads() -> Scene:
    world = HittableList()

    left_red = Lambertian(Color(1.0, 0.2, 0.2))
    back_green = Lambertian(Color(0.2, 1.0, 0.2))
    right_blue = Lambertian(Color(0.2, 0.2, 1.0))
    upper_orange = Lambertian(Color(1.0, 0.5, 0.0))
    lower_teal = Lambertian(Color(0.2, 0.8, 0.8))

    world.add(Quad(Point3(-3, -2, 5), Vector3(0, 0, -4), Vector3(0, 4, 0), left_red))
    world.add(Quad(Point3(-2, -2, 0), Vector3(4, 0, 0), Vector3(0, 4, 0), back_green))
    world.add(Quad(Point3(3, -2, 1), Vector3(0, 0, 4), Vector3(0, 4, 0), right_blue))
    world.add(Quad(Point3(-2, 3, 1), Vector3(4, 0, 0), Vector3(0, 0, 4), upper_orange))
    world.add(Quad(Point3(-2, -3, 5), Vector3(4, 0, 0), Vector3(0, 0, -4), lower_teal))

    camera = _camera(1.0, 400, 100, 80, Point3(0, 0, 9), Point3(0, 0, 0),
                     Color(0.7, 0.8, 1.0))
    return camera, BVHNode.from_list(world)


def simple_light(seed: Optional[int] = None) -> Scene:
    world = HittableList()
    pertext = NoiseTexture(4, seed=seed)
    world.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(pertext)))
    world.add(Sphere(Point3(0, 2, 0), 2, Lambertian(pertext)))

    difflight = DiffuseLight(Color(4, 4, 4))
    world.add(Sphere(Point3(0, 7, 0), 2, difflight))
    world.add(Quad(Point3(3, 1, -2), Vector3(2, 0, 0), Vector3(0, 2, 0), difflight))

    camera = _camera(16 / 9, 400, 100, 20, Point3(26, 3, 6), Point3(0, 2, 0),
                     Color(0, 0, 0))
    return camera, BVHNode.from_list(world)


def _cornell_walls(light: DiffuseLight, light_corner: Point3,
                   light_u: Vector3, light_v: Vector3) -> Tuple[HittableList, Lambertian]:
    world = HittableList()

    red = Lambertian(Color(0.65, 0.05, 0.05))
    white = Lambertian(Color(0.73, 0.73, 0.73))
    green = Lambertian(Color(0.12, 0.45, 0.15))

    world.add(Quad(Point3(555, 0, 0), Vector3(0, 555, 0), Vector3(0, 0, 555), green))
    world.add(Quad(Point3(0, 0, 0), Vector3(0, 555, 0), Vector3(0, 0, 555), red))
    world.add(Quad(light_corner, light_u, light_v, light))
    world.add(Quad(Point3(0, 0, 0), Vector3(555, 0, 0), Vector3(0, 0, 555), white))
    world.add(Quad(Point3(555, 555, 555), Vector3(-555, 0, 0), Vector3(0, 0, -555), white))
    world.add(Quad(Point3(0, 0, 555), Vector3(555, 0, 0), Vector3(0, 555, 0), white))
    return world, white


def _cornell_blocks(white: Lambertian) -> Tuple[Hittable, Hittable]:
    box1 = make_box(Point3(0, 0, 0), Point3(165, 330, 165), white)
    box1 = Translate(RotateY(box1, 15), Vector3(265, 0, 295))

    box2 = make_box(Point3(0, 0, 0), Point3(165, 165, 165), white)
    box2 = Translate(RotateY(box2, -18), Vector3(130, 0, 65))
    return box1, box2


def _cornell_camera(samples: int = 200) -> Camera:
    return _camera(1.0, 600, samples, 40, Point3(278, 278, -800), Point3(278, 278, 0),
                   Color(0, 0, 0))


def cornell_box() -> Scene:
    world, white = _cornell_walls(DiffuseLight(Color(15, 15, 15)),
                                  Point3(343, 554, 332), Vector3(-130, 0, 0), Vector3(0, 0, -105))
    box1, box2 = _cornell_blocks(white)
    world.add(box1)
    world.add(box2)
    return _cornell_camera(), BVHNode.from_list(world)


def cornell_smoke() -> Scene:
    world, white = _cornell_walls(DiffuseLight(Color(7, 7, 7)),
                                  Point3(113, 554, 127), Vector3(330, 0, 0), Vector3(0, 0, 305))
    box1, box2 = _cornell_blocks(white)
    world.add(ConstantMedium.from_color(box1, 0.01, Color(0, 0, 0)))
    world.add(ConstantMedium.from_color(box2, 0.01, Color(1, 1, 1)))
    return _cornell_camera(), BVHNode.from_list(world)


def final_scene(seed: Optional[int] = None, texture_path: Optional[str] = None) -> Scene:
    """Everything at once: boxes, lights, motion blur, glass, fog, textures."""
    rng = random.Random(seed)

    boxes1 = HittableList()
    ground = Lambertian(Color(0.48, 0.83, 0.53))
    boxes_per_side = 20
    for i in range(boxes_per_side):
        for j in range(boxes_per_side):
            w = 100.0
            x0 = -1000.0 + i * w
            z0 = -1000.0 + j * w
            y1 = rng.uniform(1, 101)
            boxes1.add(make_box(Point3(x0, 0.0, z0), Point3(x0 + w, y1, z0 + w), ground))

    world = HittableList()
    world.add(BVHNode.from_list(boxes1))

    light = DiffuseLight(Color(7, 7, 7))
    world.add(Quad(Point3(123, 554, 147), Vector3(300, 0, 0), Vector3(0, 0, 265), light))

    center1 = Point3(400, 400, 200)
    center2 = center1 + Vector3(30, 0, 0)
    world.add(Sphere.moving(center1, center2, 50, Lambertian(Color(0.7, 0.3, 0.1))))

    world.add(Sphere(Point3(260, 150, 45), 50, Dielectric(1.5)))
    world.add(Sphere(Point3(0, 150, 145), 50, Metal(Color(0.8, 0.8, 0.9), 1.0)))

    boundary = Sphere(Point3(360, 150, 145), 70, Dielectric(1.5))
    world.add(boundary)
    world.add(ConstantMedium.from_color(boundary, 0.2, Color(0.2, 0.4, 0.9)))
    boundary = Sphere(Point3(0, 0, 0), 5000, Dielectric(1.5))
    world.add(ConstantMedium.from_color(boundary, 0.0001, Color(1, 1, 1)))

    world.add(Sphere(Point3(400, 200, 400), 100, Lambertian(_earth_texture(texture_path))))
    world.add(Sphere(Point3(220, 280, 300), 80, Lambertian(NoiseTexture(0.2, seed=seed))))

    boxes2 = HittableList()
    white = Lambertian(Color(0.73, 0.73, 0.73))
    for _ in range(1000):
        boxes2.add(Sphere(Vector3.random(rng, 0, 165), 10, white))
    world.add(Translate(RotateY(BVHNode.from_list(boxes2), 15), Vector3(-100, 270, 395)))

    camera = _camera(1.0, 800, 10000, 40, Point3(478, 278, -600), Point3(278, 278, 0),
                     Color(0, 0, 0))
    return camera, BVHNode.from_list(world)


SCENES: Dict[str, Callable[..., Scene]] = {
    "bouncing_spheres": bouncing_spheres,
    "checkered_spheres": checkered_spheres,
    "earth": earth,
    "perlin_spheres": perlin_spheres,
    "quads": quads,
    "simple_light": simple_light,
    "cornell_box": cornell_box,
    "cornell_smoke": cornell_smoke,
    "final_scene": final_scene,
}


def build_scene(name: str, **kwargs) -> Scene:
    """
    Build a registered scene. Keyword arguments a builder does not take
    (a seed for a fixed scene, say) are ignored.
    """
    try:
        builder = SCENES[name]
    except KeyError:
        raise ValueError(f"Unknown scene {name!r}; choose from {', '.join(SCENES)}") from None
    accepted = inspect.signature(builder).parameters
    camera, world = builder(**{k: v for k, v in kwargs.items() if k in accepted})
    logger.info("Built scene %s", name)
    return camera, world
