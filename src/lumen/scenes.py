# scenes.py
"""Ready-made worlds, each paired with the camera settings it was composed for."""
import logging
import math
from typing import Callable, Dict, Tuple

from lumen.camera.camera import AntiAliasing, CameraConfig
from lumen.core.vector import Vector3
from lumen.geometry.plane import Plane
from lumen.geometry.sphere import Sphere
from lumen.geometry.world import HittableList
from lumen.materials.dielectric import Dielectric
from lumen.materials.diffuse_light import DiffuseLight, NormalMaterial
from lumen.materials.lambertian import Lambertian
from lumen.materials.metal import Metal

logger = logging.getLogger(__name__)

Scene = Tuple[HittableList, CameraConfig]

GLASS_INDEX = 1.5
WATER_INDEX = 1.33


def two_sphere_scene() -> Scene:
    """A small diffuse sphere resting on a huge ground sphere, seen head-on."""
    world = HittableList()
    world.add(Sphere(Vector3(0, 0, -1), 0.5, Lambertian(Vector3(0.5, 0.5, 0.5))))
    world.add(Sphere(Vector3(0, -100.5, -1), 100, Lambertian(Vector3(0.5, 0.5, 0.5))))

    config = CameraConfig(image_width=100, aspect_ratio=16.0 / 9.0,
                          samples_per_pixel=1, max_depth=1,
                          anti_aliasing=AntiAliasing.NONE)
    logger.debug("two_sphere_scene: %d objects", len(world))
    return world, config


def demo_scene() -> Scene:
    """Diffuse, metal and hollow glass spheres on a yellow ground, with two small accents."""
    world = HittableList()

    ground = Lambertian(Vector3(0.8, 0.8, 0.0))
    center = Lambertian(Vector3(0.1, 0.2, 0.5))
    glass = Dielectric(GLASS_INDEX)
    bubble = Dielectric(1.0 / GLASS_INDEX)
    gold = Metal(Vector3(0.8, 0.6, 0.2), fuzz=0.3)

    world.add(Sphere(Vector3(0.0, -100.5, -1.0), 100.0, ground))
    world.add(Sphere(Vector3(0.0, 0.0, -1.2), 0.5, center))
    world.add(Sphere(Vector3(-1.0, 0.0, -1.0), 0.5, glass))
    world.add(Sphere(Vector3(-1.0, 0.0, -1.0), 0.4, bubble))
    world.add(Sphere(Vector3(1.0, 0.0, -1.0), 0.5, gold))

    r = math.cos(math.pi / 4)
    world.add(Sphere(Vector3(r, 0.0, -0.4), r / 4, Lambertian(Vector3(0.9, 0.0, 0.0))))
    world.add(Sphere(Vector3(-r, 0.0, -0.4), r / 4, Lambertian(Vector3(0.0, 0.0, 0.9))))

    config = CameraConfig(
        image_width=400,
        aspect_ratio=16.0 / 9.0,
        vertical_fov_degrees=20.0,
        look_from=Vector3(-2.0, 2.0, 1.0),
        look_at=Vector3(0.0, 0.0, -1.0),
        defocus_angle=0.0,
        focus_distance=math.sqrt(12.0),
        samples_per_pixel=8,
        max_depth=50,
        anti_aliasing=AntiAliasing.RANDOM,
    )
    logger.debug("demo_scene: %d objects", len(world))
    return world, config


def glass_plane_scene() -> Scene:
    """A glass ball, a chrome ball and a normal-shaded ball on an infinite plane, under a lamp."""
    world = HittableList()
    world.add(Plane(Vector3(0.0, -0.5, 0.0), Lambertian(Vector3(0.2, 0.8, 0.2))))
    world.add(Sphere(Vector3(0.0, 0.0, -1.5), 0.5, Dielectric(WATER_INDEX)))
    world.add(Sphere(Vector3(-1.1, 0.0, -2.0), 0.5, Metal(Vector3(0.9, 0.9, 0.9), fuzz=0.0)))
    world.add(Sphere(Vector3(1.1, 0.0, -2.0), 0.5, NormalMaterial()))
    world.add(Sphere(Vector3(0.0, 3.0, -2.0), 1.0, DiffuseLight(Vector3(2.0, 1.9, 1.8))))

    config = CameraConfig(
        image_width=400,
        aspect_ratio=16.0 / 9.0,
        vertical_fov_degrees=50.0,
        look_from=Vector3(0.0, 0.5, 1.0),
        look_at=Vector3(0.0, 0.0, -1.5),
        defocus_angle=0.6,
        focus_distance=2.55,
        samples_per_pixel=16,
        max_depth=20,
        anti_aliasing=AntiAliasing.UNIFORM,
    )
    logger.debug("glass_plane_scene: %d objects", len(world))
    return world, config


SCENES: Dict[str, Callable[[], Scene]] = {
    "demo": demo_scene,
    "spheres": two_sphere_scene,
    "glass": glass_plane_scene,
}
