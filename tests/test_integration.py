"""End-to-end tests: scenes rendered through the full pipeline and the CLI."""

import hashlib

import numpy as np
import pytest

from lumen.camera.camera import AntiAliasing, Camera
from lumen.main import main, parse_aspect
from lumen.scenes import SCENES, demo_scene, glass_plane_scene, two_sphere_scene


REFERENCE_CHECKSUM = "5da16b1b21afaf003164e8bafd1a4ed13579f6f8e818dc786cb4ffb66a8eb275"


def checksum(pixels: np.ndarray) -> str:
    return hashlib.sha256(pixels.tobytes()).hexdigest()


class TestReferenceScene:
    """The two-sphere scene at 100 px wide, 1 sample, 1 bounce, no jitter."""

    def test_config(self):
        _, config = two_sphere_scene()
        assert config.image_width == 100
        assert config.image_height == 56
        assert config.samples_per_pixel == 1
        assert config.max_depth == 1
        assert config.anti_aliasing is AntiAliasing.NONE

    def test_checksum_independent_of_seed(self):
        world, config = two_sphere_scene()
        config.seed = 1
        first = Camera(config).render(world, progress=False)
        config.seed = 2
        second = Camera(config).render(world, progress=False)
        assert checksum(first) == checksum(second)

    def test_matches_reference_checksum(self):
        world, config = two_sphere_scene()
        pixels = Camera(config).render(world, progress=False)
        assert pixels.shape == (56, 100, 3)
        assert checksum(pixels) == REFERENCE_CHECKSUM

    def test_known_pixels(self):
        world, config = two_sphere_scene()
        pixels = Camera(config).render(world, progress=False)
        # small sphere in the middle, ground at the bottom, sky in the corner
        assert pixels[28, 50].tolist() == [0, 0, 0]
        assert pixels[55, 50].tolist() == [0, 0, 0]
        assert pixels[0, 0].tolist() == [204, 226, 255]

    def test_gradient_brightens_towards_horizon(self):
        world, config = two_sphere_scene()
        pixels = Camera(config).render(world, progress=False)
        # column 0 misses the small sphere; red grows as rays tilt down
        reds = [int(pixels[j, 0, 0]) for j in range(0, 20)]
        assert reds == sorted(reds)

    def test_depth_zero_renders_black(self):
        world, config = two_sphere_scene()
        config.max_depth = 0
        pixels = Camera(config).render(world, progress=False)
        assert not pixels.any()


class TestScenes:
    """Every built-in scene renders at a tiny size."""

    @pytest.mark.parametrize("name", sorted(SCENES))
    def test_small_render(self, name):
        world, config = SCENES[name]()
        config.image_width = 8
        config.samples_per_pixel = 2
        config.max_depth = 4
        config.seed = 3
        pixels = Camera(config).render(world, progress=False)
        assert pixels.shape == (config.image_height, 8, 3)

    def test_demo_scene_contents(self):
        world, config = demo_scene()
        assert len(world) == 7
        assert config.max_depth == 50
        assert config.vertical_fov_degrees == 20.0

    def test_demo_scene_hollow_glass(self):
        world, _ = demo_scene()
        outer, inner = list(world)[2:4]
        assert outer.center == inner.center
        assert inner.radius < outer.radius
        assert outer.material.refractive_index == 1.5
        assert abs(inner.material.refractive_index - 1.0 / 1.5) < 1e-12

    def test_glass_scene_has_defocus(self):
        _, config = glass_plane_scene()
        camera = Camera(config)
        assert camera.defocus_disk_u is not None


class TestCLI:
    """Tests for the command-line entry point."""

    def test_renders_file(self, tmp_path):
        output = tmp_path / "out.ppm"
        code = main(["--scene", "spheres", "--width", "16", "--seed", "3",
                     "--output", str(output), "--quiet"])
        assert code == 0
        lines = output.read_text().splitlines()
        assert lines[:3] == ["P3", "16 9", "255"]
        assert len(lines) == 3 + 16 * 9

    def test_overrides(self, tmp_path):
        output = tmp_path / "out.ppm"
        code = main(["--scene", "demo", "--width", "6", "--aspect", "3:2", "--samples", "1",
                     "--max-depth", "2", "--anti-aliasing", "uniform", "--vfov", "30",
                     "--defocus-angle", "1.0", "--focus-distance", "3.0",
                     "--output", str(output), "--quiet"])
        assert code == 0
        assert output.read_text().startswith("P3\n6 4\n255\n")

    @pytest.mark.parametrize("args", [
        ["--width", "0"],
        ["--samples", "0"],
        ["--max-depth", "-1"],
        ["--focus-distance", "0"],
    ])
    def test_invalid_configuration(self, args, tmp_path):
        output = tmp_path / "out.ppm"
        assert main(["--scene", "spheres", "--quiet", "--output", str(output)] + args) == 1
        assert not output.exists()

    def test_unwritable_output(self, tmp_path):
        output = tmp_path / "missing" / "out.ppm"
        assert main(["--scene", "spheres", "--width", "4", "--quiet",
                     "--output", str(output)]) == 1

    def test_parse_aspect(self):
        assert abs(parse_aspect("16:9") - 16 / 9) < 1e-12
        assert parse_aspect("1.5") == 1.5
        with pytest.raises(Exception):
            parse_aspect("wide")
        with pytest.raises(Exception):
            parse_aspect("4:0")
