# tests/test_baker.py

import json
import os

import numpy as np
from PIL import Image

from pixel_planet import NoiseMode, Palette, Planet, SeededRandom
from pixel_planet.baker import bake_frames, save_texture, texture_to_image
from pixel_planet.runtime import Scene

from bake_scene import bake_scene
from conftest import BLUE, RED


def make_scene():
    planet = Planet(8, NoiseMode.SIMPLEX, Palette([RED, BLUE], [1, 1]), SeededRandom(0.1), offset=(8, 8))
    return Scene([planet], width=16, height=16, background=(0, 0, 0))


def test_texture_image_matches_grid():
    planet = Planet(8, NoiseMode.SIMPLEX, Palette([None, BLUE], [1, 1]), SeededRandom(0.1))
    pixels = np.array(texture_to_image(planet))
    assert pixels.shape == (8, 16, 4)
    texture = planet.grid.to_array()
    assert (pixels[..., 3] == np.where(texture == 1, 255, 0)).all()
    assert (pixels[texture == 1][:, :3] == BLUE).all()


def test_save_texture(tmp_path):
    planet = make_scene().planets[0]
    path = save_texture(planet, str(tmp_path / "textures" / "planet.png"))
    with Image.open(path) as image:
        assert image.size == (16, 8)
        assert image.mode == 'RGBA'


def test_bake_frames(tmp_path):
    scene = make_scene()
    paths = bake_frames(scene, 3, str(tmp_path), start_frame=10, show_progress=False)
    assert [os.path.basename(p) for p in paths] == ["frame_00010.png", "frame_00011.png", "frame_00012.png"]
    for path in paths:
        with Image.open(path) as image:
            assert image.size == (16, 16)
            # The planet covers the centre pixel.
            assert image.getpixel((8, 8)) in (RED, BLUE)


def write_config(tmp_path):
    config = {
        "seed": 0.3,
        "canvas": {"width": 24, "height": 24},
        "planets": [{"diameter": 8, "palette": "desert"}, {"diameter": 10, "palette": "clouds", "noise_mode": "RIDGED"}],
        "satellites": [{"diameter": 2, "color": "white"}],
    }
    path = tmp_path / "scene.json"
    path.write_text(json.dumps(config))
    return str(path)


def test_bake_scene_script(tmp_path):
    out = tmp_path / "out"
    paths = bake_scene(write_config(tmp_path), 2, str(out), show_progress=False)
    assert [os.path.basename(p) for p in paths] == ["frame_00000.png", "frame_00001.png"]
    assert sorted(os.listdir(out / "textures")) == ["planet_0.png", "planet_1.png"]
    with Image.open(paths[0]) as image:
        assert image.size == (24, 24)


def test_bake_scene_missing_config(tmp_path):
    assert bake_scene(str(tmp_path / "missing.json"), 1, str(tmp_path / "out"), show_progress=False) is None
    assert not (tmp_path / "out").exists()
