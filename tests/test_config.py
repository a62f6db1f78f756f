import json
from pathlib import Path

import pytest

from sprite_baker.config import expand_inputs, load_config
from sprite_baker.errors import ConfigError

REQUIRED = {"input_files": ["a.png"], "output_file": "out/atlas.png", "output_width": 64, "output_height": 32}


def test_defaults_and_overrides():
    config = load_config(None, dict(REQUIRED, padding=None, scale_percent=50))
    assert config.output_width == 64
    assert config.padding == 0
    assert config.scale_percent == 50
    assert config.background == (0, 0, 0, 0)
    assert config.metadata_folder == Path("out")
    assert config.output_path == Path("out/atlas.png")


def test_json_file_is_merged_under_overrides(tmp_path):
    path = tmp_path / "bake.json"
    path.write_text(json.dumps(dict(REQUIRED, padding=4, background=[1, 2, 3, 4], sprite_folder="sprites")))
    config = load_config(path, {"padding": 2, "trim_images": None})
    assert config.padding == 2
    assert config.background == (1, 2, 3, 4)
    assert config.metadata_folder == Path("sprites")
    assert config.trim_images is False


@pytest.mark.parametrize(
    "override",
    [
        {"output_width": 0},
        {"output_height": -1},
        {"padding": -1},
        {"scale_percent": 0},
        {"background": [0, 0, 0, 256]},
        {"background": [0, 0]},
        {"input_files": []},
        {"output_file": ""},
        {"output_width": "wide"},
    ],
)
def test_invalid_values_raise_config_error(override):
    with pytest.raises(ConfigError):
        load_config(None, dict(REQUIRED, **override))


def test_unreadable_config_file_raises(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{")
    with pytest.raises(ConfigError):
        load_config(path, REQUIRED)


def test_input_list_file_is_expanded(tmp_path):
    listing = tmp_path / "inputs.txt"
    listing.write_text("art\\a.png\n  art/b.png c.png\n")
    assert expand_inputs([str(listing)], [".png"]) == ["art/a.png", "art/b.png", "c.png"]


def test_input_directory_is_expanded_in_name_order(tmp_path):
    for name in ["b.png", "a.png", "notes.txt"]:
        (tmp_path / name).write_text("")
    assert expand_inputs([str(tmp_path)], [".png"]) == [
        (tmp_path / "a.png").as_posix(),
        (tmp_path / "b.png").as_posix(),
    ]


def test_single_image_is_not_treated_as_a_list(tmp_path):
    image = tmp_path / "only.png"
    image.write_bytes(b"")
    assert expand_inputs([str(image)], [".png"]) == [str(image)]


def test_background_accepts_space_separated_string():
    config = load_config(None, dict(REQUIRED, background="255 128 0 64"))
    assert config.background == (255, 128, 0, 64)


def test_background_alpha_defaults_to_transparent():
    assert load_config(None, dict(REQUIRED, background=[1, 2, 3])).background == (1, 2, 3, 0)
    assert load_config(None, dict(REQUIRED, background="4 5 6")).background == (4, 5, 6, 0)
