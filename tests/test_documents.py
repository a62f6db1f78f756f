import json
import logging

import pytest

from sprite_baker.data import Placement
from sprite_baker.errors import MetadataIOError
from sprite_baker.metadata import (
    build_index,
    build_sprite_files,
    load_existing_document,
    write_sprite_files,
)

FILES = ["run[walk]1.png", "run[walk]2.png", "run.png"]
PLACEMENTS = [Placement(0, 0, 0, 8, 8), Placement(1, 8, 0, 8, 8), Placement(2, 16, 0, 4, 4)]


def _build(folder):
    return build_sprite_files(PLACEMENTS, FILES, texture_path="atlas.png", texture_size=(32, 16), folder=folder)


def test_fresh_document_is_derived(tmp_path):
    [(path, payload)] = _build(tmp_path)
    assert path == tmp_path / "run.sprite"
    assert [frame["name"] for frame in payload["frames"]] == ["run", "run_walk_1", "run_walk_2"]
    assert payload["animations"] == [{"name": "walk", "loop": True, "frame_duration": 100, "frames": [1, 2]}]
    assert len(payload["frames_offsets"]) == 3


def test_authored_animations_and_offsets_survive_rebake(tmp_path):
    existing = {
        "texture": "old.png",
        "texture_size": {"w": 1, "h": 1},
        "frames": [{"name": "stale", "x": 99, "y": 99, "w": 1, "h": 1}],
        "frames_offsets": [{"x": 3, "y": -2}, {"x": 0.5, "y": 1}],
        "animations": [{"name": "walk", "loop": False, "frame_duration": 42, "frames": [2, 1]}],
    }
    (tmp_path / "run.sprite").write_text(json.dumps(existing))

    [(_, payload)] = _build(tmp_path)
    assert payload["animations"] == existing["animations"]
    assert payload["frames_offsets"] == existing["frames_offsets"]
    assert payload["texture"] == "atlas.png"
    assert payload["texture_size"] == {"w": 32, "h": 16}
    assert payload["frames"][1] == {"name": "run_walk_1", "x": 0, "y": 0, "w": 8, "h": 8}


def test_only_array_fields_are_carried_over(tmp_path):
    (tmp_path / "run.sprite").write_text(json.dumps({"animations": {"walk": 1}, "frames_offsets": [1]}))
    [(_, payload)] = _build(tmp_path)
    assert payload["animations"][0]["name"] == "walk"
    assert payload["frames_offsets"] == [1]


def test_corrupt_existing_document_is_ignored(tmp_path, caplog):
    path = tmp_path / "run.sprite"
    path.write_text("{ not json")
    with caplog.at_level(logging.WARNING):
        assert load_existing_document(path) is None
        [(_, payload)] = _build(tmp_path)
    assert "run.sprite" in caplog.text
    assert payload["animations"][0]["frame_duration"] == 100


def test_non_object_document_is_ignored(tmp_path):
    path = tmp_path / "run.sprite"
    path.write_text("[1, 2, 3]")
    assert load_existing_document(path) is None
    assert load_existing_document(tmp_path / "absent.sprite") is None


def test_write_sprite_files_writes_documents_and_sorted_index(tmp_path):
    files = ["b.png", "a.png", "c[x]1.png"]
    placements = [Placement(i, i * 4, 0, 4, 4) for i in range(3)]
    folder = tmp_path / "sprites"
    built = build_sprite_files(placements, files, "atlas.png", (16, 4), folder)
    written = write_sprite_files(built, folder)

    assert written == [folder / "a.sprite", folder / "b.sprite", folder / "c.sprite"]
    index = json.loads((folder / "all_sprite_files.json").read_text())
    assert index == {"all_sprites": [path.as_posix() for path in written]}
    text = (folder / "a.sprite").read_text()
    assert text.endswith("\n")
    assert '\n    "texture": "atlas.png"' in text


def test_index_is_sorted_lexicographically(tmp_path):
    paths = [tmp_path / "b.sprite", tmp_path / "B.sprite", tmp_path / "a.sprite"]
    assert build_index(paths)["all_sprites"] == sorted(path.as_posix() for path in paths)


def test_unwritable_folder_raises(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    built = build_sprite_files(PLACEMENTS, FILES, "atlas.png", (32, 16), blocker)
    with pytest.raises(MetadataIOError):
        write_sprite_files(built, blocker)
