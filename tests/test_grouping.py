from pathlib import Path

import numpy as np

from sprite_baker.data import Placement, SourceImage
from sprite_baker.metadata import build_sprite_document, group_frames, synthesize_animations
from sprite_baker.metadata.grouping import frame_offset


def test_tagged_and_untagged_frames_share_a_sprite():
    groups = group_frames(["run[walk]1.png", "run[walk]2.png", "run.png"])
    assert list(groups) == ["run"]
    frames = groups["run"]
    assert [frame.placement_id for frame in frames] == [2, 0, 1]

    animations = synthesize_animations(frames)
    assert [animation.to_json() for animation in animations] == [
        {"name": "walk", "loop": True, "frame_duration": 100, "frames": [1, 2]}
    ]


def test_frames_sort_numerically_within_an_animation():
    groups = group_frames(["a[walk]10.png", "a[walk]2.png", "a[idle]5.png"])
    names = [(f.key.animation_name, f.key.frame_index) for f in groups["a"]]
    assert names == [("idle", 5), ("walk", 2), ("walk", 10)]


def test_sprites_are_keyed_in_sorted_order_and_partition_inputs():
    files = ["zeta.png", "alpha[run]1.png", "mid1.png", "alpha[run]0.png"]
    groups = group_frames(files)
    assert list(groups) == ["alpha", "mid1", "zeta"]
    ids = sorted(frame.placement_id for frames in groups.values() for frame in frames)
    assert ids == list(range(len(files)))


def test_untagged_sprite_gets_default_animation():
    frames = group_frames(["icon.png"])["icon"]
    animations = synthesize_animations(frames, frame_duration_ms=80, loop=False)
    assert [animation.to_json() for animation in animations] == [
        {"name": "default", "loop": False, "frame_duration": 80, "frames": [0]}
    ]


def test_build_sprite_document_uses_placements():
    files = ["art/run[walk]1.png", "art/run[walk]2.png"]
    frames = group_frames(files)["run"]
    placements = [Placement(0, 1, 2, 3, 4), Placement(1, 10, 20, 5, 6)]
    document = build_sprite_document("run", frames, placements, "atlas.png", (64, 32))
    payload = document.to_json()
    assert payload["texture"] == "atlas.png"
    assert payload["source_folder"] == "art/"
    assert payload["texture_size"] == {"w": 64, "h": 32}
    assert payload["frames"] == [
        {"name": "run_walk_1", "x": 1, "y": 2, "w": 3, "h": 4},
        {"name": "run_walk_2", "x": 10, "y": 20, "w": 5, "h": 6},
    ]
    assert payload["frames_offsets"] == [{"x": 0.0, "y": 0.0}, {"x": 0.0, "y": 0.0}]
    assert payload["animations"][0]["frames"] == [0, 1]


def test_trimmed_frame_offset_is_centre_delta():
    image = SourceImage(
        path=Path("a.png"),
        pixels=np.zeros((2, 4, 4), dtype=np.uint8),
        source_size=(10, 10),
        trim_offset=(1, 3),
    )
    assert frame_offset(image) == {"x": -2.0, "y": -1.0}
    assert frame_offset(None) == {"x": 0.0, "y": 0.0}
