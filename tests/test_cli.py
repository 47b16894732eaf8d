import json

import pytest

from croptrack.cli import FrameInput, load_frames, main, run
from croptrack.detection import Detection


def _frames_data():
    return [
        {
            "frame_id": 0,
            "timestamp": "2025-01-01",
            "detections": [
                {"x": 0.3, "y": 0.3, "width": 0.1, "height": 0.1},
                {"x": 0.7, "y": 0.7, "width": 0.1, "height": 0.1},
            ],
        },
        {
            "frame_id": 1,
            "timestamp": "2025-01-01",
            "detections": [
                {"x": 0.3, "y": 0.3, "width": 0.1, "height": 0.1},
                {"x": 0.71, "y": 0.71, "width": 0.1, "height": 0.1},
            ],
        },
    ]


@pytest.fixture
def input_file(tmp_path):
    path = tmp_path / "input.json"
    path.write_text(json.dumps(_frames_data()), encoding="utf-8")
    return path


def test_frame_input_from_dict():
    frame = FrameInput.from_dict(_frames_data()[0])
    assert frame.frame_id == 0
    assert frame.timestamp == "2025-01-01"
    assert frame.detections[1] == Detection(0.7, 0.7, 0.1, 0.1)


def test_frame_input_missing_field():
    with pytest.raises(ValueError, match="timestamp"):
        FrameInput.from_dict({"frame_id": 0, "detections": []})


def test_frame_input_negative_id():
    with pytest.raises(ValueError):
        FrameInput.from_dict({"frame_id": -1, "timestamp": "t", "detections": []})


def test_load_frames_reads_all(input_file):
    frames = load_frames(input_file)
    assert [f.frame_id for f in frames] == [0, 1]


def test_run_keeps_ids():
    frames = [FrameInput.from_dict(d) for d in _frames_data()]
    outputs = run(frames, None)
    first = [o.id for o in outputs[0].tracked_objects]
    second = [o.id for o in outputs[1].tracked_objects]
    assert first == second
    assert len(first) == 2


def test_main_writes_output(input_file, tmp_path):
    out = tmp_path / "out.json"
    assert main(["--input", str(input_file), "--output", str(out)]) == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert [f["frame_id"] for f in data] == [0, 1]
    assert data[1]["timestamp"] == "2025-01-01"
    assert [o["id"] for o in data[0]["tracked_objects"]] == [
        o["id"] for o in data[1]["tracked_objects"]
    ]


def test_main_renders_frames(input_file, tmp_path):
    out = tmp_path / "out.json"
    vis = tmp_path / "vis"
    rc = main(["--input", str(input_file), "--output", str(out), "--vis-dir", str(vis)])
    assert rc == 0
    assert sorted(p.name for p in vis.iterdir()) == ["frame_00000.png", "frame_00001.png"]


def test_main_empty_input_fails(tmp_path):
    empty = tmp_path / "empty.json"
    empty.write_text("[]", encoding="utf-8")
    out = tmp_path / "out.json"
    assert main(["--input", str(empty), "--output", str(out)]) == 1
    assert not out.exists()


def test_main_missing_input_fails(tmp_path):
    out = tmp_path / "out.json"
    assert main(["--input", str(tmp_path / "nope.json"), "--output", str(out)]) == 1
    assert not out.exists()