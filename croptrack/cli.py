"""Command line entry point: track detections from a JSON file."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping

from croptrack.detection import Detection
from croptrack.tracker import FrameOutput, Tracker
from croptrack.visualize import render_frame


@dataclass
class FrameInput:
    """One input frame with its detections."""

    frame_id: int
    timestamp: str
    detections: list[Detection] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FrameInput:
        """Build a frame from a mapping with frame_id, timestamp and detections."""
        if not isinstance(data, Mapping):
            raise ValueError(f"frame must be an object, got {data!r}")
        for key in ("frame_id", "timestamp", "detections"):
            if key not in data:
                raise ValueError(f"missing field `{key}`")
        frame_id = data["frame_id"]
        if isinstance(frame_id, bool) or not isinstance(frame_id, int) or frame_id < 0:
            raise ValueError(f"frame_id must be a non-negative integer, got {frame_id!r}")
        timestamp = data["timestamp"]
        if not isinstance(timestamp, str):
            raise ValueError(f"timestamp must be a string, got {timestamp!r}")
        detections = data["detections"]
        if not isinstance(detections, list):
            raise ValueError("detections must be a list")
        return cls(
            frame_id=frame_id,
            timestamp=timestamp,
            detections=[Detection.from_dict(d) for d in detections],
        )


def load_frames(path) -> list[FrameInput]:
    """Read a JSON array of frames from ``path``."""
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, list):
        raise ValueError("input must be a JSON array of frames")
    return [FrameInput.from_dict(item) for item in data]


def run(frames: Iterable[FrameInput], vis_dir=None) -> list[FrameOutput]:
    """Track all frames in order, optionally rendering each into ``vis_dir``."""
    tracker = Tracker(3, 0.3)
    outputs = []
    for frame in frames:
        result = tracker.update(frame.frame_id, frame.timestamp, frame.detections)
        if vis_dir is not None:
            vis_path = Path(vis_dir)
            vis_path.mkdir(parents=True, exist_ok=True)
            render_frame(frame.frame_id, result.tracked_objects, vis_path)
        outputs.append(result)
    return outputs


def main(argv=None) -> int:
    """Run the tracker over an input file and write the results as JSON."""
    parser = argparse.ArgumentParser(prog="croptrack", description=__doc__)
    parser.add_argument("--input", required=True, type=Path)
    parser.add_argument("--output", required=True, type=Path)
    parser.add_argument("--vis-dir", type=Path, default=None)
    args = parser.parse_args(argv)

    print("Starting reading in frames")
    try:
        frames = load_frames(args.input)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    if not frames:
        print("error: input contains no frames", file=sys.stderr)
        return 1

    print(f"Starting! {frames[0]}")

    try:
        outputs = run(frames, args.vis_dir)
        with open(args.output, "w", encoding="utf-8") as fh:
            json.dump([o.to_dict() for o in outputs], fh, indent=2)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())