# croptrack

Follows detected objects (for example plants) across a sequence of frames.
Each frame carries a list of detections given as normalised centre
coordinates and sizes; the tracker matches them to existing tracks by
intersection over union (IoU) and gives every object a stable numeric id.

## Installation

```
pip install .
```

Pillow is the only runtime dependency. For the tests, `pip install .[test]`
and run `pytest`.

## Command line

```
croptrack --input frames.json --output tracks.json [--vis-dir frames/]
```

The same entry point can be run as `python -m croptrack.cli`.

The input is a JSON array of frames. Each frame needs a non-negative
integer `frame_id`, a string `timestamp` and a list of `detections`, each
with numeric `x`, `y`, `width` and `height`:

```json
[
  {
    "frame_id": 0,
    "timestamp": "2025-01-01T00:00:00",
    "detections": [
      {"x": 0.3, "y": 0.3, "width": 0.1, "height": 0.1}
    ]
  }
]
```

The output file is a JSON array (indented by two spaces) with, for each
input frame, its `frame_id`, `timestamp` and the `tracked_objects` matched
or created in that frame, each with an `id`, `x`, `y`, `width` and `height`.

With `--vis-dir`, the directory is created if needed and an 800×800 PNG
named `frame_00000.png`, `frame_00001.png`, … (after the frame id) is
written for every frame. Each tracked object is drawn as a filled red box,
clipped to the image, on a dark grey background, with a yellow label
`ID <n>` placed 20 pixels above its top-left corner (kept inside the
image). The label uses `DejaVuSans.ttf` at 18 px if Pillow can find it,
and Pillow's default font otherwise.

The command prints progress lines to standard output. If the input cannot
be read, is not valid, or holds no frames, or an output file cannot be
written, it prints an error to standard error and exits with status 1.

The command always uses a tracker that keeps a track for up to 3 frames
without a match and requires an IoU above 0.3 for a match.

## How tracking works

For every frame, `Tracker.update` goes through the existing tracks in the
order they were created. Each track takes the not yet assigned detection
with the highest IoU above the threshold; a track that finds none counts
one more missing frame. Detections left over start new tracks with the
next id, counting from 1. Tracks missing for more than `max_missing`
frames are dropped, and their ids are never reused. The frame's result
lists only the tracks matched or created in that frame.

## Library use

```python
from croptrack.detection import Detection
from croptrack.tracker import Tracker

tracker = Tracker(max_missing=3, iou_threshold=0.3)
out = tracker.update(0, "2025-01-01", [Detection(0.3, 0.3, 0.1, 0.1)])
for obj in out.tracked_objects:
    print(obj.id, obj.x, obj.y)
```

- `croptrack.detection.Detection` — a box by centre and size, with
  `bbox()` (corners `(x1, y1, x2, y2)`), `center()` and
  `Detection.from_dict(mapping)`.
- `croptrack.track.Track` — one followed object, with `update`,
  `mark_missing`, `iou`, `to_output` and `is_missing_too_long`;
  `TrackedObject` is its reported form, with `to_dict()`.
- `croptrack.tracker.Tracker` and `FrameOutput` (with `to_dict()` for the
  JSON-ready form of a frame).
- `croptrack.visualize.render_frame(frame_id, objects, output_dir)` draws
  one frame and returns the path of the PNG it wrote.
- `croptrack.cli` offers `FrameInput.from_dict`, `load_frames(path)`,
  `run(frames, vis_dir=None)` and `main(argv=None)`.

## What it does not do

croptrack does not detect objects in images itself: detections must be
supplied in the input. It does not predict motion, so a track only
continues when a new detection overlaps its last box enough, and the
rendered images show tracked boxes only, not the original camera frames.