"""Greedy IoU tracker that assigns persistent ids to detections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from croptrack.detection import Detection
from croptrack.track import Track, TrackedObject


@dataclass
class FrameOutput:
    """The objects tracked in one frame."""

    frame_id: int
    timestamp: str
    tracked_objects: list[TrackedObject] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Plain mapping suitable for JSON."""
        return {
            "frame_id": self.frame_id,
            "timestamp": self.timestamp,
            "tracked_objects": [obj.to_dict() for obj in self.tracked_objects],
        }


class Tracker:
    """Matches each frame's detections to existing tracks by best IoU."""

    def __init__(self, max_missing: int = 3, iou_threshold: float = 0.3) -> None:
        self.tracks: list[Track] = []
        self.next_id = 1
        self.max_missing = max_missing
        self.iou_threshold = iou_threshold

    def update(
        self, frame_id: int, timestamp: str, detections: Iterable[Detection]
    ) -> FrameOutput:
        """Advance the tracker by one frame and report the tracks seen in it."""
        detections = list(detections)
        unassigned = set(range(len(detections)))

        for track in self.tracks:
            best_iou = 0.0
            best_idx = None
            for i, det in enumerate(detections):
                if i not in unassigned:
                    continue
                iou = track.iou(det)
                if iou > self.iou_threshold and iou > best_iou:
                    best_iou = iou
                    best_idx = i

            if best_idx is None:
                track.mark_missing()
            else:
                track.update(detections[best_idx], frame_id)
                unassigned.discard(best_idx)

        for i, det in enumerate(detections):
            if i in unassigned:
                self.tracks.append(Track(self.next_id, det, frame_id))
                self.next_id += 1

        self.tracks = [t for t in self.tracks if not t.is_missing_too_long(self.max_missing)]

        return FrameOutput(
            frame_id=frame_id,
            timestamp=timestamp,
            tracked_objects=[t.to_output() for t in self.tracks if t.last_seen == frame_id],
        )