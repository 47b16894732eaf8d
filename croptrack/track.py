"""A single tracked object and its output form."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from croptrack.detection import Detection


@dataclass
class TrackedObject:
    """A track as reported in a frame: id, centre and size."""

    id: int
    x: float
    y: float
    width: float
    height: float

    def to_dict(self) -> dict:
        """Plain mapping suitable for JSON."""
        return asdict(self)


class Track:
    """An object followed across frames."""

    def __init__(self, track_id: int, det: Detection, frame_id: int) -> None:
        self.id = track_id
        self.bbox = det.bbox()
        self.last_seen = frame_id
        self.missing = 0
        self.history: list[tuple[float, float]] = [det.center()]

    def __repr__(self) -> str:
        return (
            f"Track(id={self.id}, bbox={self.bbox}, last_seen={self.last_seen}, "
            f"missing={self.missing})"
        )

    def update(self, det: Detection, frame_id: int) -> None:
        """Move the track to a matched detection seen in ``frame_id``."""
        self.bbox = det.bbox()
        self.last_seen = frame_id
        self.missing = 0
        self.history.append(det.center())

    def mark_missing(self) -> None:
        """Record one more frame without a match."""
        self.missing += 1

    def iou(self, det: Detection) -> float:
        """Intersection over union of the track's box and a detection's box."""
        x1, y1, x2, y2 = self.bbox
        dx1, dy1, dx2, dy2 = det.bbox()

        inter_w = max(min(x2, dx2) - max(x1, dx1), 0.0)
        inter_h = max(min(y2, dy2) - max(y1, dy1), 0.0)
        inter_area = inter_w * inter_h
        area_self = (x2 - x1) * (y2 - y1)
        area_det = (dx2 - dx1) * (dy2 - dy1)

        return inter_area / (area_self + area_det - inter_area + 1e-6)

    def to_output(self) -> TrackedObject:
        """The track's current box in centre/size form."""
        x1, y1, x2, y2 = self.bbox
        return TrackedObject(
            id=self.id,
            x=(x1 + x2) / 2.0,
            y=(y1 + y2) / 2.0,
            width=x2 - x1,
            height=y2 - y1,
        )

    def is_missing_too_long(self, max_missing: int) -> bool:
        """True once the track has gone unmatched for more than ``max_missing`` frames."""
        return self.missing > max_missing