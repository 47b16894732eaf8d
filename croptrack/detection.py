"""Detections: axis-aligned boxes given by centre and size."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


def _number(data: Mapping[str, Any], key: str) -> float:
    try:
        value = data[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field `{key}` must be a number, got {value!r}")
    return float(value)


@dataclass(frozen=True)
class Detection:
    """A detected object: centre (x, y) and its width and height."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Detection:
        """Build a detection from a mapping with x, y, width and height."""
        if not isinstance(data, Mapping):
            raise ValueError(f"detection must be an object, got {data!r}")
        return cls(
            x=_number(data, "x"),
            y=_number(data, "y"),
            width=_number(data, "width"),
            height=_number(data, "height"),
        )

    def bbox(self) -> tuple[float, float, float, float]:
        """Corners of the box as (x1, y1, x2, y2)."""
        half_w = self.width / 2.0
        half_h = self.height / 2.0
        return (self.x - half_w, self.y - half_h, self.x + half_w, self.y + half_h)

    def center(self) -> tuple[float, float]:
        """Centre of the box as (x, y)."""
        return (self.x, self.y)