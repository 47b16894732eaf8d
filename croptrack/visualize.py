"""Render tracked objects of a frame to a PNG image."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Iterable

from PIL import Image, ImageDraw, ImageFont

from croptrack.track import TrackedObject

WIDTH = 800
HEIGHT = 800
BACKGROUND = (30, 30, 30, 255)
BOX_COLOUR = (200, 0, 0, 255)
TEXT_COLOUR = (255, 255, 0, 255)
FONT_SIZE = 18


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _load_font() -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    try:
        return ImageFont.truetype("DejaVuSans.ttf", FONT_SIZE)
    except OSError:
        return ImageFont.load_default()


def render_frame(frame_id: int, objects: Iterable[TrackedObject], output_dir) -> Path:
    """Draw each object as a filled box labelled with its id; return the PNG path."""
    img = Image.new("RGBA", (WIDTH, HEIGHT), BACKGROUND)
    draw = ImageDraw.Draw(img)
    font = _load_font()

    for obj in objects:
        x1 = _round((obj.x - obj.width / 2.0) * WIDTH)
        y1 = _round((obj.y - obj.height / 2.0) * HEIGHT)
        x2 = _round((obj.x + obj.width / 2.0) * WIDTH)
        y2 = _round((obj.y + obj.height / 2.0) * HEIGHT)

        left, top = max(x1, 0), max(y1, 0)
        right, bottom = min(x2, WIDTH), min(y2, HEIGHT)
        if right > left and bottom > top:
            draw.rectangle([left, top, right - 1, bottom - 1], fill=BOX_COLOUR)

        draw.text((max(x1, 0), max(y1 - 20, 0)), f"ID {obj.id}", fill=TEXT_COLOUR, font=font)

    out_path = Path(output_dir) / f"frame_{frame_id:05d}.png"
    img.save(out_path)
    return out_path