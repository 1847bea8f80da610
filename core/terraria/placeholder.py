# -*- coding: utf-8 -*-
"""placeholder.py

Letter tiles shown when no wiki image could be loaded.

- `placeholder()` returns an SVG data URI (what browsers get).
- `render_placeholder_png()` draws the same tile with Pillow, for clients that
  cannot render SVG data URIs (and for the PNG API route).

Both are pure: same text + size, same output.
"""

from __future__ import annotations

import base64
import io
from typing import Any, Optional
from urllib.parse import quote

from PIL import Image, ImageDraw, ImageFont

from core.terraria.models import DEFAULT_ICON_SIZE

BACKGROUND = "#374151"
FOREGROUND = "#ffffff"
CORNER_RADIUS = 4

_FONT_CANDIDATES = ("DejaVuSans-Bold.ttf", "Arial Bold.ttf", "arialbd.ttf")


def normalize_size(size: Any) -> int:
    try:
        n = int(size)
    except (TypeError, ValueError):
        return DEFAULT_ICON_SIZE
    return n if n > 0 else DEFAULT_ICON_SIZE


def initial_of(text: Optional[str]) -> str:
    return str(text or "")[:1].upper()


def _font_size(size: int) -> str:
    # half the tile, no exponent notation for large sizes
    return str(size // 2) if size % 2 == 0 else str(size / 2)


def placeholder(text: Optional[str], size: Any = DEFAULT_ICON_SIZE) -> str:
    """SVG data URI: uppercased first letter of `text` on a dark rounded tile."""
    n = normalize_size(size)
    label = quote(initial_of(text), safe="")
    return (
        "data:image/svg+xml,"
        f"%3Csvg xmlns='http://www.w3.org/2000/svg' width='{n}' height='{n}'%3E"
        f"%3Crect fill='%23374151' width='{n}' height='{n}' rx='{CORNER_RADIUS}'/%3E"
        "%3Ctext x='50%25' y='50%25' text-anchor='middle' dy='.35em' fill='%23fff' "
        f"font-size='{_font_size(n)}' font-family='Arial, sans-serif' font-weight='bold'%3E"
        f"{label}%3C/text%3E%3C/svg%3E"
    )


def _load_font(px: int):
    for name in _FONT_CANDIDATES:
        try:
            return ImageFont.truetype(name, px)
        except OSError:
            continue
    return ImageFont.load_default(size=px)


def render_placeholder_png(text: Optional[str], size: Any = DEFAULT_ICON_SIZE) -> bytes:
    """PNG bytes of the placeholder tile."""
    n = normalize_size(size)
    img = Image.new("RGBA", (n, n), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    draw.rounded_rectangle((0, 0, n - 1, n - 1), radius=CORNER_RADIUS, fill=BACKGROUND)

    label = initial_of(text)
    if label:
        font = _load_font(max(1, n // 2))
        left, top, right, bottom = draw.textbbox((0, 0), label, font=font)
        x = (n - (right - left)) / 2 - left
        y = (n - (bottom - top)) / 2 - top
        draw.text((x, y), label, fill=FOREGROUND, font=font)

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def placeholder_png_uri(text: Optional[str], size: Any = DEFAULT_ICON_SIZE) -> str:
    data = base64.b64encode(render_placeholder_png(text, size)).decode("ascii")
    return f"data:image/png;base64,{data}"
