"""
Raster helpers — fit model output to platform size, encode as data URL.
"""

from __future__ import annotations

import base64
import io
import math

from PIL import Image


def sniff_mime(data: bytes) -> str:
    if data[:8] == b"\x89PNG\r\n\x1a\n":
        return "image/png"
    if data[:3] == b"\xff\xd8\xff":
        return "image/jpeg"
    if data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "image/webp"
    return "image/png"


def fit_cover(img: Image.Image, w: int, h: int) -> Image.Image:
    """Resize to cover (w×h), center-crop the excess."""
    iw, ih = img.size
    scale = max(w / iw, h / ih)
    nw = math.ceil(iw * scale)
    nh = math.ceil(ih * scale)
    img = img.resize((nw, nh), Image.LANCZOS)
    cx = (nw - w) // 2
    cy = (nh - h) // 2
    return img.crop((cx, cy, cx + w, cy + h))


def fit_to_size(data: bytes, width: int, height: int) -> bytes:
    """Cover-fit encoded image bytes to exactly width×height, returned as PNG."""
    with Image.open(io.BytesIO(data)) as img:
        if img.size == (width, height):
            return data
        mode = "RGBA" if img.mode in ("RGBA", "LA", "P") else "RGB"
        fitted = fit_cover(img.convert(mode), width, height)

    out = io.BytesIO()
    fitted.save(out, format="PNG")
    return out.getvalue()


def to_data_url(data: bytes) -> str:
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{sniff_mime(data)};base64,{encoded}"
