"""Render generator output as an image for eyeballing lattice structure.

Successive draws ``(x_i, x_{i+1})`` are plotted as points in the unit
square. A good generator fills the square evenly; a broken one shows lines
or clumps. Saved PNGs carry the sampling parameters in a tEXt chunk (key:
``tw223_params``) so an image can be reproduced later.
"""

from __future__ import annotations

import json

import numpy as np
from PIL import Image
from PIL.PngImagePlugin import PngInfo

METADATA_KEY = "tw223_params"


def render_pairs(values, size: int = 256) -> Image.Image:
    """Greyscale image of successive pairs; brighter pixels were hit more."""
    x = np.asarray(values, dtype=np.float64).reshape(-1)
    hist = np.zeros((size, size), dtype=np.int64)
    if x.shape[0] >= 2:
        cols = np.clip((x[:-1] * size).astype(np.int64), 0, size - 1)
        rows = np.clip((x[1:] * size).astype(np.int64), 0, size - 1)
        np.add.at(hist, (size - 1 - rows, cols), 1)
    peak = hist.max()
    if peak > 0:
        pixels = (hist * 255 // peak).astype(np.uint8)
    else:
        pixels = np.zeros((size, size), dtype=np.uint8)
    return Image.fromarray(pixels)


def save_render_png(img: Image.Image, params: dict, path: str) -> None:
    """Save a rendered image with the sampling parameters embedded."""
    info = PngInfo()
    info.add_text(METADATA_KEY, json.dumps(params))
    img.save(path, pnginfo=info)


def load_render_params(path: str) -> dict:
    """Read the sampling parameters back from a saved PNG.

    Raises ValueError if the PNG does not contain them.
    """
    with Image.open(path) as img:
        text_data = dict(getattr(img, "text", None) or {})
    if not text_data or METADATA_KEY not in text_data:
        raise ValueError(
            f"PNG file does not contain sampling parameters (missing '{METADATA_KEY}' chunk)"
        )
    return json.loads(text_data[METADATA_KEY])
