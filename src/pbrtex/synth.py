from __future__ import annotations
from typing import Tuple

import numpy as np
from skimage.draw import disk
from skimage.filters import gaussian

from .grid import PixelGrid


def make_combined_texture(seed: int, size: Tuple[int, int] = (64, 64), n_discs: int = 12) -> PixelGrid:
    """
    Deterministic metallic/smoothness sample: bright metallic discs on a dark
    dielectric base, smoothness from a blurred random field. size is (width, height).
    """
    rng = np.random.default_rng(seed)
    W, H = size

    metallic = np.full((H, W), rng.integers(0, 40), np.uint8)
    for _ in range(n_discs):
        y, x = rng.integers(0, H), rng.integers(0, W)
        r = rng.integers(2, max(3, min(H, W) // 6))
        rr, cc = disk((y, x), r, shape=(H, W))
        metallic[rr, cc] = rng.integers(200, 256)

    field = gaussian(rng.random((H, W)), sigma=rng.uniform(1.0, 3.0))
    lo, hi = float(field.min()), float(field.max())
    smooth = (field - lo) / (hi - lo + 1e-8)
    smoothness = np.round(smooth * 255).astype(np.uint8)

    return PixelGrid.luma_alpha(metallic, smoothness)
