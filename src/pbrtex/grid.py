from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

LUMA = "L"
LUMA_ALPHA = "LA"


@dataclass(frozen=True, eq=False)
class PixelGrid:
    """
    8-bit pixel grid, row-major.
      L  -> shape (height, width)
      LA -> shape (height, width, 2), luminance at [..., 0], alpha at [..., 1]
    """
    pixels: np.ndarray

    def __post_init__(self) -> None:
        px = self.pixels
        if not isinstance(px, np.ndarray) or px.dtype != np.uint8:
            raise ValueError("PixelGrid expects a uint8 numpy array")
        if px.ndim == 3 and px.shape[2] != 2:
            raise ValueError(f"Unsupported channel count: {px.shape[2]}")
        if px.ndim not in (2, 3):
            raise ValueError(f"Unsupported array shape: {px.shape}")

    @classmethod
    def luma(cls, luminance: np.ndarray) -> "PixelGrid":
        return cls(np.ascontiguousarray(luminance, dtype=np.uint8))

    @classmethod
    def luma_alpha(cls, luminance: np.ndarray, alpha: np.ndarray) -> "PixelGrid":
        if luminance.shape != alpha.shape:
            raise ValueError("luminance and alpha planes must have the same shape")
        return cls(np.stack([luminance, alpha], axis=-1).astype(np.uint8, copy=False))

    @property
    def layout(self) -> str:
        return LUMA if self.pixels.ndim == 2 else LUMA_ALPHA

    @property
    def has_alpha(self) -> bool:
        return self.layout == LUMA_ALPHA

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height)"""
        return self.width, self.height

    @property
    def luminance(self) -> np.ndarray:
        return self.pixels if self.pixels.ndim == 2 else self.pixels[..., 0]

    @property
    def alpha(self) -> Optional[np.ndarray]:
        return self.pixels[..., 1] if self.has_alpha else None

    def __repr__(self) -> str:
        return f"PixelGrid(layout={self.layout!r}, size={self.width}x{self.height})"
