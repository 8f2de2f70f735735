from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .errors import DimensionMismatchError, MissingAlphaChannelError
from .grid import PixelGrid

# 8-bit channel maximum; roughness and smoothness are complements of it
FULL = np.uint8(255)


def complement(channel: np.ndarray) -> np.ndarray:
    """255 - x on a uint8 plane, as a new array. Exact for every 8-bit value."""
    return np.subtract(FULL, channel, dtype=np.uint8)


@dataclass
class SplitResult:
    metallic: PixelGrid   # Luma, opaque
    roughness: PixelGrid  # Luma, 255 - smoothness


class ChannelSplitter:
    """
    Combined metallic/smoothness -> separate metallic + roughness.
      metallic  = combined luminance (copied)
      roughness = 255 - combined alpha
    Inputs are never modified; both outputs are freshly allocated.
    """

    def run(self, combined: PixelGrid) -> SplitResult:
        if not combined.has_alpha:
            raise MissingAlphaChannelError()
        metallic = PixelGrid.luma(combined.luminance.copy())
        roughness = PixelGrid.luma(complement(combined.alpha))
        return SplitResult(metallic=metallic, roughness=roughness)


class ChannelMerger:
    """
    Separate metallic + roughness -> combined metallic/smoothness.
      luminance = metallic luminance (copied)
      alpha     = 255 - roughness luminance
    Any alpha already present on the inputs is ignored.
    """

    def run(self, metallic: PixelGrid, roughness: PixelGrid) -> PixelGrid:
        if metallic.size != roughness.size:
            raise DimensionMismatchError(expected=metallic.size, actual=roughness.size)
        return PixelGrid.luma_alpha(
            metallic.luminance,
            complement(roughness.luminance),
        )
