"""PixelGrid construction and accessors."""

import numpy as np
import pytest

from pbrtex.grid import LUMA, LUMA_ALPHA, PixelGrid


class TestPixelGrid:
    def test_luma_properties(self):
        grid = PixelGrid.luma(np.zeros((5, 4), np.uint8))
        assert grid.layout == LUMA
        assert not grid.has_alpha
        assert grid.size == (4, 5)
        assert grid.alpha is None

    def test_luma_alpha_properties(self):
        lum = np.full((3, 2), 7, np.uint8)
        alpha = np.full((3, 2), 9, np.uint8)
        grid = PixelGrid.luma_alpha(lum, alpha)
        assert grid.layout == LUMA_ALPHA
        assert grid.has_alpha
        assert grid.pixels.shape == (3, 2, 2)
        assert (grid.luminance == 7).all()
        assert (grid.alpha == 9).all()

    def test_rejects_non_uint8(self):
        with pytest.raises(ValueError):
            PixelGrid(np.zeros((2, 2), np.float32))

    def test_rejects_unknown_channel_count(self):
        with pytest.raises(ValueError):
            PixelGrid(np.zeros((2, 2, 3), np.uint8))

    def test_rejects_mismatched_planes(self):
        with pytest.raises(ValueError):
            PixelGrid.luma_alpha(np.zeros((2, 2), np.uint8), np.zeros((2, 3), np.uint8))
