import matplotlib

matplotlib.use("Agg")

import cv2
import numpy as np
import pytest


@pytest.fixture
def write_png(tmp_path):
    """Write a uint8 array (gray, BGR or BGRA) to tmp_path/name and return the path."""

    def _write(name, array):
        path = tmp_path / name
        assert cv2.imwrite(str(path), np.asarray(array, dtype=np.uint8))
        return path

    return _write


@pytest.fixture
def combined_bgra():
    """2x1 combined texture: (luminance=10, alpha=200), (luminance=250, alpha=0)."""
    lum = np.array([[10, 250]], np.uint8)
    alpha = np.array([[200, 0]], np.uint8)
    bgra = cv2.cvtColor(lum, cv2.COLOR_GRAY2BGRA)
    bgra[..., 3] = alpha
    return bgra
