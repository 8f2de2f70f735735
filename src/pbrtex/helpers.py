from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple

import contextlib
import logging
import os
import tempfile

import cv2
import numpy as np

from .errors import DecodeError, EncodeError, TextureNotFoundError, WriteError
from .grid import PixelGrid

logger = logging.getLogger(__name__)


# Config dataclass

@dataclass
class ConvertConfig:
    combined_suffix: str = "MetallicSmoothness"
    metallic_suffix: str = "Metallic"
    roughness_suffix: str = "Roughness"
    extension: str = ".png"         # output container, always PNG
    save_dir: Optional[str] = None  # None => next to the input file
    show: bool = False


# I/O & filesystem helpers

def ensure_dir(path: str | os.PathLike) -> None:
    Path(path).mkdir(parents=True, exist_ok=True)


def load_texture(path: str | os.PathLike) -> PixelGrid:
    """Decode an 8-bit image into a Luma or LumaAlpha grid. Raises on failure."""
    if not Path(path).is_file():
        raise TextureNotFoundError(path)

    img = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
    if img is None:
        raise DecodeError(f"Could not decode image: {path}")
    if img.dtype != np.uint8:
        raise DecodeError(f"Unsupported bit depth ({img.dtype}), expected 8-bit: {path}")

    if img.ndim == 3 and img.shape[2] == 1:
        img = img[..., 0]

    # colour inputs carry the value in the red channel (index 2 in BGR order),
    # copied unweighted; grey content has R == G == B so nothing changes there
    if img.ndim == 2:
        return PixelGrid.luma(img)
    if img.shape[2] == 3:
        return PixelGrid.luma(img[..., 2])
    if img.shape[2] == 4:
        return PixelGrid.luma_alpha(img[..., 2], img[..., 3])
    raise DecodeError(f"Unsupported channel layout {img.shape}: {path}")


def to_cv_image(grid: PixelGrid) -> np.ndarray:
    """Luma stays single channel; LumaAlpha becomes grey BGRA (imwrite has no 2-channel PNG)."""
    if not grid.has_alpha:
        return grid.luminance
    bgra = cv2.cvtColor(np.ascontiguousarray(grid.luminance), cv2.COLOR_GRAY2BGRA)
    bgra[..., 3] = grid.alpha
    return bgra


def encode_png(grid: PixelGrid, extension: str = ".png") -> bytes:
    try:
        ok, buf = cv2.imencode(extension, to_cv_image(grid))
    except cv2.error as e:
        raise EncodeError(f"Could not encode {grid!r} as {extension}: {e}") from e
    if not ok:
        raise EncodeError(f"Could not encode {grid!r} as {extension}")
    return buf.tobytes()


def write_textures(outputs: Mapping[Path, PixelGrid], extension: str = ".png") -> List[Path]:
    """
    Encode every grid first, stage each next to its destination, then move
    all of them into place. Nothing at a destination path is touched unless
    every encode and every staged write succeeded.
    """
    encoded: Dict[Path, bytes] = {
        Path(dest): encode_png(grid, extension) for dest, grid in outputs.items()
    }

    # mkstemp creates 0600; published files get the usual umask-derived mode
    mask = os.umask(0)
    os.umask(mask)

    staged: List[Tuple[str, Path]] = []
    try:
        for dest, data in encoded.items():
            ensure_dir(dest.parent)
            fd, tmp = tempfile.mkstemp(prefix=f".{dest.stem}.", suffix=".tmp", dir=dest.parent)
            staged.append((tmp, dest))
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
            os.chmod(tmp, 0o666 & ~mask)
        for tmp, dest in staged:
            os.replace(tmp, dest)
            logger.info("wrote %s", dest)
    except OSError as e:
        for tmp, _dest in staged:
            with contextlib.suppress(OSError):
                os.remove(tmp)
        raise WriteError(f"Could not write {e.filename or 'output'}: {e.strerror or e}") from e

    return list(encoded)
