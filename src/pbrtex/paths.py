from __future__ import annotations
from pathlib import Path
from typing import Optional, Tuple

import os

from .errors import PathDerivationError
from .helpers import ConvertConfig


def file_stem(path: str | os.PathLike) -> str:
    """Stem of the final path component; raises if there is no file name."""
    name = Path(path).name
    if name in ("", ".", ".."):
        raise PathDerivationError(path)
    return Path(name).stem


def strip_suffix(stem: str, suffix: str) -> str:
    """Case-sensitive; a stem without the suffix is returned whole."""
    if suffix and stem.endswith(suffix):
        return stem[: -len(suffix)]
    return stem


def _output_dir(path: str | os.PathLike, save_dir: Optional[str]) -> Path:
    return Path(save_dir) if save_dir else Path(path).parent


def derive_split_paths(
    path: str | os.PathLike, config: Optional[ConvertConfig] = None
) -> Tuple[Path, Path]:
    """WoodMetallicSmoothness.png -> (WoodMetallic.png, WoodRoughness.png)"""
    cfg = config or ConvertConfig()
    base = strip_suffix(file_stem(path), cfg.combined_suffix)
    out_dir = _output_dir(path, cfg.save_dir)
    return (
        out_dir / f"{base}{cfg.metallic_suffix}{cfg.extension}",
        out_dir / f"{base}{cfg.roughness_suffix}{cfg.extension}",
    )


def derive_merge_path(
    metallic_path: str | os.PathLike, config: Optional[ConvertConfig] = None
) -> Path:
    """WoodMetallic.png -> WoodMetallicSmoothness.png"""
    cfg = config or ConvertConfig()
    base = strip_suffix(file_stem(metallic_path), cfg.metallic_suffix)
    return _output_dir(metallic_path, cfg.save_dir) / f"{base}{cfg.combined_suffix}{cfg.extension}"
