from __future__ import annotations
from pathlib import Path
from typing import Optional, Tuple

import logging
import os

from .channels import ChannelMerger, ChannelSplitter, SplitResult
from .errors import MissingAlphaChannelError
from .grid import PixelGrid
from .helpers import ConvertConfig, load_texture, write_textures
from .paths import derive_merge_path, derive_split_paths
from .viz import Visualizer


class TextureConverter:
    """
    decode -> channel transform -> encode, for both directions.
    Outputs are only written once the whole transform has succeeded.
    """

    def __init__(
        self,
        config: Optional[ConvertConfig] = None,
        logger: Optional[logging.Logger] = None,
        viz: Optional[Visualizer] = None,
    ) -> None:
        self.config = config or ConvertConfig()
        self.log = logger or logging.getLogger(__name__)
        self.splitter = ChannelSplitter()
        self.merger = ChannelMerger()
        self.viz = viz or Visualizer()

    def _load(self, path: str | os.PathLike) -> PixelGrid:
        grid = load_texture(path)
        self.log.debug("decoded %s: layout=%s size=%dx%d", path, grid.layout, grid.width, grid.height)
        return grid

    def split(self, path: str | os.PathLike) -> Tuple[Path, Path]:
        """Combined metallic/smoothness file -> (metallic path, roughness path)."""
        metallic_path, roughness_path = derive_split_paths(path, self.config)
        self.log.debug("metallic_path: %s, roughness_path: %s", metallic_path, roughness_path)

        combined = self._load(path)
        if not combined.has_alpha:
            raise MissingAlphaChannelError(path)
        result: SplitResult = self.splitter.run(combined)

        if self.config.show:
            self.viz.show_split(combined, result)

        write_textures(
            {metallic_path: result.metallic, roughness_path: result.roughness},
            extension=self.config.extension,
        )
        return metallic_path, roughness_path

    def merge(self, metallic_path: str | os.PathLike, roughness_path: str | os.PathLike) -> Path:
        """Metallic + roughness files -> combined metallic/smoothness path."""
        merged_path = derive_merge_path(metallic_path, self.config)
        self.log.debug("merged_path: %s", merged_path)

        metallic = self._load(metallic_path)
        roughness = self._load(roughness_path)
        merged = self.merger.run(metallic, roughness)

        if self.config.show:
            self.viz.show_merge(metallic, roughness, merged)

        write_textures({merged_path: merged}, extension=self.config.extension)
        return merged_path
