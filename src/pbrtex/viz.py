from __future__ import annotations
from typing import Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .channels import SplitResult
from .grid import PixelGrid


class Visualizer:
    """Preview helpers (only used when --show). No implicit showing in library paths."""

    @staticmethod
    def show_side_by_side(
        images: Sequence[np.ndarray],
        titles: Optional[Sequence[str]] = None,
        figsize: Tuple[int, int] = (16, 4),
        show: bool = True,
    ) -> plt.Figure:
        n = len(images)
        titles = titles or [f"Channel {i+1}" for i in range(n)]

        fig, axes = plt.subplots(1, n, figsize=figsize)
        if n == 1:
            axes = [axes]

        # fixed range so 0 stays black and 255 stays white on every panel
        for ax, img, title in zip(axes, images, titles):
            ax.imshow(img, cmap="gray", vmin=0, vmax=255)
            ax.set_title(title)
            ax.axis("off")

        fig.tight_layout()
        if show:
            plt.show()
        return fig

    def show_split(self, combined: PixelGrid, result: SplitResult, show: bool = True) -> plt.Figure:
        return self.show_side_by_side(
            [combined.luminance, combined.alpha, result.metallic.luminance, result.roughness.luminance],
            titles=["Combined (metallic)", "Combined (smoothness)", "Metallic", "Roughness"],
            show=show,
        )

    def show_merge(
        self, metallic: PixelGrid, roughness: PixelGrid, merged: PixelGrid, show: bool = True
    ) -> plt.Figure:
        return self.show_side_by_side(
            [metallic.luminance, roughness.luminance, merged.luminance, merged.alpha],
            titles=["Metallic", "Roughness", "Merged (metallic)", "Merged (smoothness)"],
            show=show,
        )
