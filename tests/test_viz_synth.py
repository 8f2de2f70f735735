"""Preview figures and synthetic sample textures."""

import matplotlib.pyplot as plt
import numpy as np

from pbrtex.channels import ChannelMerger, ChannelSplitter
from pbrtex.synth import make_combined_texture
from pbrtex.viz import Visualizer


class TestVisualizer:
    def test_split_preview_panels(self):
        combined = make_combined_texture(seed=0, size=(16, 16))
        result = ChannelSplitter().run(combined)
        fig = Visualizer().show_split(combined, result, show=False)
        try:
            assert len(fig.axes) == 4
            assert [ax.get_title() for ax in fig.axes][-1] == "Roughness"
        finally:
            plt.close(fig)

    def test_merge_preview_panels(self):
        combined = make_combined_texture(seed=1, size=(16, 16))
        result = ChannelSplitter().run(combined)
        merged = ChannelMerger().run(result.metallic, result.roughness)
        fig = Visualizer().show_merge(result.metallic, result.roughness, merged, show=False)
        try:
            assert len(fig.axes) == 4
        finally:
            plt.close(fig)

    def test_single_panel(self):
        fig = Visualizer.show_side_by_side([np.zeros((4, 4), np.uint8)], show=False)
        try:
            assert len(fig.axes) == 1
        finally:
            plt.close(fig)


class TestSynth:
    def test_deterministic(self):
        a = make_combined_texture(seed=7, size=(20, 10))
        b = make_combined_texture(seed=7, size=(20, 10))
        assert np.array_equal(a.pixels, b.pixels)

    def test_layout_and_size(self):
        tex = make_combined_texture(seed=3, size=(20, 10))
        assert tex.has_alpha
        assert tex.size == (20, 10)
        assert tex.alpha.min() == 0 and tex.alpha.max() == 255
