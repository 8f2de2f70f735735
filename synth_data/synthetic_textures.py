import os

import cv2
import matplotlib.pyplot as plt

from pbrtex import Visualizer
from pbrtex.helpers import to_cv_image
from pbrtex.synth import make_combined_texture

# Output directory
os.makedirs("synthetic_textures", exist_ok=True)

# Three samples with different seeds; split/merge them with the pbrtex CLI
textures = [make_combined_texture(seed, size=(256, 256)) for seed in (1, 2, 3)]

for i, tex in enumerate(textures):
    cv2.imwrite(f"synthetic_textures/sample{i+1}MetallicSmoothness.png", to_cv_image(tex))

# Show metallic and smoothness planes side by side
viz = Visualizer()
panels, titles = [], []
for i, tex in enumerate(textures):
    panels += [tex.luminance, tex.alpha]
    titles += [f"Sample {i+1} metallic", f"Sample {i+1} smoothness"]
viz.show_side_by_side(panels, titles, figsize=(18, 3), show=False)
plt.show()
