from .grid import PixelGrid, LUMA, LUMA_ALPHA
from .errors import (
    TextureError, TextureNotFoundError, DecodeError, MissingAlphaChannelError,
    DimensionMismatchError, EncodeError, WriteError, PathDerivationError,
)
from .helpers import ConvertConfig, ensure_dir, load_texture, encode_png, write_textures
from .channels import ChannelSplitter, ChannelMerger, SplitResult
from .paths import derive_split_paths, derive_merge_path
from .pipeline import TextureConverter
from .viz import Visualizer

__all__ = [
    "PixelGrid", "LUMA", "LUMA_ALPHA",
    "TextureError", "TextureNotFoundError", "DecodeError", "MissingAlphaChannelError",
    "DimensionMismatchError", "EncodeError", "WriteError", "PathDerivationError",
    "ConvertConfig", "ensure_dir", "load_texture", "encode_png", "write_textures",
    "ChannelSplitter", "ChannelMerger", "SplitResult",
    "derive_split_paths", "derive_merge_path",
    "TextureConverter",
    "Visualizer",
]
