from __future__ import annotations
import os
from typing import Optional, Tuple


class TextureError(Exception):
    """Base class for every failure of a split or merge run."""


class TextureNotFoundError(TextureError, FileNotFoundError):
    def __init__(self, path: str | os.PathLike) -> None:
        super().__init__(f"Texture not found: {path}")
        self.path = path


class DecodeError(TextureError):
    """Input exists but could not be turned into an 8-bit pixel grid."""


class MissingAlphaChannelError(TextureError):
    def __init__(self, path: Optional[str | os.PathLike] = None) -> None:
        where = f": {path}" if path is not None else ""
        super().__init__(f"Input image does not have an alpha channel{where}")
        self.path = path


class DimensionMismatchError(TextureError):
    def __init__(self, expected: Tuple[int, int], actual: Tuple[int, int]) -> None:
        super().__init__(
            "Input images are not the same size: "
            f"expected {expected[0]}x{expected[1]}, got {actual[0]}x{actual[1]}"
        )
        self.expected = expected
        self.actual = actual


class EncodeError(TextureError):
    """A pixel grid could not be encoded to the output container."""


class WriteError(TextureError):
    """Encoded output could not be written to disk."""


class PathDerivationError(TextureError):
    def __init__(self, path: str | os.PathLike) -> None:
        super().__init__(f"Cannot determine a file name from path: {str(path)!r}")
        self.path = path
