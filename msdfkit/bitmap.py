"""Multi-channel floating-point image bitmaps."""

from __future__ import annotations

from typing import Any

import numpy as np


class Bitmap:
    """A 2D image with a fixed number of float channels per pixel.

    Pixels are addressed as ``bitmap[x, y]``; rows are stored bottom to top
    in the order they are generated, row ``y`` first in memory.
    """

    __slots__ = ("_data",)

    def __init__(self, width: int = 0, height: int = 0, channels: int = 1) -> None:
        if width < 0 or height < 0:
            raise ValueError("bitmap dimensions must not be negative")
        if channels < 1:
            raise ValueError("bitmap must have at least one channel")
        self._data = np.zeros((height, width, channels), dtype=np.float32)

    @classmethod
    def from_array(cls, array: Any) -> Bitmap:
        """Create a bitmap holding a copy of a (height, width[, channels]) array."""
        data = np.array(array, dtype=np.float32)
        if data.ndim == 2:
            data = data[:, :, np.newaxis]
        if data.ndim != 3 or data.shape[2] < 1:
            raise ValueError("array must have shape (height, width) or (height, width, channels)")
        bitmap = cls.__new__(cls)
        bitmap._data = data
        return bitmap

    @property
    def width(self) -> int:
        """Bitmap width in pixels."""
        return self._data.shape[1]

    @property
    def height(self) -> int:
        """Bitmap height in pixels."""
        return self._data.shape[0]

    @property
    def channels(self) -> int:
        """Number of channels per pixel."""
        return self._data.shape[2]

    @property
    def pixels(self) -> np.ndarray:
        """The underlying (height, width, channels) array."""
        return self._data

    def _check(self, key: Any) -> tuple[int, int]:
        try:
            x, y = key
        except (TypeError, ValueError):
            raise TypeError("bitmap index must be an (x, y) pair") from None
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} bitmap")
        return int(x), int(y)

    def __getitem__(self, key: tuple[int, int]) -> np.ndarray:
        x, y = self._check(key)
        return self._data[y, x]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        x, y = self._check(key)
        self._data[y, x] = value

    def copy(self) -> Bitmap:
        """Return an independent copy of the bitmap."""
        return Bitmap.from_array(self._data)

    def invert(self) -> None:
        """Replace every channel value v with 1 - v, in place."""
        np.subtract(np.float32(1.0), self._data, out=self._data)

    def __repr__(self) -> str:
        return f"Bitmap(width={self.width}, height={self.height}, channels={self.channels})"