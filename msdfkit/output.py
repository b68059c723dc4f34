"""Writing distance field bitmaps as text or raw binary output."""

from __future__ import annotations

import enum
import sys
from pathlib import Path
from typing import TextIO, Union

import numpy as np

from .bitmap import Bitmap

PathLike = Union[str, Path]


class OutputError(Exception):
    """Raised when a distance field cannot be written in the requested form."""


class OutputFormat(enum.Enum):
    """Output formats for a generated distance field."""

    AUTO = "auto"
    PNG = "png"
    BMP = "bmp"
    TIFF = "tiff"
    RGBA = "rgba"
    FL32 = "fl32"
    TEXT = "text"
    TEXT_FLOAT = "textfloat"
    BINARY = "bin"
    BINARY_FLOAT = "binfloat"
    BINARY_FLOAT_BE = "binfloatbe"

    def is_8bit(self) -> bool:
        """Whether the format stores each channel value in 8 bits."""
        return self in _EIGHT_BIT


_EIGHT_BIT = frozenset(
    {OutputFormat.PNG, OutputFormat.BMP, OutputFormat.RGBA, OutputFormat.TEXT, OutputFormat.BINARY}
)

_IMAGE_FORMATS = frozenset(
    {OutputFormat.PNG, OutputFormat.BMP, OutputFormat.TIFF, OutputFormat.RGBA, OutputFormat.FL32}
)

_UPPER = str.maketrans("abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")


def has_extension(path: PathLike, ext: str) -> bool:
    """Whether ``path`` ends with ``ext``, comparing ASCII letters case-insensitively."""
    return str(path).translate(_UPPER).endswith(ext.translate(_UPPER))


def deduce_format(filename: PathLike) -> OutputFormat:
    """Choose an output format from the extension of ``filename``."""
    if has_extension(filename, ".png"):
        raise OutputError("PNG format is not available in core-only version.")
    if has_extension(filename, ".bmp"):
        return OutputFormat.BMP
    if has_extension(filename, ".tiff") or has_extension(filename, ".tif"):
        return OutputFormat.TIFF
    if has_extension(filename, ".rgba"):
        return OutputFormat.RGBA
    if has_extension(filename, ".fl32"):
        return OutputFormat.FL32
    if has_extension(filename, ".txt"):
        return OutputFormat.TEXT
    if has_extension(filename, ".bin"):
        return OutputFormat.BINARY
    raise OutputError("Could not deduce format from output file name.")


def _rows(bitmap: Bitmap) -> np.ndarray:
    return bitmap.pixels.reshape(bitmap.height, bitmap.width * bitmap.channels)


def _to_bytes_array(values: np.ndarray) -> np.ndarray:
    scaled = np.nan_to_num(values.astype(np.float64) * 256.0, nan=0.0)
    truncated = np.trunc(np.clip(scaled, -1.0, 256.0))
    return np.clip(truncated, 0, 255).astype(np.uint8)


def format_text(bitmap: Bitmap) -> str:
    """Render channel values as rows of two-digit hexadecimal bytes."""
    lines = []
    for row in _to_bytes_array(_rows(bitmap)):
        lines.append(" ".join(f"{int(v):02X}" for v in row) + "\n")
    return "".join(lines)


def format_text_float(bitmap: Bitmap) -> str:
    """Render channel values as rows of floating-point numbers."""
    lines = []
    for row in _rows(bitmap):
        lines.append(" ".join(format(float(v), ".9g") for v in row) + "\n")
    return "".join(lines)


def to_bytes(bitmap: Bitmap) -> bytes:
    """Return channel values quantized to one byte each, in memory order."""
    return _to_bytes_array(bitmap.pixels).tobytes()


def to_float_bytes(bitmap: Bitmap, big_endian: bool = False) -> bytes:
    """Return channel values as 32-bit floats in the chosen byte order."""
    dtype = ">f4" if big_endian else "<f4"
    return bitmap.pixels.astype(dtype).tobytes()


def write_output(
    bitmap: Bitmap,
    filename: PathLike | None,
    fmt: OutputFormat = OutputFormat.AUTO,
    stream: TextIO | None = None,
) -> OutputFormat:
    """Write ``bitmap`` to ``filename``, or to ``stream`` if no file name is given.

    Returns the format actually used. Raises OutputError on failure.
    """
    if filename is None:
        out = sys.stdout if stream is None else stream
        if fmt in (OutputFormat.AUTO, OutputFormat.TEXT):
            out.write(format_text(bitmap))
        elif fmt is OutputFormat.TEXT_FLOAT:
            out.write(format_text_float(bitmap))
        else:
            raise OutputError("Unsupported format for standard output.")
        return fmt

    if fmt is OutputFormat.AUTO:
        fmt = deduce_format(filename)

    if fmt in (OutputFormat.TEXT, OutputFormat.TEXT_FLOAT):
        text = format_text(bitmap) if fmt is OutputFormat.TEXT else format_text_float(bitmap)
        try:
            with open(filename, "w", encoding="ascii") as file:
                file.write(text)
        except OSError as exc:
            raise OutputError("Failed to write output text file.") from exc
        return fmt

    if fmt in (OutputFormat.BINARY, OutputFormat.BINARY_FLOAT, OutputFormat.BINARY_FLOAT_BE):
        if fmt is OutputFormat.BINARY:
            data = to_bytes(bitmap)
        else:
            data = to_float_bytes(bitmap, big_endian=fmt is OutputFormat.BINARY_FLOAT_BE)
        try:
            with open(filename, "wb") as file:
                file.write(data)
        except OSError as exc:
            raise OutputError("Failed to write output binary file.") from exc
        return fmt

    if fmt in _IMAGE_FORMATS:
        raise OutputError(f"{fmt.name} image output is not available in this version.")
    raise OutputError(f"Unsupported output format: {fmt.name}.")