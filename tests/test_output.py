import io

import numpy as np
import pytest

from msdfkit.bitmap import Bitmap
from msdfkit.output import (
    OutputError,
    OutputFormat,
    deduce_format,
    format_text,
    format_text_float,
    has_extension,
    to_bytes,
    to_float_bytes,
    write_output,
)


def _sample(channels=3):
    rng = np.random.default_rng(7)
    data = rng.uniform(-0.5, 1.5, size=(4, 5, channels)).astype(np.float32)
    return Bitmap.from_array(data)


def test_is_8bit():
    assert OutputFormat.PNG.is_8bit()
    assert OutputFormat.BMP.is_8bit()
    assert OutputFormat.RGBA.is_8bit()
    assert OutputFormat.TEXT.is_8bit()
    assert OutputFormat.BINARY.is_8bit()
    assert not OutputFormat.TIFF.is_8bit()
    assert not OutputFormat.FL32.is_8bit()
    assert not OutputFormat.TEXT_FLOAT.is_8bit()
    assert not OutputFormat.BINARY_FLOAT.is_8bit()
    assert not OutputFormat.AUTO.is_8bit()


def test_has_extension_case_insensitive():
    assert has_extension("output.PNG", ".png")
    assert has_extension("a.Tif", ".tif")
    assert not has_extension("output.png", ".bmp")
    assert not has_extension("png", ".png")


@pytest.mark.parametrize(
    "name, fmt",
    [
        ("x.bmp", OutputFormat.BMP),
        ("x.tiff", OutputFormat.TIFF),
        ("x.TIF", OutputFormat.TIFF),
        ("x.rgba", OutputFormat.RGBA),
        ("x.fl32", OutputFormat.FL32),
        ("x.txt", OutputFormat.TEXT),
        ("x.bin", OutputFormat.BINARY),
    ],
)
def test_deduce_format(name, fmt):
    assert deduce_format(name) is fmt


def test_deduce_format_errors():
    with pytest.raises(OutputError, match="Could not deduce format"):
        deduce_format("output.xyz")
    with pytest.raises(OutputError, match="PNG format is not available"):
        deduce_format("output.png")


def test_format_text_pinned():
    bitmap = Bitmap.from_array([[0.5, 1.0], [0.0, -1.0]])
    assert format_text(bitmap) == "80 FF\n00 00\n"


def test_format_text_quantization_bounds():
    bitmap = _sample()
    lines = format_text(bitmap).splitlines()
    assert len(lines) == bitmap.height
    flat = bitmap.pixels.reshape(bitmap.height, -1)
    for line, row in zip(lines, flat):
        fields = line.split(" ")
        assert len(fields) == bitmap.width * bitmap.channels
        for field, value in zip(fields, row):
            assert len(field) == 2
            byte = int(field, 16)
            assert 0 <= byte <= 255
            if 0 <= value < 255 / 256:
                assert byte / 256 <= value < (byte + 1) / 256


def test_format_text_float_round_trip():
    bitmap = _sample(4)
    lines = format_text_float(bitmap).splitlines()
    values = np.array([[float(f) for f in line.split(" ")] for line in lines], dtype=np.float32)
    assert np.array_equal(values, bitmap.pixels.reshape(bitmap.height, -1))


def test_to_bytes_matches_text():
    bitmap = _sample()
    data = to_bytes(bitmap)
    assert len(data) == bitmap.width * bitmap.height * bitmap.channels
    hex_values = [int(f, 16) for f in format_text(bitmap).split()]
    assert list(data) == hex_values


def test_to_float_bytes_round_trip():
    bitmap = _sample()
    little = to_float_bytes(bitmap)
    big = to_float_bytes(bitmap, big_endian=True)
    assert np.array_equal(np.frombuffer(little, dtype="<f4"), bitmap.pixels.ravel())
    assert np.array_equal(np.frombuffer(big, dtype=">f4"), bitmap.pixels.ravel())
    assert all(little[i : i + 4] == big[i : i + 4][::-1] for i in range(0, len(little), 4))


def test_write_output_stdout_text():
    bitmap = _sample()
    stream = io.StringIO()
    assert write_output(bitmap, None, OutputFormat.AUTO, stream) is OutputFormat.AUTO
    assert stream.getvalue() == format_text(bitmap)


def test_write_output_stdout_text_float():
    bitmap = _sample()
    stream = io.StringIO()
    write_output(bitmap, None, OutputFormat.TEXT_FLOAT, stream)
    assert stream.getvalue() == format_text_float(bitmap)


def test_write_output_stdout_unsupported():
    with pytest.raises(OutputError, match="Unsupported format for standard output"):
        write_output(_sample(), None, OutputFormat.BINARY, io.StringIO())


def test_write_output_text_file_auto(tmp_path):
    bitmap = _sample()
    path = tmp_path / "field.txt"
    assert write_output(bitmap, path) is OutputFormat.TEXT
    assert path.read_text(encoding="ascii") == format_text(bitmap)


def test_write_output_binary_files(tmp_path):
    bitmap = _sample()
    path = tmp_path / "field.bin"
    assert write_output(bitmap, path) is OutputFormat.BINARY
    assert path.read_bytes() == to_bytes(bitmap)
    write_output(bitmap, path, OutputFormat.BINARY_FLOAT)
    assert path.read_bytes() == to_float_bytes(bitmap)
    write_output(bitmap, path, OutputFormat.BINARY_FLOAT_BE)
    assert path.read_bytes() == to_float_bytes(bitmap, big_endian=True)


def test_write_output_undeducible(tmp_path):
    with pytest.raises(OutputError, match="Could not deduce format"):
        write_output(_sample(), tmp_path / "field.dat")


def test_write_output_unwritable(tmp_path):
    missing = tmp_path / "no" / "such" / "dir" / "field.txt"
    with pytest.raises(OutputError, match="Failed to write output text file"):
        write_output(_sample(), missing)
    with pytest.raises(OutputError, match="Failed to write output binary file"):
        write_output(_sample(), missing.with_suffix(".bin"))