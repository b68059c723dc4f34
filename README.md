# msdfkit

Building blocks for working with multi-channel signed distance fields
(MSDF): 2D vector, range and signed-distance value types, multi-channel
float bitmaps backed by numpy, explicit edge colour assignment, and
encoders that write a distance field as text or raw binary data.

## Modules

- `msdfkit.geometry` – `Vector2` (alias `Point2`), `Range`,
  `SignedDistance`, `EdgeColor`, plus `dot_product` and `cross_product`.
- `msdfkit.bitmap` – `Bitmap`, an N-channel `float32` image with
  `width`, `height`, `channels`, `pixels`, `bitmap[x, y]` indexing,
  `copy()`, `invert()` and `Bitmap.from_array()`.
- `msdfkit.coloring` – `validate_edge_colors` and `apply_edge_colors`
  for colour sequences such as `"cmy,?,wc"`.
- `msdfkit.output` – `OutputFormat`, `OutputError`, `has_extension`,
  `deduce_format`, `format_text`, `format_text_float`, `to_bytes`,
  `to_float_bytes` and `write_output`.

## Examples

Vector and range arithmetic:

```python
from msdfkit.geometry import Vector2, Range, dot_product, cross_product

a = Vector2(3, 4)
print(a.length())                       # 5.0
print(dot_product(a, Vector2(1, 0)))    # 3.0
print(cross_product(a, Vector2(1, 0)))  # -4.0

r = Range.symmetric(4)                  # lower -2.0, upper 2.0
print((r / 2).lower, (r / 2).upper)     # -1.0 1.0
```

`SignedDistance` values order by absolute distance first and by `dot`
second, so `min()` picks the closest edge.

Assigning edge colours explicitly. Each contour is an object with an
`edges` sequence (or a plain sequence of edges), and each edge has a
writable `color` attribute:

```python
from types import SimpleNamespace
from msdfkit.coloring import validate_edge_colors, apply_edge_colors

edges = [SimpleNamespace(color=None) for _ in range(3)]
apply_edge_colors([edges], validate_edge_colors("cm,"))
# edges[0] -> CYAN, edges[1] -> MAGENTA, edges[2] -> WHITE
```

Letters C, M, Y and W (either case) colour consecutive edges of the
current contour; a comma moves to the next contour and, unless `?`
appeared for that contour, sets its remaining edges to white.
`validate_edge_colors` raises `ValueError` for any other character
except space.

Bitmaps and output:

```python
from msdfkit.bitmap import Bitmap
from msdfkit.output import OutputFormat, deduce_format, format_text, write_output

bmp = Bitmap(4, 2, 3)                  # width, height, channels; all zeros
bmp.invert()                           # every value becomes 1 - value
print(format_text(bmp))                # two rows of twelve "FF" bytes

print(deduce_format("field.bin"))      # OutputFormat.BINARY
write_output(bmp, "field.txt")         # format deduced from ".txt"
write_output(bmp, None)                # text to standard output
```

Text output quantizes each value `v` to `int(v * 256)` clamped to
0–255 and prints it as two hex digits; `textfloat` prints `%.9g`
values; binary output writes one byte per value or 32-bit floats in
little- or big-endian order. Failures raise `OutputError`.

## What this package does not do

- It does not load shapes (text descriptions, SVG files or font glyphs)
  and does not compute distance fields; it only provides the value types,
  bitmaps, colouring and output used around such a generator.
- It has no command-line program.
- It cannot write PNG, BMP, TIFF, RGBA or FL32 images: `write_output`
  raises `OutputError` for those formats, and `deduce_format` raises it
  for `.png` file names.

## Requirements

Python 3.10 or later and numpy. Tests use pytest (`pip install .[test]`).