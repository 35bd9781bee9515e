"""Reading and writing BMP files whose pixel data is processed as raw bytes."""

from __future__ import annotations

import dataclasses
import struct
from dataclasses import dataclass
from pathlib import Path

_HEADER_FORMAT = struct.Struct("<2sIHHIIiiHHIIiiII")
HEADER_SIZE = _HEADER_FORMAT.size
_UINT32_MASK = 0xFFFFFFFF

_RGB_BANNER = "===== BMP RGB Pixel Data ====="
_RGB_FOOTER = "=============================="
_MISSING_PIXEL = "(?, ?, ?) "


@dataclass
class BmpHeader:
    """The BMP file header followed by a BITMAPINFOHEADER, 54 bytes in all."""

    signature: bytes = b"BM"
    file_size: int = 0
    reserved1: int = 0
    reserved2: int = 0
    pixel_offset: int = HEADER_SIZE
    dib_header_size: int = 40
    width: int = 0
    height: int = 0
    planes: int = 1
    bits_per_pixel: int = 24
    compression: int = 0
    image_size: int = 0
    x_pixels_per_m: int = 0
    y_pixels_per_m: int = 0
    colors_used: int = 0
    colors_important: int = 0

    @classmethod
    def unpack(cls, data: bytes) -> BmpHeader:
        """Decode the header from the first 54 bytes of ``data``."""
        if len(data) < HEADER_SIZE:
            raise ValueError(
                f"BMP header needs {HEADER_SIZE} bytes, got {len(data)}"
            )
        return cls(*_HEADER_FORMAT.unpack_from(bytes(data)))

    def pack(self) -> bytes:
        """Encode the header as 54 little-endian bytes."""
        return _HEADER_FORMAT.pack(*dataclasses.astuple(self))


def read_bmp(path: str | Path) -> tuple[BmpHeader, bytes, bytes]:
    """Read a BMP file.

    Returns the decoded header, the raw bytes before the pixel offset, and
    every byte from the pixel offset to the end of the file.
    """
    content = Path(path).read_bytes()
    header = BmpHeader.unpack(content)
    offset = header.pixel_offset
    if offset > len(content):
        raise ValueError(
            f"pixel offset {offset} lies beyond the end of the file ({len(content)} bytes)"
        )
    return header, content[:offset], content[offset:]


def write_bmp(path: str | Path, header: bytes, pixels: bytes) -> None:
    """Write raw header bytes followed by pixel bytes."""
    with open(path, "wb") as out:
        out.write(bytes(header))
        out.write(bytes(pixels))


def write_bmp_with_header(path: str | Path, header: BmpHeader, pixels: bytes) -> None:
    """Write a BMP with sizes in ``header`` adjusted to ``pixels``.

    Any gap between the 54-byte header and the pixel offset is filled with
    zero bytes. ``header`` itself is left unchanged.
    """
    image_size = len(pixels) & _UINT32_MASK
    adjusted = dataclasses.replace(
        header,
        image_size=image_size,
        file_size=(header.pixel_offset + image_size) & _UINT32_MASK,
    )
    gap = max(adjusted.pixel_offset - HEADER_SIZE, 0)
    with open(path, "wb") as out:
        out.write(adjusted.pack())
        out.write(bytes(gap))
        out.write(bytes(pixels))


def _row_size(width: int) -> int:
    return ((width * 3 + 3) // 4) * 4


def invert_image(header: BmpHeader, pixels: bytes) -> bytes:
    """Return a copy of 24-bit ``pixels`` with every colour channel inverted.

    Row padding bytes are left as they are.
    """
    result = bytearray(pixels)
    row_size = _row_size(header.width)
    for y in range(header.height):
        row_start = y * row_size
        for x in range(header.width):
            i = row_start + x * 3
            if i + 2 >= len(result):
                raise IndexError(f"pixel ({x}, {y}) lies beyond the pixel data")
            result[i : i + 3] = bytes(255 - b for b in result[i : i + 3])
    return bytes(result)


def new_bmp_filename(prev_name: str, method: str) -> str:
    """Insert ``_<method>`` before the ``.bmp`` suffix of ``prev_name``."""
    if not prev_name.endswith(".bmp"):
        raise ValueError("Not a BMP file!")
    return f"{prev_name[: -len('.bmp')]}_{method}.bmp"


def format_rgb_values(pixels: bytes, width: int, height: int) -> str:
    """Render 24-bit pixel data as a grid of (R,G,B) triples, top row first."""
    row_size = _row_size(width)
    lines = [_RGB_BANNER]
    for y in range(height - 1, -1, -1):
        row_start = y * row_size
        cells = []
        for x in range(width):
            i = row_start + x * 3
            if i + 2 >= len(pixels):
                cells.append(_MISSING_PIXEL)
                continue
            b, g, r = pixels[i], pixels[i + 1], pixels[i + 2]
            cells.append(f"({r:3d},{g:3d},{b:3d}) ")
        lines.append("".join(cells))
    lines.append(_RGB_FOOTER)
    return "\n".join(lines) + "\n"


def print_rgb_values(pixels: bytes, width: int, height: int) -> None:
    """Print the grid produced by :func:`format_rgb_values`."""
    print(format_rgb_values(pixels, width, height), end="")