"""RGBA bitmaps and writing them as 24-bit BMP files."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

_HEADER_SIZE = 54


@dataclass
class Bitmap:
    """Pixels stored row by row from the top, four bytes (R, G, B, A) each."""

    width: int
    height: int
    data: bytearray = field(repr=False)

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError("bitmap dimensions must not be negative")
        self.data = bytearray(self.data)
        if len(self.data) != self.width * self.height * 4:
            raise ValueError("pixel data does not match bitmap dimensions")

    @classmethod
    def blank(cls, width, height):
        """Create a bitmap filled with zero bytes."""
        return cls(width, height, bytearray(width * height * 4))


def flip_y(bitmap):
    """Return a new bitmap with the row order reversed."""
    stride = bitmap.width * 4
    rows = [
        bitmap.data[y * stride : (y + 1) * stride] for y in range(bitmap.height)
    ]
    return Bitmap(bitmap.width, bitmap.height, b"".join(reversed(rows)))


def encode_bmp(bitmap):
    """Encode the bitmap as an uncompressed bottom-up 24-bit BMP."""
    width, height = bitmap.width, bitmap.height
    filesize = _HEADER_SIZE + 3 * width * height
    out = bytearray(struct.pack("<2sI4xI", b"BM", filesize & 0xFFFFFFFF, _HEADER_SIZE))
    out += struct.pack("<IiiHH24x", 40, width, height, 1, 24)
    padding = bytes((4 - (width * 3) % 4) % 4)
    stride = width * 4
    for y in reversed(range(height)):
        row = bitmap.data[y * stride : (y + 1) * stride]
        bgr = bytearray(3 * width)
        bgr[0::3] = row[2::4]
        bgr[1::3] = row[1::4]
        bgr[2::3] = row[0::4]
        out += bgr
        out += padding
    return bytes(out)


def write_bmp(bitmap, path):
    """Write the bitmap to path as a BMP file."""
    with open(path, "wb") as handle:
        handle.write(encode_bmp(bitmap))