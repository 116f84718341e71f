#
# PROJECT: hidden-line-surface
# MODULE: hidden_line_surface/encoders.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""TGA and BMP writers for a finished Canvas.

Both formats store the canvas pixels verbatim: one little-endian 32-bit
ARGB word per pixel, rows top to bottom. Only the headers differ.
"""

import logging
import struct
from pathlib import Path

from .canvas import Canvas

logger = logging.getLogger(__name__)

# id_len, cmap_type, img_type, cmap_spec[5], x_org, y_org, w, h, depth, desc
TGA_HEADER = struct.Struct("<BBB5sHHHHBB")
TGA_TRUECOLOR = 2
TGA_DESCRIPTOR = 0b00101000  # 8 alpha bits, top-left origin

# signature, file_size, reserved1, reserved2, pixel_offset
BMP_FILE_HEADER = struct.Struct("<2sIHHI")
# header_len, w, h, planes, depth, compression, image_len, xppm, yppm,
# colors, colors_important
BMP_INFO_HEADER = struct.Struct("<IiiHHIIiiII")
BMP_HEADER_SIZE = BMP_FILE_HEADER.size + BMP_INFO_HEADER.size

BYTES_PER_PIXEL = 4


def pixel_bytes(canvas: Canvas) -> bytes:
    """The canvas pixel buffer as packed little-endian uint32 words."""
    return struct.pack(f"<{len(canvas.pixels)}I", *canvas.pixels)


def encode_tga(canvas: Canvas) -> bytes:
    if not (0 < canvas.w <= 0xFFFF and 0 < canvas.h <= 0xFFFF):
        raise ValueError(
            f"TGA cannot hold a {canvas.w}x{canvas.h} image (max 65535x65535)")
    header = TGA_HEADER.pack(
        0, 0, TGA_TRUECOLOR, bytes(5),
        0, 0, canvas.w, canvas.h,
        BYTES_PER_PIXEL * 8, TGA_DESCRIPTOR)
    return header + pixel_bytes(canvas)


def encode_bmp(canvas: Canvas) -> bytes:
    image_length = canvas.w * canvas.h * BYTES_PER_PIXEL
    if canvas.w > 0x7FFFFFFF or canvas.h > 0x7FFFFFFF \
            or BMP_HEADER_SIZE + image_length > 0xFFFFFFFF:
        raise ValueError(f"BMP cannot hold a {canvas.w}x{canvas.h} image")

    data = bytearray()
    data.extend(BMP_FILE_HEADER.pack(
        b"BM", BMP_HEADER_SIZE + image_length, 0, 0, BMP_HEADER_SIZE))
    # Negative height marks the rows as top-down.
    data.extend(BMP_INFO_HEADER.pack(
        BMP_INFO_HEADER.size, canvas.w, -canvas.h, 1, BYTES_PER_PIXEL * 8,
        0, image_length, 0, 0, 0, 0))
    data.extend(pixel_bytes(canvas))
    return bytes(data)


def save_tga(canvas: Canvas, path) -> Path:
    path = Path(path)
    path.write_bytes(encode_tga(canvas))
    logger.info(f"Saved TGA image: {path}")
    return path


def save_bmp(canvas: Canvas, path) -> Path:
    path = Path(path)
    path.write_bytes(encode_bmp(canvas))
    logger.info(f"Saved BMP image: {path}")
    return path
