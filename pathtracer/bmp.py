"""Writing RGBA pixel buffers as 32-bit top-down BMP files."""

from __future__ import annotations

from os import PathLike
from typing import Union

FILE_HEADER_SIZE = 14
DIB_HEADER_SIZE = 40
DATA_OFFSET = FILE_HEADER_SIZE + DIB_HEADER_SIZE
BITS_PER_PIXEL = 32


def little_endian_32(value: int) -> bytes:
    """The low 32 bits of value, least significant byte first."""
    return (value & 0xFFFFFFFF).to_bytes(4, "little")


def little_endian_16(value: int) -> bytes:
    """The low 16 bits of value, least significant byte first."""
    return (value & 0xFFFF).to_bytes(2, "little")


def encode_bmp(pixel_buffer: bytes, width: int, height: int) -> bytes:
    """Encode an RGBA buffer of width * height pixels as BMP file bytes."""
    pixel_bytes = width * height * 4
    if len(pixel_buffer) < pixel_bytes:
        raise ValueError(
            f"pixel buffer holds {len(pixel_buffer)} bytes, "
            f"{pixel_bytes} needed for {width}x{height}"
        )

    header = b"".join(
        [
            b"BM",
            little_endian_32(DATA_OFFSET + len(pixel_buffer)),
            little_endian_32(0),
            little_endian_32(DATA_OFFSET),
            little_endian_32(DIB_HEADER_SIZE),
            little_endian_32(width),
            little_endian_32(-height),  # negative: rows run top to bottom
            little_endian_16(1),
            little_endian_16(BITS_PER_PIXEL),
            little_endian_32(0),  # compression
            little_endian_32(0),  # raw bitmap size
            little_endian_32(0),  # horizontal resolution
            little_endian_32(0),  # vertical resolution
            little_endian_32(0),  # palette colours
            little_endian_32(0),  # important colours
        ]
    )

    source = bytes(pixel_buffer[:pixel_bytes])
    pixels = bytearray(source)
    pixels[0::4] = source[2::4]
    pixels[2::4] = source[0::4]
    return header + bytes(pixels)


def write_bmp(
    file_name: Union[str, PathLike],
    pixel_buffer: bytes,
    width: int,
    height: int,
) -> None:
    """Encode the buffer and write it to file_name."""
    data = encode_bmp(pixel_buffer, width, height)
    with open(file_name, "wb") as handle:
        handle.write(data)