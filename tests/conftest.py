"""Shared fixtures for frequency screener tests."""

import struct
import zlib

import pytest


def _png_chunk(kind: bytes, data: bytes) -> bytes:
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", zlib.crc32(kind + data))


@pytest.fixture
def write_oversized_png():
    """Return a writer for a tiny PNG whose header claims 40000x40000 grayscale pixels."""

    def _write(path):
        header = struct.pack(">IIBBBBB", 40000, 40000, 8, 0, 0, 0, 0)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(
            b"\x89PNG\r\n\x1a\n"
            + _png_chunk(b"IHDR", header)
            + _png_chunk(b"IDAT", zlib.compress(b""))
            + _png_chunk(b"IEND", b"")
        )
        return path

    return _write
