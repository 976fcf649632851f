"""Fast non-cryptographic 64-bit hashes for integers, floats, strings and objects."""

from __future__ import annotations

import struct
from typing import Union

_MASK = (1 << 64) - 1

PRIME64_1 = 11400714785074694791
PRIME64_2 = 14029467366897019727
PRIME64_3 = 1609587929392839161
PRIME64_4 = 9650029242287828579
PRIME64_5 = 2870177450012600261

CITY_MUL = 0x9DDFEA08EB382D69
DJB2_SEED = 5381

BytesLike = Union[bytes, bytearray, memoryview, str]


def _rotl(value: int, bits: int) -> int:
    return ((value << bits) | (value >> (64 - bits))) & _MASK


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _load64(data: bytes, offset: int) -> int:
    """Read 8 little-endian bytes at ``offset``; bytes outside ``data`` count as zero."""
    size = len(data)
    chunk = bytes(data[i] if 0 <= i < size else 0 for i in range(offset, offset + 8))
    return int.from_bytes(chunk, "little")


def xx_hash(x: int) -> int:
    """Mix a 64-bit integer; ``x`` is taken modulo 2**64."""
    h = (PRIME64_5 + 8) & _MASK
    h = (h + (x & _MASK) * PRIME64_3) & _MASK
    h = (_rotl(h, 23) * PRIME64_2 + PRIME64_4) & _MASK
    h ^= h >> 33
    h = (h * PRIME64_2) & _MASK
    h ^= h >> 29
    h = (h * PRIME64_3) & _MASK
    h ^= h >> 32
    return h


def city_hash(data: BytesLike) -> int:
    """A short-string hash in the style of CityHash."""
    raw = _as_bytes(data)
    n = len(raw)
    a = n
    b = (n * 5) & _MASK
    c = 9
    d = b
    if n <= 16:
        a = _load64(raw, 0)
        b = _load64(raw, n - 8)
    else:
        a = _load64(raw, 0)
        b = _load64(raw, 8)
        c = _load64(raw, n - 8)
        d = _load64(raw, n - 16)

    a = (a + b) & _MASK
    a = _rotl(a, 43)
    a = (a + c) & _MASK
    a = (a * 5 + 0x52DCE729) & _MASK
    d ^= a
    d = _rotl(d, 44)
    d = (d + b) & _MASK
    return (d * CITY_MUL) & _MASK


def djb2_hash(data: BytesLike) -> int:
    """The classic djb2 hash, truncated to 64 bits."""
    h = DJB2_SEED
    for byte in _as_bytes(data):
        h = (((h << 5) + h) + byte) & _MASK
    return h


def string_get_hash(data: BytesLike) -> int:
    """Hash a string: djb2 for more than 32 bytes, the city hash otherwise."""
    raw = _as_bytes(data)
    if len(raw) > 32:
        return djb2_hash(raw)
    return city_hash(raw)


def float64_get_hash(x: float) -> int:
    """Hash the bit pattern of a double."""
    (bits,) = struct.unpack("<Q", struct.pack("<d", float(x)))
    return xx_hash(bits)


def float32_get_hash(x: float) -> int:
    """Round to single precision, widen back to double and hash that."""
    (single,) = struct.unpack("<f", struct.pack("<f", float(x)))
    return float64_get_hash(single)


def get_hash(value: object) -> int:
    """Pick a hash by the value's type; other objects hash by identity."""
    if isinstance(value, (str, bytes, bytearray, memoryview)):
        return string_get_hash(value)
    if isinstance(value, int):
        return xx_hash(value)
    if isinstance(value, float):
        return float64_get_hash(value)
    return xx_hash(id(value))