"""Byte order conversion, bit reversal and unaligned integer access."""

from __future__ import annotations

import sys
from typing import Literal

ByteOrder = Literal["little", "big"]

_LOAD_STORE_SIZES = frozenset({2, 3, 4, 6, 8})
_CONVERSION_WIDTHS = frozenset({16, 32, 64})
_BYTE_ORDERS = ("little", "big")


def _mask(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def _swap(value: int, nbytes: int) -> int:
    value = _mask(value, nbytes * 8)
    return int.from_bytes(value.to_bytes(nbytes, "little"), "big")


def _reverse_bits(value: int, bits: int) -> int:
    value = _mask(value, bits)
    return int(format(value, f"0{bits}b")[::-1], 2)


def swap16(value: int) -> int:
    """Reverse the byte order of a 16-bit word."""
    return _swap(value, 2)


def swap32(value: int) -> int:
    """Reverse the byte order of a 32-bit word."""
    return _swap(value, 4)


def swap64(value: int) -> int:
    """Reverse the byte order of a 64-bit word."""
    return _swap(value, 8)


def reverse4(value: int) -> int:
    """Reverse the bit order of a 4-bit value."""
    return _reverse_bits(value, 4)


def reverse8(value: int) -> int:
    """Reverse the bit order of a byte."""
    return _reverse_bits(value, 8)


def reverse16(value: int) -> int:
    """Reverse the bit order of a 16-bit word."""
    return _reverse_bits(value, 16)


def reverse32(value: int) -> int:
    """Reverse the bit order of a 32-bit word."""
    return _reverse_bits(value, 32)


def reverse64(value: int) -> int:
    """Reverse the bit order of a 64-bit word."""
    return _reverse_bits(value, 64)


def _check_layout(size: int, byteorder: str) -> None:
    if size not in _LOAD_STORE_SIZES:
        raise ValueError(
            f"unsupported integer size {size}; expected one of "
            f"{sorted(_LOAD_STORE_SIZES)}"
        )
    if byteorder not in _BYTE_ORDERS:
        raise ValueError(f"byteorder must be 'little' or 'big', not {byteorder!r}")


def load_uint(
    data: bytes | bytearray | memoryview,
    size: int,
    byteorder: ByteOrder,
    offset: int = 0,
) -> int:
    """Read an unsigned integer of ``size`` bytes from ``data`` at ``offset``."""
    _check_layout(size, byteorder)
    if offset < 0:
        raise ValueError("offset must not be negative")
    chunk = bytes(data[offset:offset + size])
    if len(chunk) != size:
        raise ValueError(
            f"need {size} bytes at offset {offset}, only {len(chunk)} available"
        )
    return int.from_bytes(chunk, byteorder)


def store_uint(value: int, size: int, byteorder: ByteOrder) -> bytes:
    """Encode the low ``size`` bytes of ``value`` in the given byte order."""
    _check_layout(size, byteorder)
    return _mask(value, size * 8).to_bytes(size, byteorder)


def _convert(value: int, bits: int, target: str) -> int:
    if bits not in _CONVERSION_WIDTHS:
        raise ValueError(f"bits must be 16, 32 or 64, not {bits}")
    if sys.byteorder == target:
        return _mask(value, bits)
    return _swap(value, bits // 8)


def host_to_big(value: int, bits: int) -> int:
    """Convert a value from host byte order to big-endian (network) order."""
    return _convert(value, bits, "big")


def big_to_host(value: int, bits: int) -> int:
    """Convert a value from big-endian (network) order to host byte order."""
    return _convert(value, bits, "big")


def host_to_little(value: int, bits: int) -> int:
    """Convert a value from host byte order to little-endian order."""
    return _convert(value, bits, "little")


def little_to_host(value: int, bits: int) -> int:
    """Convert a value from little-endian order to host byte order."""
    return _convert(value, bits, "little")