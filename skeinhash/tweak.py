"""Threefish constants, tweak arithmetic and little-endian word conversion."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Sequence

MASK64 = (1 << 64) - 1

#: Size of a Threefish tweak in bytes.
TWEAK_SIZE = 16

#: Key schedule constant.
C240 = 0x1BD11BDAA9FC1A22

#: Block sizes of the three Threefish variants, in bytes.
BLOCK_SIZE_256 = 32
BLOCK_SIZE_512 = 64
BLOCK_SIZE_1024 = 128


def increment_tweak(tweak: Sequence[int], counter: int) -> list[int]:
    """Return ``tweak`` with its position field advanced by ``counter`` bytes.

    The first word holds the low 64 bits of the position. When adding the
    counter overflows it, the second word is incremented and reduced to its
    low 32 bits, so a message may be up to 2**96 - 1 bytes long.
    """
    first, second, *rest = tweak
    total = first + counter
    if total > MASK64:
        second = (second + 1) & 0xFFFFFFFF
    return [total & MASK64, second, *rest]


def bytes_to_words(data: bytes) -> list[int]:
    """Split ``data`` into little-endian unsigned 64-bit words."""
    if len(data) % 8:
        raise ValueError(f"length {len(data)} is not a multiple of 8")
    return list(struct.unpack(f"<{len(data) // 8}Q", data))


def words_to_bytes(words: Iterable[int]) -> bytes:
    """Join unsigned 64-bit words into little-endian bytes."""
    values = list(words)
    return struct.pack(f"<{len(values)}Q", *values)