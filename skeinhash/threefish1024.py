"""The Threefish-1024 tweakable block cipher."""

from __future__ import annotations

from collections.abc import Sequence

from .threefish256 import _Cipher, _Variant
from .tweak import BLOCK_SIZE_1024

# Mix operations per round as (target, source, rotation); the pairs in one
# round are disjoint, so their order within the round does not matter.
_ROUND_GROUPS = (
    (
        ((0, 1, 24), (2, 3, 13), (4, 5, 8), (6, 7, 47),
         (8, 9, 8), (10, 11, 17), (12, 13, 22), (14, 15, 37)),
        ((0, 9, 38), (2, 13, 19), (6, 11, 10), (4, 15, 55),
         (10, 7, 49), (12, 3, 18), (14, 5, 23), (8, 1, 52)),
        ((0, 7, 33), (2, 5, 4), (4, 3, 51), (6, 1, 13),
         (12, 15, 34), (14, 13, 41), (8, 11, 59), (10, 9, 17)),
        ((0, 15, 5), (2, 11, 20), (6, 13, 48), (4, 9, 41),
         (14, 1, 47), (8, 5, 28), (10, 3, 16), (12, 7, 25)),
    ),
    (
        ((0, 1, 41), (2, 3, 9), (4, 5, 37), (6, 7, 31),
         (8, 9, 12), (10, 11, 47), (12, 13, 44), (14, 15, 30)),
        ((0, 9, 16), (2, 13, 34), (6, 11, 56), (4, 15, 51),
         (10, 7, 4), (12, 3, 53), (14, 5, 42), (8, 1, 41)),
        ((0, 7, 31), (2, 5, 44), (4, 3, 47), (6, 1, 46),
         (12, 15, 19), (14, 13, 42), (8, 11, 44), (10, 9, 25)),
        ((0, 15, 9), (2, 11, 48), (6, 13, 35), (4, 9, 52),
         (14, 1, 23), (8, 5, 31), (10, 3, 37), (12, 7, 20)),
    ),
)

_VARIANT = _Variant(16, 20, _ROUND_GROUPS)


def encrypt1024(block: Sequence[int], keys: Sequence[int], tweak: Sequence[int]) -> list[int]:
    """Encrypt sixteen words with an extended key of seventeen words and tweak of three."""
    return _VARIANT.encrypt(block, keys, tweak)


def decrypt1024(block: Sequence[int], keys: Sequence[int], tweak: Sequence[int]) -> list[int]:
    """Invert :func:`encrypt1024` for the same extended key and tweak."""
    return _VARIANT.decrypt(block, keys, tweak)


def ubi1024(block: Sequence[int], chain: Sequence[int], tweak: Sequence[int]) -> list[int]:
    """Run one UBI step and return the new sixteen chain words."""
    return _VARIANT.ubi(block, chain, tweak)


class Threefish1024(_Cipher):
    """Threefish-1024 with a fixed 128-byte key and 16-byte tweak."""

    block_size = BLOCK_SIZE_1024
    _variant = _VARIANT

    def encrypt(self, block: bytes) -> bytes:
        """Encrypt one 128-byte block."""
        return self._encrypt(block)

    def decrypt(self, block: bytes) -> bytes:
        """Decrypt one 128-byte block."""
        return self._decrypt(block)