"""The Threefish-512 tweakable block cipher."""

from __future__ import annotations

from collections.abc import Sequence

from .threefish256 import _Cipher, _Variant
from .tweak import BLOCK_SIZE_512

# Mix operations per round as (target, source, rotation); the pairs in one
# round are disjoint, so their order within the round does not matter.
_ROUND_GROUPS = (
    (
        ((0, 1, 46), (2, 3, 36), (4, 5, 19), (6, 7, 37)),
        ((2, 1, 33), (4, 7, 27), (6, 5, 14), (0, 3, 42)),
        ((4, 1, 17), (6, 3, 49), (0, 5, 36), (2, 7, 39)),
        ((6, 1, 44), (0, 7, 9), (2, 5, 54), (4, 3, 56)),
    ),
    (
        ((0, 1, 39), (2, 3, 30), (4, 5, 34), (6, 7, 24)),
        ((2, 1, 13), (4, 7, 50), (6, 5, 10), (0, 3, 17)),
        ((4, 1, 25), (6, 3, 29), (0, 5, 39), (2, 7, 43)),
        ((6, 1, 8), (0, 7, 35), (2, 5, 56), (4, 3, 22)),
    ),
)

_VARIANT = _Variant(8, 18, _ROUND_GROUPS)


def encrypt512(block: Sequence[int], keys: Sequence[int], tweak: Sequence[int]) -> list[int]:
    """Encrypt eight words with an extended key of nine words and tweak of three."""
    return _VARIANT.encrypt(block, keys, tweak)


def decrypt512(block: Sequence[int], keys: Sequence[int], tweak: Sequence[int]) -> list[int]:
    """Invert :func:`encrypt512` for the same extended key and tweak."""
    return _VARIANT.decrypt(block, keys, tweak)


def ubi512(block: Sequence[int], chain: Sequence[int], tweak: Sequence[int]) -> list[int]:
    """Run one UBI step and return the new eight chain words."""
    return _VARIANT.ubi(block, chain, tweak)


class Threefish512(_Cipher):
    """Threefish-512 with a fixed 64-byte key and 16-byte tweak."""

    block_size = BLOCK_SIZE_512
    _variant = _VARIANT

    def encrypt(self, block: bytes) -> bytes:
        """Encrypt one 64-byte block."""
        return self._encrypt(block)

    def decrypt(self, block: bytes) -> bytes:
        """Decrypt one 64-byte block."""
        return self._decrypt(block)