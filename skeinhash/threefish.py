"""Selection of a Threefish variant by key length."""

from __future__ import annotations

from typing import Union

from .threefish256 import Threefish256
from .threefish512 import Threefish512
from .threefish1024 import Threefish1024
from .tweak import BLOCK_SIZE_256, BLOCK_SIZE_512, BLOCK_SIZE_1024

Threefish = Union[Threefish256, Threefish512, Threefish1024]

_VARIANTS = {
    BLOCK_SIZE_256: Threefish256,
    BLOCK_SIZE_512: Threefish512,
    BLOCK_SIZE_1024: Threefish1024,
}


def new_cipher(tweak: bytes, key: bytes) -> Threefish:
    """Return the Threefish cipher matching a 32-, 64- or 128-byte key.

    The tweak must be 16 bytes long.
    """
    try:
        variant = _VARIANTS[len(key)]
    except KeyError:
        raise ValueError("invalid key size") from None
    return variant(tweak, key)