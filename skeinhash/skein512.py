"""Skein-512: Skein hashing over the Threefish-512 block cipher."""

from __future__ import annotations

from typing import Optional

from .core import BLOCK_SIZE, IV160, IV256, IV384, IV512, Config, SkeinHash
from .skein256 import _key_config, _oneshot

# Chain values after the configuration block for unkeyed, unconfigured hashing.
_PRECOMPUTED = {20: IV160, 32: IV256, 48: IV384, 64: IV512}


class Skein512(SkeinHash):
    """A Skein-512 hash object producing ``hashsize`` bytes of output.

    Without any configuration the common output sizes start from
    precomputed chain values instead of processing the configuration block.
    """

    block_size = BLOCK_SIZE

    def __init__(self, hashsize: int, config: Optional[Config] = None) -> None:
        initial = None
        if config is None or config == Config():
            initial = _PRECOMPUTED.get(hashsize)
        if initial is None:
            super().__init__(hashsize, config)
            return
        self.digest_size = hashsize
        self._chain = list(initial)
        self._tweak = [0, 0, 0]
        self._buffer = bytearray()
        self._has_message = False
        self._initial_chain = list(initial)
        self.reset()


def new(hashsize: int, config: Optional[Config] = None) -> Skein512:
    """Return a Skein-512 hash object with the given output size and configuration."""
    return Skein512(hashsize, config)


def new512(key: Optional[bytes] = None) -> Skein512:
    """Return a 512-bit Skein-512 hash object; a key turns it into a MAC."""
    return Skein512(64, _key_config(key))


def new256(key: Optional[bytes] = None) -> Skein512:
    """Return a 256-bit Skein-512 hash object; a key turns it into a MAC."""
    return Skein512(32, _key_config(key))


def sum512(msg: bytes, key: Optional[bytes] = None) -> bytes:
    """Return the 64-byte checksum (or MAC if keyed) of ``msg``."""
    return _oneshot(Skein512, msg, 64, _key_config(key))


def sum384(msg: bytes, key: Optional[bytes] = None) -> bytes:
    """Return the 48-byte checksum (or MAC if keyed) of ``msg``."""
    return _oneshot(Skein512, msg, 48, _key_config(key))


def sum256(msg: bytes, key: Optional[bytes] = None) -> bytes:
    """Return the 32-byte checksum (or MAC if keyed) of ``msg``."""
    return _oneshot(Skein512, msg, 32, _key_config(key))


def sum160(msg: bytes, key: Optional[bytes] = None) -> bytes:
    """Return the 20-byte checksum (or MAC if keyed) of ``msg``."""
    return _oneshot(Skein512, msg, 20, _key_config(key))


def digest(msg: bytes, hashsize: int, config: Optional[Config] = None) -> bytes:
    """Return the Skein-512 checksum of ``msg`` with ``hashsize`` bytes of output."""
    return _oneshot(Skein512, msg, hashsize, config)