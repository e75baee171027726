"""Skein-1024: Skein hashing over the Threefish-1024 block cipher."""

from __future__ import annotations

from typing import Optional

from .core import Config, SkeinHash
from .threefish1024 import ubi1024
from .tweak import BLOCK_SIZE_1024


class Skein1024(SkeinHash):
    """A Skein-1024 hash object producing ``hashsize`` bytes of output."""

    block_size = BLOCK_SIZE_1024
    _ubi = staticmethod(ubi1024)


def _key_config(key: Optional[bytes]) -> Config:
    return Config(key=bytes(key) if key else b"")


def new(hashsize: int, config: Optional[Config] = None) -> Skein1024:
    """Return a Skein-1024 hash object with the given output size and configuration."""
    return Skein1024(hashsize, config)


def new512(key: Optional[bytes] = None) -> Skein1024:
    """Return a 512-bit Skein-1024 hash object; a key turns it into a MAC."""
    return Skein1024(64, _key_config(key))


def new256(key: Optional[bytes] = None) -> Skein1024:
    """Return a 256-bit Skein-1024 hash object; a key turns it into a MAC."""
    return Skein1024(32, _key_config(key))


def _sum(msg: bytes, hashsize: int, key: Optional[bytes]) -> bytes:
    h = Skein1024(hashsize, _key_config(key))
    h.update(msg)
    return h.digest()


def sum512(msg: bytes, key: Optional[bytes] = None) -> bytes:
    """Return the 64-byte Skein-1024 checksum (or MAC if a key is given) of ``msg``."""
    return _sum(msg, 64, key)


def sum384(msg: bytes, key: Optional[bytes] = None) -> bytes:
    """Return the 48-byte Skein-1024 checksum (or MAC if a key is given) of ``msg``."""
    return _sum(msg, 48, key)


def sum256(msg: bytes, key: Optional[bytes] = None) -> bytes:
    """Return the 32-byte Skein-1024 checksum (or MAC if a key is given) of ``msg``."""
    return _sum(msg, 32, key)


def sum160(msg: bytes, key: Optional[bytes] = None) -> bytes:
    """Return the 20-byte Skein-1024 checksum (or MAC if a key is given) of ``msg``."""
    return _sum(msg, 20, key)


def digest(msg: bytes, hashsize: int, config: Optional[Config] = None) -> bytes:
    """Return the Skein-1024 checksum of ``msg`` with ``hashsize`` bytes of output."""
    h = Skein1024(hashsize, config)
    h.update(msg)
    return h.digest()