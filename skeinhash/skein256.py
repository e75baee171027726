"""Skein-256: Skein hashing over the Threefish-256 block cipher."""

from __future__ import annotations

from typing import Optional

from .core import Config, SkeinHash
from .threefish256 import ubi256
from .tweak import BLOCK_SIZE_256


class Skein256(SkeinHash):
    """A Skein-256 hash object producing ``hashsize`` bytes of output."""

    block_size = BLOCK_SIZE_256
    _ubi = staticmethod(ubi256)


def _key_config(key: Optional[bytes]) -> Optional[Config]:
    """Return a configuration holding only ``key``, or None when there is no key."""
    return Config(key=bytes(key)) if key else None


def _oneshot(cls, msg: bytes, hashsize: int, config: Optional[Config]) -> bytes:
    """Hash ``msg`` in one go with a hash object of class ``cls``."""
    h = cls(hashsize, config)
    h.update(msg)
    return h.digest()


def new(hashsize: int, config: Optional[Config] = None) -> Skein256:
    """Return a Skein-256 hash object with the given output size and configuration."""
    return Skein256(hashsize, config)


def new512(key: Optional[bytes] = None) -> Skein256:
    """Return a 512-bit Skein-256 hash object; a key turns it into a MAC."""
    return Skein256(64, _key_config(key))


def new256(key: Optional[bytes] = None) -> Skein256:
    """Return a 256-bit Skein-256 hash object; a key turns it into a MAC."""
    return Skein256(32, _key_config(key))


def sum512(msg: bytes, key: Optional[bytes] = None) -> bytes:
    """Return the 64-byte checksum (or MAC if keyed) of ``msg``."""
    return _oneshot(Skein256, msg, 64, _key_config(key))


def sum384(msg: bytes, key: Optional[bytes] = None) -> bytes:
    """Return the 48-byte checksum (or MAC if keyed) of ``msg``."""
    return _oneshot(Skein256, msg, 48, _key_config(key))


def sum256(msg: bytes, key: Optional[bytes] = None) -> bytes:
    """Return the 32-byte checksum (or MAC if keyed) of ``msg``."""
    return _oneshot(Skein256, msg, 32, _key_config(key))


def sum160(msg: bytes, key: Optional[bytes] = None) -> bytes:
    """Return the 20-byte checksum (or MAC if keyed) of ``msg``."""
    return _oneshot(Skein256, msg, 20, _key_config(key))


def digest(msg: bytes, hashsize: int, config: Optional[Config] = None) -> bytes:
    """Return the Skein-256 checksum of ``msg`` with ``hashsize`` bytes of output."""
    return _oneshot(Skein256, msg, hashsize, config)