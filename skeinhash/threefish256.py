"""The Threefish-256 tweakable block cipher and the word-level engine shared by all sizes."""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from operator import xor

from .tweak import (
    BLOCK_SIZE_256,
    C240,
    MASK64,
    TWEAK_SIZE,
    bytes_to_words,
    words_to_bytes,
)

# Mix operations per round as (target, source, rotation); the schedule
# alternates between two groups of four rounds.
_ROUND_GROUPS = (
    (
        ((0, 1, 14), (2, 3, 16)),
        ((0, 3, 52), (2, 1, 57)),
        ((0, 1, 23), (2, 3, 40)),
        ((0, 3, 5), (2, 1, 37)),
    ),
    (
        ((0, 1, 25), (2, 3, 33)),
        ((0, 3, 46), (2, 1, 12)),
        ((0, 1, 58), (2, 3, 22)),
        ((0, 3, 32), (2, 1, 32)),
    ),
)


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (64 - shift))) & MASK64


def _rotr(value: int, shift: int) -> int:
    return ((value >> shift) | (value << (64 - shift))) & MASK64


class _Variant:
    """Word-level Threefish operations for one block size."""

    def __init__(self, words: int, injections: int, round_groups) -> None:
        self.words = words
        self.key_words = words + 1
        self.injections = injections
        self.round_groups = round_groups

    def extend_key(self, words: Sequence[int]) -> list[int]:
        base = list(words[: self.words])
        return [*base, reduce(xor, base, C240)]

    @staticmethod
    def extend_tweak(words: Sequence[int]) -> list[int]:
        return [words[0], words[1], words[0] ^ words[1]]

    def _check(self, block: Sequence[int], keys: Sequence[int], tweak: Sequence[int]) -> None:
        for name, value, size in (
            ("block", block, self.words),
            ("keys", keys, self.key_words),
            ("tweak", tweak, 3),
        ):
            if len(value) != size:
                raise ValueError(f"{name} must hold {size} words, got {len(value)}")

    def _subkey(self, keys: Sequence[int], tweak: Sequence[int], s: int) -> list[int]:
        n = self.words
        words = [keys[(s + i) % self.key_words] for i in range(n)]
        words[n - 3] = (words[n - 3] + tweak[s % 3]) & MASK64
        words[n - 2] = (words[n - 2] + tweak[(s + 1) % 3]) & MASK64
        words[n - 1] = (words[n - 1] + s) & MASK64
        return words

    def encrypt(self, block: Sequence[int], keys: Sequence[int], tweak: Sequence[int]) -> list[int]:
        self._check(block, keys, tweak)
        b = list(block)
        for s in range(self.injections):
            b = [(x + k) & MASK64 for x, k in zip(b, self._subkey(keys, tweak, s))]
            for mixes in self.round_groups[s % 2]:
                for target, source, rotation in mixes:
                    b[target] = (b[target] + b[source]) & MASK64
                    b[source] = _rotl(b[source], rotation) ^ b[target]
        final = self._subkey(keys, tweak, self.injections)
        return [(x + k) & MASK64 for x, k in zip(b, final)]

    def decrypt(self, block: Sequence[int], keys: Sequence[int], tweak: Sequence[int]) -> list[int]:
        self._check(block, keys, tweak)
        b = list(block)
        for s in range(self.injections, 0, -1):
            b = [(x - k) & MASK64 for x, k in zip(b, self._subkey(keys, tweak, s))]
            for mixes in reversed(self.round_groups[(s - 1) % 2]):
                for target, source, rotation in mixes:
                    b[source] = _rotr(b[source] ^ b[target], rotation)
                    b[target] = (b[target] - b[source]) & MASK64
        return [(x - k) & MASK64 for x, k in zip(b, self._subkey(keys, tweak, 0))]

    def ubi(self, block: Sequence[int], chain: Sequence[int], tweak: Sequence[int]) -> list[int]:
        if len(chain) < self.words:
            raise ValueError(f"chain must hold at least {self.words} words")
        if len(tweak) < 2:
            raise ValueError("tweak must hold at least 2 words")
        encrypted = self.encrypt(block, self.extend_key(chain), self.extend_tweak(tweak))
        return [e ^ p for e, p in zip(encrypted, block)]


class _Cipher:
    """A Threefish cipher bound to one key and tweak."""

    block_size = 0
    _variant: _Variant

    def __init__(self, tweak: bytes, key: bytes) -> None:
        if len(key) != self.block_size:
            raise ValueError("invalid key size")
        if len(tweak) != TWEAK_SIZE:
            raise ValueError("invalid tweak size")
        self._keys = self._variant.extend_key(bytes_to_words(key))
        self._tweak = self._variant.extend_tweak(bytes_to_words(tweak))

    def _words(self, block: bytes) -> list[int]:
        if len(block) != self.block_size:
            raise ValueError(f"block must be {self.block_size} bytes, got {len(block)}")
        return bytes_to_words(block)

    def _encrypt(self, block: bytes) -> bytes:
        return words_to_bytes(self._variant.encrypt(self._words(block), self._keys, self._tweak))

    def _decrypt(self, block: bytes) -> bytes:
        return words_to_bytes(self._variant.decrypt(self._words(block), self._keys, self._tweak))


_VARIANT = _Variant(4, 18, _ROUND_GROUPS)


def encrypt256(block: Sequence[int], keys: Sequence[int], tweak: Sequence[int]) -> list[int]:
    """Encrypt four words with an extended key of five words and tweak of three.

    ``keys[4]`` must be the XOR of ``keys[0..3]`` and C240, and ``tweak[2]``
    the XOR of ``tweak[0]`` and ``tweak[1]``.
    """
    return _VARIANT.encrypt(block, keys, tweak)


def decrypt256(block: Sequence[int], keys: Sequence[int], tweak: Sequence[int]) -> list[int]:
    """Invert :func:`encrypt256` for the same extended key and tweak."""
    return _VARIANT.decrypt(block, keys, tweak)


def ubi256(block: Sequence[int], chain: Sequence[int], tweak: Sequence[int]) -> list[int]:
    """Run one UBI step and return the new four chain words."""
    return _VARIANT.ubi(block, chain, tweak)


class Threefish256(_Cipher):
    """Threefish-256 with a fixed 32-byte key and 16-byte tweak."""

    block_size = BLOCK_SIZE_256
    _variant = _VARIANT

    def encrypt(self, block: bytes) -> bytes:
        """Encrypt one 32-byte block."""
        return self._encrypt(block)

    def decrypt(self, block: bytes) -> bytes:
        """Decrypt one 32-byte block."""
        return self._decrypt(block)