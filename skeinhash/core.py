"""Skein hashing built on Unique Block Iteration over Threefish-512."""

from __future__ import annotations

import copy as _copy
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Optional

from .threefish512 import ubi512
from .tweak import BLOCK_SIZE_512, increment_tweak, words_to_bytes, bytes_to_words

#: Block size of Skein-512 in bytes.
BLOCK_SIZE = BLOCK_SIZE_512

CFG_KEY = 0
CFG_CONFIG = 4
CFG_PERSONAL = 8
CFG_PUBLIC_KEY = 12
CFG_KEY_ID = 16
CFG_NONCE = 20
CFG_MESSAGE = 48
CFG_OUTPUT = 63

FIRST_BLOCK = 1 << 62
FINAL_BLOCK = 1 << 63

#: The schema identifier, the ASCII string "SHA3" followed by version 1.
SCHEMA_ID = 0x133414853

#: Precomputed Skein-512 chain values after the configuration block.
IV160 = (
    0x28B81A2AE013BD91, 0xC2F11668B5BDF78F, 0x1760D8F3F6A56F12, 0x4FB747588239904F,
    0x21EDE07F7EAF5056, 0xD908922E63ED70B8, 0xB8EC76FFECCB52FA, 0x01A47BB8A3F27A6E,
)
IV256 = (
    0xCCD044A12FDB3E13, 0xE83590301A79A9EB, 0x55AEA0614F816E6F, 0x2A2767A4AE9B94DB,
    0xEC06025E74DD7683, 0xE7A436CDC4746251, 0xC36FBAF9393AD185, 0x3EEDBA1833EDFC13,
)
IV384 = (
    0xA3F6C6BF3A75EF5F, 0xB0FEF9CCFD84FAA4, 0x9D77DD663D770CFE, 0xD798CBF3B468FDDA,
    0x1BC4A6668A0E4465, 0x7ED7D434E5807407, 0x548FC1ACD4EC44D6, 0x266E17546AA18FF8,
)
IV512 = (
    0x4903ADFF749C51CE, 0x0D95DE399746DF03, 0x8FD1934127C79BCE, 0x9A255629FF352CB1,
    0x5DB62599DF6CA7B0, 0xEABE394CA9D5C3F4, 0x991112C71A75B523, 0xAE18A40B660FCC33,
)


@dataclass(frozen=True)
class Config:
    """Optional Skein parameters; empty values are left out."""

    key: bytes = b""
    personal: bytes = b""
    public_key: bytes = b""
    key_id: bytes = b""
    nonce: bytes = b""

    def entries(self) -> list[tuple[int, bytes]]:
        """Return the non-empty parameters processed after the configuration block.

        The order is personalisation, public key, key id, nonce; the key is
        processed before the configuration block and is not included.
        """
        pairs = (
            (CFG_PERSONAL, self.personal),
            (CFG_PUBLIC_KEY, self.public_key),
            (CFG_KEY_ID, self.key_id),
            (CFG_NONCE, self.nonce),
        )
        return [(kind, bytes(value)) for kind, value in pairs if value]


def config_block(hashsize: int) -> bytes:
    """Return the 32-byte configuration string for an output of ``hashsize`` bytes."""
    if hashsize < 1:
        raise ValueError(f"invalid hash size {hashsize}")
    return (
        SCHEMA_ID.to_bytes(8, "little")
        + (hashsize * 8).to_bytes(8, "little")
        + bytes(16)
    )


def _start_tweak(kind: int) -> list[int]:
    return [0, (kind << 56) | FIRST_BLOCK, 0]


class SkeinHash:
    """A Skein hash object with a hashlib-like interface.

    The default uses Threefish-512; other widths set ``block_size`` and
    ``_ubi`` in a subclass.
    """

    block_size: int = BLOCK_SIZE
    _ubi: Callable[[Sequence[int], Sequence[int], Sequence[int]], list[int]] = staticmethod(ubi512)

    def __init__(self, hashsize: int, config: Optional[Config] = None) -> None:
        if hashsize < 1:
            raise ValueError(f"invalid hash size {hashsize}")
        self.digest_size = hashsize
        config = config or Config()
        self._chain = [0] * (self.block_size // 8)
        self._tweak = [0, 0, 0]
        self._buffer = bytearray()
        self._has_message = False
        if config.key:
            self._absorb(CFG_KEY, config.key)
        self._absorb(CFG_CONFIG, config_block(hashsize))
        for kind, value in config.entries():
            self._absorb(kind, value)
        self._initial_chain = list(self._chain)
        self.reset()

    @property
    def chain(self) -> tuple[int, ...]:
        """The current chain words."""
        return tuple(self._chain)

    def _absorb(self, kind: int, data: bytes) -> None:
        self._tweak = _start_tweak(kind)
        self.update(data)
        self._finalize()

    def _process(self, block: bytes) -> None:
        self._tweak = increment_tweak(self._tweak, self.block_size)
        self._chain = self._ubi(bytes_to_words(block), self._chain, self._tweak)
        self._tweak[1] &= ~FIRST_BLOCK

    def _finalize(self) -> None:
        self._tweak = increment_tweak(self._tweak, len(self._buffer))
        self._tweak[1] |= FINAL_BLOCK
        block = bytes(self._buffer).ljust(self.block_size, b"\0")
        self._buffer.clear()
        self._chain = self._ubi(bytes_to_words(block), self._chain, self._tweak)

    def _output(self, counter: int) -> bytes:
        words = [counter] + [0] * (self.block_size // 8 - 1)
        tweak = [8, (CFG_OUTPUT << 56) | FIRST_BLOCK | FINAL_BLOCK, 0]
        return words_to_bytes(self._ubi(words, self._chain, tweak))

    def update(self, data: bytes) -> None:
        """Feed more message bytes into the hash."""
        self._has_message = True
        self._buffer.extend(data)
        # The last block is held back until it is known whether more follows.
        while len(self._buffer) > self.block_size:
            self._process(bytes(self._buffer[: self.block_size]))
            del self._buffer[: self.block_size]

    def digest(self) -> bytes:
        """Return the hash of the data fed so far, leaving the state unchanged."""
        state = self.copy()
        if state._has_message:
            state._finalize()
        blocks = -(-self.digest_size // self.block_size)
        output = b"".join(state._output(counter) for counter in range(blocks))
        return output[: self.digest_size]

    def hexdigest(self) -> str:
        """Return :meth:`digest` as lower-case hexadecimal."""
        return self.digest().hex()

    def copy(self) -> "SkeinHash":
        """Return an independent copy of this hash object."""
        clone = _copy.copy(self)
        clone._chain = list(self._chain)
        clone._tweak = list(self._tweak)
        clone._buffer = bytearray(self._buffer)
        clone._initial_chain = list(self._initial_chain)
        return clone

    def reset(self) -> None:
        """Forget all message data, keeping hash size and configuration."""
        self._buffer.clear()
        self._has_message = False
        self._chain = list(self._initial_chain)
        self._tweak = _start_tweak(CFG_MESSAGE)