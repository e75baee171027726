# skeinhash

A pure Python implementation of the Skein family of hash functions and of the
Threefish tweakable block cipher that they are built on. The package also has an
interpreter for the random-math instruction programs used by the CryptoNight
variant R hash.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests, install with `pip install .[test]` and then run `pytest`.

## Hashing

Each Skein state size has its own module: `skeinhash.skein256`,
`skeinhash.skein512` and `skeinhash.skein1024`. All three modules have the
same functions:

- `new(hashsize, config)` returns a hash object that produces `hashsize` bytes.
- `new512(key)` and `new256(key)` return hash objects that produce 64 and 32 bytes.
- `sum512`, `sum384`, `sum256` and `sum160(msg, key)` return a 64-, 48-, 32- or
  20-byte checksum in one call. When you pass a key, they return a MAC.
- `digest(msg, hashsize, config)` returns a checksum of any length in one call.

```python
from skeinhash import skein512

tag = skein512.sum512(b"hello")        # 64 bytes
short = skein512.sum256(b"hello")      # 32 bytes
longer = skein512.digest(b"hello", 100, None)

h = skein512.new(64, None)
h.update(b"hel")
h.update(b"lo")
assert h.digest() == tag
print(h.hexdigest())
```

Hash objects are instances of `Skein256`, `Skein512` or `Skein1024`. Each of
these is a subclass of `skeinhash.core.SkeinHash`, and each has the following
members:

- `update(data)` feeds in more bytes.
- `digest()` and `hexdigest()` return the result. They do not change the state, so
  you can keep calling `update` afterwards.
- `copy()` returns an independent copy of the object.
- `reset()` discards the message data but keeps the output size and configuration.
- `digest_size` and `block_size` give the output size and block size in bytes.
  `chain` gives the current chain words.

When there is no key and no configuration, `Skein512` starts the 20-, 32-, 48-
and 64-byte output sizes from precomputed chain values.

### MACs and configuration

If you pass a key to the `sum*` or `new*` helpers, the result is a MAC. To use
personalisation, public-key binding, key identifiers or nonces, pass a
`skeinhash.core.Config`:

```python
from skeinhash import skein512
from skeinhash.core import Config

mac = skein512.sum256(b"message", b"secret")

config = Config(key=b"secret", personal=b"app-v1", nonce=b"n0nce")
h = skein512.new(32, config)
h.update(b"message")
result = h.digest()
```

A hash size below 1 raises `ValueError`. The helper `skeinhash.core.config_block(hashsize)`
returns the 32-byte configuration string for a given output size.

## Threefish

`skeinhash.threefish.new_cipher(tweak, key)` picks `Threefish256`,
`Threefish512` or `Threefish1024` according to the key length, which must be 32,
64 or 128 bytes. The tweak must be 16 bytes.

```python
from skeinhash.threefish import new_cipher

cipher = new_cipher(bytes(16), bytes(64))
ciphertext = cipher.encrypt(bytes(64))
assert cipher.decrypt(ciphertext) == bytes(64)
```

The following raise `ValueError`:

- a key of any other length
- a tweak that is not 16 bytes
- a block whose size does not match the cipher

For each size, the modules `threefish256`, `threefish512` and `threefish1024`
also provide word-level functions:

- `encrypt256`, `decrypt256` and `ubi256`
- `encrypt512`, `decrypt512` and `ubi512`
- `encrypt1024`, `decrypt1024` and `ubi1024`

`skeinhash.tweak` provides `increment_tweak`, `bytes_to_words` and
`words_to_bytes`.

## Random math

`skeinhash.randommath` has these names:

- `Opcode` is an enum with the members `MUL`, `ADD`, `SUB`, `ROR`, `ROL`, `XOR` and `RET`.
- `Instruction` is a frozen dataclass with the fields `opcode`, `dst`, `src` and `c`.
- `execute(instruction, registers)` returns a new list of registers after one instruction.
- `run(code, registers)` runs a program. It stops at `RET`, at the end of the code,
  or after 70 instructions.

All register values are unsigned 32-bit integers.

```python
from skeinhash.randommath import Instruction, Opcode, run

code = [Instruction(Opcode.ADD, dst=0, src=1, c=5), Instruction(Opcode.RET)]
print(run(code, [1, 2, 0, 0, 0, 0, 0, 0, 0]))  # [8, 2, 0, 0, 0, 0, 0, 0, 0]
```

## What this package does not do

The package only interprets random-math programs. It does not generate them
from a block height, so you have to supply the instruction sequence yourself.
The package does not compute a full CryptoNight hash, and it provides no
command-line tool.