"""Interpreter for the random-math programs of the CryptoNight-R variant.

A program is a sequence of instructions over nine unsigned 32-bit registers.
Only the first four registers are ever written by generated programs; the
remaining five hold constants.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import IntEnum

REG_BITS = 32
_MASK32 = (1 << REG_BITS) - 1

#: Latency in cycles the generated code aims for.
TOTAL_LATENCY = 15 * 3
#: Fewest instructions a generated program holds.
NUM_INSTRUCTIONS_MIN = 60
#: Most instructions executed, not counting the final RET.
NUM_INSTRUCTIONS_MAX = 70
#: ALUs able to multiply, and ALUs in total.
ALU_COUNT_MUL = 1
ALU_COUNT = 3

REGISTER_COUNT = 9


class Opcode(IntEnum):
    """Random-math operations."""

    MUL = 0  # a * b
    ADD = 1  # a + b + C
    SUB = 2  # a - b
    ROR = 3  # rotate a right by b & 31
    ROL = 4  # rotate a left by b & 31
    XOR = 5  # a ^ b
    RET = 6  # stop execution


#: Latencies on a typical CPU, in cycles, indexed by opcode.
OP_LATENCY = {
    Opcode.MUL: 3, Opcode.ADD: 2, Opcode.SUB: 1,
    Opcode.ROR: 2, Opcode.ROL: 2, Opcode.XOR: 1,
}
#: Latencies on a theoretical ASIC, in cycles.
ASIC_OP_LATENCY = {
    Opcode.MUL: 3, Opcode.ADD: 1, Opcode.SUB: 1,
    Opcode.ROR: 1, Opcode.ROL: 1, Opcode.XOR: 1,
}
#: ALUs available for each operation.
OP_ALUS = {
    Opcode.MUL: ALU_COUNT_MUL, Opcode.ADD: ALU_COUNT, Opcode.SUB: ALU_COUNT,
    Opcode.ROR: ALU_COUNT, Opcode.ROL: ALU_COUNT, Opcode.XOR: ALU_COUNT,
}


@dataclass(frozen=True)
class Instruction:
    """One operation: ``registers[dst] = registers[dst] <op> registers[src]``."""

    opcode: Opcode
    dst: int = 0
    src: int = 0
    c: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "opcode", Opcode(self.opcode))
        for name in ("dst", "src"):
            index = getattr(self, name)
            if not 0 <= index < REGISTER_COUNT:
                raise ValueError(f"{name} register index {index} out of range")
        if not 0 <= self.c <= _MASK32:
            raise ValueError(f"constant {self.c} is not an unsigned 32-bit value")


def _rotr(value: int, shift: int) -> int:
    return ((value >> shift) | (value << ((REG_BITS - shift) % REG_BITS))) & _MASK32


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> ((REG_BITS - shift) % REG_BITS))) & _MASK32


def _apply(op: Opcode, a: int, b: int, c: int) -> int:
    if op is Opcode.MUL:
        return (a * b) & _MASK32
    if op is Opcode.ADD:
        return (a + b + c) & _MASK32
    if op is Opcode.SUB:
        return (a - b) & _MASK32
    if op is Opcode.ROR:
        return _rotr(a, b % REG_BITS)
    if op is Opcode.ROL:
        return _rotl(a, b % REG_BITS)
    if op is Opcode.XOR:
        return a ^ b
    raise ValueError(f"unexpected opcode {op!r}")


def execute(instruction: Instruction, registers: Sequence[int]) -> list[int]:
    """Return the registers after one instruction; RET leaves them unchanged."""
    result = [value & _MASK32 for value in registers]
    if instruction.opcode is Opcode.RET:
        return result
    if max(instruction.dst, instruction.src) >= len(result):
        raise IndexError("register index beyond the given registers")
    result[instruction.dst] = _apply(
        instruction.opcode,
        result[instruction.dst],
        result[instruction.src],
        instruction.c,
    )
    return result


def run(code: Iterable[Instruction], registers: Sequence[int]) -> list[int]:
    """Run a program and return the final registers.

    Execution stops at RET, at the end of the code, or after
    ``NUM_INSTRUCTIONS_MAX`` instructions, whichever comes first.
    """
    result = [value & _MASK32 for value in registers]
    for count, instruction in enumerate(code):
        if count >= NUM_INSTRUCTIONS_MAX or instruction.opcode is Opcode.RET:
            break
        result = execute(instruction, result)
    return result