"""Building blocks of a parsed cQASM program: index lists, operands and operations."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

NO_ANGLE = sys.float_info.max
"""Rotation angle recorded for operations that take none."""

TWO_QUBIT_TYPES = frozenset({"cnot", "cz", "swap", "sqswap", "cr", "crk"})


class QasmError(RuntimeError):
    """Raised when a cQASM program or one of its parts is invalid."""


def _number(value: float) -> str:
    """Format a float the way a default C++ output stream does."""
    return f"{value:g}"


@dataclass
class NumericalIdentifiers:
    """The indices of the bits or qubits an operand refers to."""

    indices: list[int] = field(default_factory=list)

    def add_index(self, index: int) -> None:
        """Append a single index."""
        self.indices.append(int(index))

    def add_range(self, index_min: int, index_max: int) -> None:
        """Append every index from index_min to index_max inclusive."""
        self.indices.extend(range(int(index_min), int(index_max) + 1))

    def remove_duplicates(self) -> None:
        """Sort the indices and drop repeats."""
        self.indices[:] = sorted(set(self.indices))

    def clear(self) -> None:
        """Forget every index."""
        self.indices.clear()

    def __str__(self) -> str:
        return "Indices: " + "".join(f"{i} " for i in self.indices) + "\n"


@dataclass
class Qubits:
    """The qubits taking part in an operation."""

    selected: NumericalIdentifiers = field(default_factory=NumericalIdentifiers)

    def __str__(self) -> str:
        return f"Selected Qubits - {self.selected}"


@dataclass
class Bits:
    """The classical bits taking part in an operation."""

    selected: NumericalIdentifiers = field(default_factory=NumericalIdentifiers)

    def __str__(self) -> str:
        return f"Selected Bits - {self.selected}"


@dataclass
class Operation:
    """One cQASM instruction together with its operands."""

    type: str
    qubits: Qubits = field(default_factory=Qubits)
    bits: Bits = field(default_factory=Bits)
    rotation_angle: float = NO_ANGLE
    bit_controlled: bool = False
    all_qubits_bits: bool = False
    wait_time: int = 0
    state_filename: str = ""
    measure_parity_qubits: tuple[Qubits, Qubits] = field(
        default_factory=lambda: (Qubits(), Qubits())
    )
    measure_parity_axis: tuple[str, str] = ("", "")
    two_qubit_pairs: tuple[Qubits, Qubits] = field(
        default_factory=lambda: (Qubits(), Qubits())
    )
    toffoli_qubit_pairs: tuple[Qubits, Qubits, Qubits] = field(
        default_factory=lambda: (Qubits(), Qubits(), Qubits())
    )
    u_matrix_elements: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.type = self.type.lower()

    @classmethod
    def single(
        cls, op_type: str, qubits: Qubits, rotation_angle: float | None = None
    ) -> Operation:
        """A single-qubit operation, optionally a rotation by the given angle."""
        angle = NO_ANGLE if rotation_angle is None else rotation_angle
        return cls(op_type, qubits=qubits, rotation_angle=angle)

    @classmethod
    def measure_parity(
        cls, op_type: str, qubits1: Qubits, axis1: str, qubits2: Qubits, axis2: str
    ) -> Operation:
        """A parity measurement of two qubit lists along the given axes."""
        return cls(
            op_type,
            measure_parity_qubits=(qubits1, qubits2),
            measure_parity_axis=(axis1.lower(), axis2.lower()),
        )

    @classmethod
    def measure_all(cls, op_type: str) -> Operation:
        """An operation applying to every qubit and bit."""
        return cls(op_type, all_qubits_bits=True)

    @classmethod
    def wait(cls, op_type: str, wait_time: int) -> Operation:
        """A wait of the given number of cycles."""
        return cls(op_type, wait_time=wait_time)

    @classmethod
    def display(cls, op_type: str, bits: Bits) -> Operation:
        """A display of the given bits."""
        return cls(op_type, bits=bits)

    @classmethod
    def two_qubit(
        cls,
        op_type: str,
        qubits1: Qubits,
        qubits2: Qubits,
        rotation_angle: float | None = None,
    ) -> Operation:
        """A two-qubit gate, optionally with a rotation angle."""
        angle = NO_ANGLE if rotation_angle is None else rotation_angle
        return cls(op_type, two_qubit_pairs=(qubits1, qubits2), rotation_angle=angle)

    @classmethod
    def toffoli(
        cls, op_type: str, qubits1: Qubits, qubits2: Qubits, qubits3: Qubits
    ) -> Operation:
        """A three-qubit Toffoli gate."""
        return cls(op_type, toffoli_qubit_pairs=(qubits1, qubits2, qubits3))

    @classmethod
    def load_state(cls, op_type: str, state_filename: str) -> Operation:
        """A state load; the quoted file name keeps its case, minus the quotes."""
        return cls(op_type, state_filename=state_filename[1:-1])

    def qubits_involved(self, pair_index: int | None = None) -> Qubits:
        """The operand qubits, or for multi-qubit gates the pair numbered from 1."""
        if pair_index is None:
            return self.qubits
        if self.type == "toffoli":
            pairs: Sequence[Qubits] = self.toffoli_qubit_pairs
        elif self.type in TWO_QUBIT_TYPES:
            pairs = self.two_qubit_pairs
        else:
            pairs = ()
        if 1 <= pair_index <= len(pairs):
            return pairs[pair_index - 1]
        raise QasmError(f"Accessing qubit pair {pair_index} on operation {self.type}")

    def set_control_bits(self, bits: Bits) -> None:
        """Make the operation conditional on the given bits."""
        self.bits = bits
        self.bit_controlled = True

    @property
    def control_bits(self) -> Bits:
        return self.bits

    @property
    def display_bits(self) -> Bits:
        return self.bits

    def describe(self) -> str:
        """A human-readable multi-line description of the operation."""
        parts = [f"Operation {self.type}: "]
        kind = self.type
        if kind in ("rx", "ry", "rz"):
            parts.append(str(self.qubits))
            parts.append(f"Rotations = {_number(self.rotation_angle)}\n")
        elif kind == "measure_parity":
            first, second = self.measure_parity_qubits
            axis1, axis2 = self.measure_parity_axis
            parts += ["\n", str(first), f"With axis {axis1}\n", str(second), f"With axis {axis2}\n"]
        elif kind in ("cnot", "cz", "swap", "sqswap", "cr"):
            first, second = self.two_qubit_pairs
            parts += ["\n", "Qubit Pair 1: ", str(first), "Qubit Pair 2: ", str(second)]
            if kind == "cr":
                parts.append(f"Rotation = {_number(self.rotation_angle)}\n")
        elif kind == "toffoli":
            parts.append("\n")
            for number, pair in enumerate(self.toffoli_qubit_pairs, start=1):
                parts += [f"Qubit Pair {number}: ", str(pair)]
        elif kind == "wait":
            parts += ["\n", f"Wait time (integer) = {self.wait_time}\n"]
        elif kind in ("display", "display_binary"):
            parts += ["Display bits: ", str(self.bits)]
        else:
            parts.append(str(self.qubits))
        if self.bit_controlled:
            parts += ["Bit controlled with bits: ", str(self.bits)]
        return "".join(parts)