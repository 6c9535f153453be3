"""Semantic checks on a parsed cQASM program."""

from __future__ import annotations

from qtools.qasm_ast import TWO_QUBIT_TYPES, Operation, QasmError, Qubits
from qtools.qasm_program import QasmRepresentation

_UNCHECKED_TYPES = frozenset({"wait", "display", "display_binary", "not", "load_state"})


class QasmSemanticChecker:
    """Checks a program; raises QasmError on the first problem found."""

    def __init__(self, representation: QasmRepresentation) -> None:
        self.representation = representation
        self.max_qubits = representation.num_qubits
        self.parse_result = self._check_all()

    def _check_all(self) -> int:
        for subcircuit in self.representation.subcircuits:
            if subcircuit.number_iterations < 1:
                raise QasmError(
                    "Iteration count invalid for subcircuit "
                    f"{subcircuit.name} on Line: {subcircuit.line_number}"
                )
            for cluster in subcircuit.operations_clusters:
                for operation in cluster.operations:
                    self._check_operation(operation, cluster.line_number)
        return 0

    def _check_operation(self, operation: Operation, line: int) -> None:
        kind = operation.type
        if kind == "measure_parity":
            for qubits in operation.measure_parity_qubits:
                self._check_list(qubits, line)
        elif kind == "u":
            self._check_list(operation.qubits, line)
        elif kind in TWO_QUBIT_TYPES:
            for qubits in operation.two_qubit_pairs:
                self._check_list(qubits, line)
            self._check_lengths(operation, 2, line)
        elif kind == "toffoli":
            for qubits in operation.toffoli_qubit_pairs:
                self._check_list(qubits, line)
            self._check_lengths(operation, 3, line)
        elif kind == "measure_all" or kind in _UNCHECKED_TYPES:
            return
        elif kind == "reset-averaging":
            if not operation.all_qubits_bits:
                self._check_list(operation.qubits, line)
        else:
            try:
                self._check_list(operation.qubits, line)
            except QasmError as exc:
                raise QasmError(f"Operation invalid. Line: {line}") from exc

    def _check_list(self, qubits: Qubits, line: int) -> None:
        indices = qubits.selected.indices
        if not indices:
            return
        last = indices[-1]
        if last < 0 or last >= self.max_qubits:
            raise QasmError(
                f"Qubit indices exceed the number in qubit register. Line: {line}"
            )

    @staticmethod
    def _check_lengths(operation: Operation, pairs: int, line: int) -> None:
        sizes = {
            len(operation.qubits_involved(number).selected.indices)
            for number in range(1, pairs + 1)
        }
        if len(sizes) > 1:
            raise QasmError(f"Mismatch in the qubit pair sizes. Line: {line}")


def check_qasm(representation: QasmRepresentation) -> int:
    """Check a program; return 0 when valid, raise QasmError otherwise."""
    return QasmSemanticChecker(representation).parse_result