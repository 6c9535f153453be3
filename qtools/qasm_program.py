"""Structure of a parsed cQASM program: clusters, subcircuits and the whole file."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from qtools.qasm_ast import NumericalIdentifiers, Operation, QasmError


def _number(value: float) -> str:
    return f"{value:g}"


@dataclass
class OperationsCluster:
    """Operations found on one line, run serially or in parallel."""

    operations: list[Operation] = field(default_factory=list)
    line_number: int = 0
    is_parallel: bool = False

    def add_operation(self, operation: Operation) -> None:
        """Append an operation without changing the cluster's parallelism."""
        self.operations.append(operation)

    def add_parallel_operation(self, operation: Operation) -> None:
        """Append an operation and mark the cluster as parallel."""
        self.operations.append(operation)
        self.is_parallel = True

    def last_operation(self) -> Operation:
        """The most recently added operation."""
        if not self.operations:
            raise QasmError("Operations cluster is empty")
        return self.operations[-1]

    def describe(self) -> str:
        """A human-readable description of the cluster and its operations."""
        kind = "Parallel" if self.is_parallel else "Serial"
        header = (
            "Parallel operations cluster: \n"
            if self.is_parallel
            else "Serial operation: \n"
        )
        body = "".join(operation.describe() for operation in self.operations)
        return f"{header}{body}End {kind} operation{'s' if self.is_parallel else ''} \n\n"


@dataclass
class SubCircuit:
    """A named subcircuit with its iteration count and operation clusters."""

    name: str
    rank: int
    line_number: int
    number_iterations: int = 1
    operations_clusters: list[OperationsCluster] = field(default_factory=list)

    def add_operations_cluster(self, cluster: OperationsCluster) -> None:
        """Append a cluster of operations."""
        self.operations_clusters.append(cluster)

    def last_operations_cluster(self) -> OperationsCluster:
        """The most recently added cluster."""
        if not self.operations_clusters:
            raise QasmError(f"Subcircuit {self.name} has no operations")
        return self.operations_clusters[-1]

    def describe(self) -> str:
        """A human-readable description of the subcircuit."""
        clusters = "".join(cluster.describe() for cluster in self.operations_clusters)
        return (
            f"Subcircuit Name = {self.name} , Rank = {self.rank}\n"
            f"{self.name} has {self.number_iterations} iterations.\n"
            "Contains these operations clusters:\n"
            f"{clusters}"
            f"End of subcircuit {self.name}\n\n"
        )


def _default_subcircuits() -> list[SubCircuit]:
    return [SubCircuit("default", 0, 1)]


@dataclass
class SubCircuits:
    """All subcircuits of a program, beginning with the implicit default one."""

    subcircuits: list[SubCircuit] = field(default_factory=_default_subcircuits)

    def add_subcircuit(self, subcircuit: SubCircuit) -> None:
        """Append a subcircuit."""
        self.subcircuits.append(subcircuit)

    def last_subcircuit(self) -> SubCircuit:
        """The most recently added subcircuit."""
        return self.subcircuits[-1]

    def __len__(self) -> int:
        return len(self.subcircuits)

    def __iter__(self) -> Iterator[SubCircuit]:
        return iter(self.subcircuits)


@dataclass
class QasmRepresentation:
    """Everything found in a cQASM file."""

    subcircuits: SubCircuits = field(default_factory=SubCircuits)
    num_qubits: int = 0
    version_number: float = 0.0
    mappings: dict[str, tuple[NumericalIdentifiers, bool]] = field(default_factory=dict)
    error_model_type: str = "None"
    error_model_parameters: list[float] = field(default_factory=lambda: [0.0])

    def add_mapping(self, name: str, indices: NumericalIdentifiers, is_qubit: bool) -> None:
        """Record a named alias for qubit or bit indices; names ignore case."""
        self.mappings[name.lower()] = (indices, is_qubit)

    def mapped_indices(self, name: str, is_qubit: bool, line_number: int) -> NumericalIdentifiers:
        """The indices behind an alias of the requested kind."""
        key = name.lower()
        entry = self.mappings.get(key)
        if entry is None or entry[1] != is_qubit:
            raise QasmError(f"Could not get wanted mapping {key}: Line {line_number}")
        return entry[0]

    def set_error_model(self, model_type: str, parameters: Sequence[float]) -> None:
        """Set the error model name and its numeric parameters."""
        self.error_model_type = model_type
        self.error_model_parameters = list(parameters)

    def describe_mappings(self) -> str:
        """A listing of every mapping, in name order, and of the error model."""
        lines = [
            f"{name}: {indices}{int(is_qubit)}\n"
            for name, (indices, is_qubit) in sorted(self.mappings.items())
        ]
        lines.append(
            f"Current error model: {self.error_model_type}\nError Probability = "
        )
        lines.extend(f"{_number(value)}\n" for value in self.error_model_parameters)
        return "".join(lines)