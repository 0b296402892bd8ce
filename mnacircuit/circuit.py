"""Circuits of passive components solved by modified nodal analysis."""

from __future__ import annotations

import copy as _copy
import warnings
from collections.abc import Iterable, Sequence

from .components import UNCONNECTED, Component
from .formatting import format_phasor
from .linalg import lu_solve, zero_matrix, zero_vector
from .source import ACSource

GROUND = "GND"
_HLINE = "-" * 48
_DOUBLE_HLINE = "=" * 48


class CircuitError(Exception):
    """Raised when a circuit is ill-defined and cannot be solved."""


def nodes_invalid(components: Iterable[Component]) -> bool:
    """Return True if any component has an unconnected terminal."""
    return any(
        UNCONNECTED in (comp.node_1, comp.node_2) for comp in components
    )


def _highest_node(components: Iterable[Component]) -> int:
    return max(
        (max(comp.node_1, comp.node_2) for comp in components), default=0
    )


class Circuit:
    """A linear AC circuit driven by a single voltage source against ground.

    Nodes are referred to by name; ``"GND"`` is always node 0.  Solving the
    circuit yields ``[-I_source, V_1, V_2, ...]``, where ``I_source`` is the
    current leaving the source.
    """

    def __init__(
        self,
        components: Sequence[Component] | None = None,
        source: ACSource | None = None,
    ) -> None:
        self._components: list[Component] = list(components or [])
        self.source = source if source is not None else ACSource()
        self._node_ids: dict[str, int] = {GROUND: 0}
        self._node_names: dict[int, str] = {0: GROUND}
        self._num_nodes = max(_highest_node(self._components), 0)
        if nodes_invalid(self._components):
            warnings.warn(
                "components have unconnected nodes (node id -1)", stacklevel=2
            )

    # -- nodes -------------------------------------------------------------

    def node_id(self, name: str) -> int:
        """Return the id of a named node, allocating a new id if needed."""
        if name not in self._node_ids:
            self._num_nodes += 1
            self._node_ids[name] = self._num_nodes
            self._node_names[self._num_nodes] = name
        return self._node_ids[name]

    @property
    def num_nodes(self) -> int:
        """Number of nodes besides ground."""
        return self._num_nodes

    # -- source ------------------------------------------------------------

    @property
    def source(self) -> ACSource:
        """The AC source driving the circuit."""
        return self._source

    @source.setter
    def source(self, value: ACSource) -> None:
        if not isinstance(value, ACSource):
            raise TypeError("source must be an ACSource")
        self._source = value

    def set_ac_source(self, node: str, v0: complex, frequency: float) -> None:
        """Attach the source to the named node with the given amplitude and frequency."""
        self._source.node = self.node_id(node)
        self._source.v0 = v0
        self._source.frequency = frequency

    @property
    def frequency(self) -> float:
        """Source frequency in hertz."""
        return self._source.frequency

    @frequency.setter
    def frequency(self, value: float) -> None:
        self._source.frequency = value

    @property
    def v0(self) -> complex:
        """Source amplitude as a phasor."""
        return self._source.v0

    @v0.setter
    def v0(self, value: complex) -> None:
        self._source.v0 = value

    # -- components --------------------------------------------------------

    def add_component(
        self,
        kind: type[Component],
        node_1: str,
        node_2: str,
        value: float,
        label: str | None = None,
    ) -> Component:
        """Create a component of ``kind`` between two named nodes and add it."""
        first = self.node_id(node_1)
        second = self.node_id(node_2)
        if label is None:
            component = kind(first, second, value)
        else:
            component = kind(first, second, value, label)
        self._components.append(component)
        return component

    @property
    def components(self) -> list[Component]:
        """The components, in the order they were added (a new list each time)."""
        return list(self._components)

    def set_components(self, components: Sequence[Component]) -> None:
        """Replace all components; node names other than ground are forgotten."""
        components = list(components)
        if nodes_invalid(components):
            raise CircuitError(
                "components must not have unconnected nodes; components left unchanged"
            )
        self._node_ids = {GROUND: 0}
        self._node_names = {0: GROUND}
        self._num_nodes = max(_highest_node(components), 0)
        self._components = components

    def is_empty(self) -> bool:
        """True if the circuit has no components."""
        return not self._components

    # -- solving -----------------------------------------------------------

    def solve(self) -> list[complex]:
        """Solve the nodal system.

        Returns ``[-I_source, V_1, ..., V_n]``.  Raises :class:`CircuitError`
        for an empty or ill-connected circuit and
        :class:`~mnacircuit.linalg.SingularMatrixError` if the system is singular.
        """
        if self.is_empty():
            raise CircuitError("cannot solve an empty circuit")
        if nodes_invalid(self._components):
            raise CircuitError("components have unconnected nodes")

        size = self._num_nodes + 1
        matrix = zero_matrix(size)
        rhs = zero_vector(size)
        frequency = self.frequency

        for comp in self._components:
            i, j = comp.node_1, comp.node_2
            y = comp.admittance(frequency)
            if i != 0:
                matrix[i][i] += y
            if j != 0:
                matrix[j][j] += y
            if i != 0 and j != 0:
                matrix[i][j] -= y
                matrix[j][i] -= y

        src = self._source.node
        if 0 <= src < size:
            matrix[0][src] = 1.0
            matrix[src][0] = 1.0
            rhs[0] = self.v0

        return lu_solve(matrix, rhs)

    def source_current(self) -> complex:
        """Current leaving the source."""
        return -self.solve()[0]

    def node_potentials(self) -> list[complex]:
        """Node potentials indexed by node id; ground is 0."""
        solution = self.solve()
        solution[0] = 0j
        return solution

    # -- misc --------------------------------------------------------------

    def copy(self) -> Circuit:
        """Return a copy with its own source and node names, sharing the components."""
        other = Circuit.__new__(Circuit)
        other._components = list(self._components)
        other._source = _copy.copy(self._source)
        other._node_ids = dict(self._node_ids)
        other._node_names = dict(self._node_names)
        other._num_nodes = self._num_nodes
        return other

    __copy__ = copy

    def _node_label(self, node: int) -> str:
        return self._node_names.get(node, str(node))

    def report(self) -> str:
        """Describe node voltages, the source and every component as text."""
        lines = ["Printing Circuit Data", _DOUBLE_HLINE]
        if self.is_empty():
            lines.append("Empty circuit")
            return "\n".join(lines)

        frequency = self.frequency
        potentials = self.node_potentials()

        lines += ["Printing node data", _HLINE]
        for node, voltage in enumerate(potentials):
            if node in self._node_names:
                head = f"Node {self._node_names[node]} has id: {node}"
            else:
                head = f"Node {node}"
            lines.append(f"{head} with voltage V = {format_phasor(voltage)} V")
        lines.append(_HLINE)

        lines += [
            "Printing AC source data",
            _HLINE,
            "AC source: ",
            f"  Voltage: {format_phasor(self.v0)} V",
            f"  Frequency: {frequency:.4g} Hz",
            _HLINE,
            "Printing component data",
            _HLINE,
        ]

        for comp in self._components:
            n1, n2 = comp.node_1, comp.node_2
            drop = potentials[n1] - potentials[n2]
            current = comp.admittance(frequency) * drop
            if n1 in self._node_names and n2 in self._node_names:
                name_1, name_2 = self._node_names[n1], self._node_names[n2]
            else:
                name_1, name_2 = str(n1), str(n2)
            lines += [
                f"Component label: {comp.label}",
                f"  Type: {comp.kind} between nodes {name_1} and {name_2}",
                f"  Impedance: {format_phasor(comp.impedance(frequency))} Ohms ",
                f"  Voltage drop: {format_phasor(drop)} V",
                f"  Current: {format_phasor(current)} A",
            ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Circuit(components={self._components!r}, source={self._source!r})"