"""Two-terminal passive circuit elements: resistors, capacitors and inductors."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import ClassVar

UNCONNECTED = -1


def _check_node(value: int, other: int, name: str) -> int:
    node = int(value)
    if node < UNCONNECTED:
        raise ValueError(f"{name} must be >= {UNCONNECTED}, got {node}")
    if node == other and other != UNCONNECTED:
        raise ValueError(
            f"{name} cannot equal the other node ({other}) unless both are unconnected"
        )
    return node


def _check_positive(value: float, quantity: str) -> float:
    number = float(value)
    if number <= 0:
        raise ValueError(f"{quantity} must be > 0, got {number}")
    return number


class Component(ABC):
    """A two-terminal element connected between two node ids.

    A node id of ``-1`` marks an unconnected terminal.  The two terminals must
    be distinct unless both are unconnected.
    """

    kind: ClassVar[str] = "None"

    def __init__(
        self, node_1: int = UNCONNECTED, node_2: int = UNCONNECTED, label: str = "None"
    ) -> None:
        first = _check_node(node_1, UNCONNECTED, "node_1")
        self._node_1 = first
        self._node_2 = _check_node(node_2, first, "node_2")
        self.label = label

    @property
    def node_1(self) -> int:
        """Id of the first terminal's node."""
        return self._node_1

    @node_1.setter
    def node_1(self, value: int) -> None:
        self._node_1 = _check_node(value, self._node_2, "node_1")

    @property
    def node_2(self) -> int:
        """Id of the second terminal's node."""
        return self._node_2

    @node_2.setter
    def node_2(self, value: int) -> None:
        self._node_2 = _check_node(value, self._node_1, "node_2")

    @property
    def connected(self) -> bool:
        """True when neither terminal is left unconnected."""
        return UNCONNECTED not in (self._node_1, self._node_2)

    @abstractmethod
    def admittance(self, frequency: float) -> complex:
        """Complex admittance at the given frequency in hertz."""

    def impedance(self, frequency: float) -> complex:
        """Complex impedance (the reciprocal of the admittance)."""
        return 1.0 / self.admittance(frequency)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(node_1={self._node_1!r}, node_2={self._node_2!r}, "
            f"label={self.label!r})"
        )


class Resistor(Component):
    """An ideal resistor; its admittance does not depend on frequency."""

    kind: ClassVar[str] = "Resistor"

    def __init__(
        self,
        node_1: int = UNCONNECTED,
        node_2: int = UNCONNECTED,
        resistance: float = 1.0,
        label: str = "R",
    ) -> None:
        super().__init__(node_1, node_2, label)
        self.resistance = resistance

    @property
    def resistance(self) -> float:
        """Resistance in ohms; must be positive."""
        return self._resistance

    @resistance.setter
    def resistance(self, value: float) -> None:
        self._resistance = _check_positive(value, f"resistance of {self.label!r}")

    def admittance(self, frequency: float) -> complex:
        return complex(1.0 / self._resistance)

    def __repr__(self) -> str:
        return (
            f"Resistor(node_1={self.node_1!r}, node_2={self.node_2!r}, "
            f"resistance={self._resistance!r}, label={self.label!r})"
        )


class Capacitor(Component):
    """An ideal capacitor with admittance ``j 2 pi f C``."""

    kind: ClassVar[str] = "Capacitor"

    def __init__(
        self,
        node_1: int = UNCONNECTED,
        node_2: int = UNCONNECTED,
        capacitance: float = 1.0,
        label: str = "C",
    ) -> None:
        super().__init__(node_1, node_2, label)
        self.capacitance = capacitance

    @property
    def capacitance(self) -> float:
        """Capacitance in farads; must be positive."""
        return self._capacitance

    @capacitance.setter
    def capacitance(self, value: float) -> None:
        self._capacitance = _check_positive(value, f"capacitance of {self.label!r}")

    def admittance(self, frequency: float) -> complex:
        return complex(0.0, 2.0 * math.pi * frequency * self._capacitance)

    def __repr__(self) -> str:
        return (
            f"Capacitor(node_1={self.node_1!r}, node_2={self.node_2!r}, "
            f"capacitance={self._capacitance!r}, label={self.label!r})"
        )


class Inductor(Component):
    """An ideal inductor with admittance ``-j / (2 pi f L)``."""

    kind: ClassVar[str] = "Inductor"

    def __init__(
        self,
        node_1: int = UNCONNECTED,
        node_2: int = UNCONNECTED,
        inductance: float = 1.0,
        label: str = "L",
    ) -> None:
        super().__init__(node_1, node_2, label)
        self.inductance = inductance

    @property
    def inductance(self) -> float:
        """Inductance in henries; must be positive."""
        return self._inductance

    @inductance.setter
    def inductance(self, value: float) -> None:
        self._inductance = _check_positive(value, f"inductance of {self.label!r}")

    def admittance(self, frequency: float) -> complex:
        return complex(0.0, -1.0 / (2.0 * math.pi * frequency * self._inductance))

    def __repr__(self) -> str:
        return (
            f"Inductor(node_1={self.node_1!r}, node_2={self.node_2!r}, "
            f"inductance={self._inductance!r}, label={self.label!r})"
        )