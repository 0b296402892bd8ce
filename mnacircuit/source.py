"""Sinusoidal voltage source driving a circuit node against ground."""

from __future__ import annotations


class ACSource:
    """An AC voltage source with a phasor amplitude and a frequency in hertz."""

    def __init__(self, node: int = 1, v0: complex = 1.0, frequency: float = 1.0) -> None:
        self.node = node
        self.v0 = v0
        self.frequency = frequency

    @property
    def node(self) -> int:
        """Id of the node the source drives; must be positive."""
        return self._node

    @node.setter
    def node(self, value: int) -> None:
        if value <= 0:
            raise ValueError(f"source node must be > 0, got {value}")
        self._node = int(value)

    @property
    def v0(self) -> complex:
        """Phasor amplitude; must be non-zero."""
        return self._v0

    @v0.setter
    def v0(self, value: complex) -> None:
        amplitude = complex(value)
        if amplitude == 0:
            raise ValueError("source amplitude V0 must be non-zero")
        self._v0 = amplitude

    @property
    def frequency(self) -> float:
        """Frequency in hertz; must be positive."""
        return self._frequency

    @frequency.setter
    def frequency(self, value: float) -> None:
        if value <= 0:
            raise ValueError(f"frequency must be > 0, got {value}")
        self._frequency = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ACSource):
            return NotImplemented
        return (self.node, self.v0, self.frequency) == (other.node, other.v0, other.frequency)

    def __repr__(self) -> str:
        return f"ACSource(node={self.node!r}, v0={self.v0!r}, frequency={self.frequency!r})"