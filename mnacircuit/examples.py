"""Ready-made example circuits with parameter sweeps written to text files."""

from __future__ import annotations

import cmath
import os
from collections.abc import Sequence
from pathlib import Path

from .circuit import Circuit, CircuitError
from .components import Capacitor, Inductor, Resistor

_MIN_CURRENT = 1e-12


def _linspace(start: float, end: float, count: int) -> list[float]:
    step = (end - start) / (count - 1)
    return [start + i * step for i in range(count)]


def _write_table(
    path: str | os.PathLike[str],
    header: str,
    rows: Sequence[tuple[float, Sequence[float]]],
) -> None:
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(header + "\n")
        for first, values in rows:
            handle.write(f"{first:g} " + "".join(f"{v:g} " for v in values) + "\n")


class Cuboid(Circuit):
    """A cube of twelve 1 ohm resistors, driven across a body diagonal."""

    _SWEEP_START = 0.01
    _SWEEP_END = 5.0
    _SWEEP_POINTS = 25

    def __init__(self) -> None:
        super().__init__()
        self.set_ac_source("A", 1.0, 1)
        # bottom face
        self.add_component(Resistor, "A", "B", 1.0, "Rab")
        self.add_component(Resistor, "B", "C", 1.0, "Rbc")
        self.add_component(Resistor, "C", "D", 1.0, "Rcd")
        self.add_component(Resistor, "D", "A", 1.0, "Rda")
        # top face
        self.add_component(Resistor, "G", "GND", 1.0, "Rhg")
        self.add_component(Resistor, "G", "F", 1.0, "Rgf")
        self.add_component(Resistor, "F", "E", 1.0, "Rfe")
        self.add_component(Resistor, "E", "GND", 1.0, "Regnd")
        # vertical edges
        self.add_component(Resistor, "C", "GND", 1.0, "Rcgnd")
        self.add_component(Resistor, "B", "G", 1.0, "Rbg")
        self.add_component(Resistor, "D", "E", 1.0, "Rde")
        self.add_component(Resistor, "A", "F", 1.0, "Raf")

    def total_resistance(self) -> float:
        """Resistance seen by the source, V0 / I_source."""
        current = self.source_current().real
        if current < _MIN_CURRENT:
            raise CircuitError("source current is zero: total resistance is infinite")
        return self.v0.real / current

    def resistance_sweep(
        self, path: str | os.PathLike[str] = "Cuboid_ResistanceSweep.txt"
    ) -> list[tuple[float, float, float]]:
        """Sweep resistor Rab, then Rbg, recording the total resistance.

        Writes columns ``R R_pri R_sec`` to ``path`` and returns the rows.
        Both resistors are reset to 1 ohm afterwards.
        """
        primary = self.components[0]
        secondary = self.components[9]
        grid = _linspace(self._SWEEP_START, self._SWEEP_END, self._SWEEP_POINTS)

        primary_totals = []
        for value in grid:
            primary.resistance = value
            primary_totals.append(self.total_resistance())
        primary.resistance = 1.0

        secondary_totals = []
        for value in grid:
            secondary.resistance = value
            secondary_totals.append(self.total_resistance())
        secondary.resistance = 1.0

        rows = list(zip(grid, primary_totals, secondary_totals))
        _write_table(path, "# R R_pri R_sec", [(r, (p, s)) for r, p, s in rows])
        print(f"Cuboid resistance sweep data saved to '{Path(path)}'")
        return rows


class RLC(Circuit):
    """A series resistor, inductor and capacitor driven from node A."""

    RESISTANCES = (0.5, 1.0, 1.5, 2.0)

    def __init__(self) -> None:
        super().__init__()
        self.set_ac_source("A", 1, 1)
        self.add_component(Resistor, "A", "B", 1.0)
        self.add_component(Inductor, "B", "C", 1.0)
        self.add_component(Capacitor, "C", "GND", 1.0)

    def set_resistance(self, value: float) -> None:
        """Set the resistance of the series resistor."""
        self.components[0].resistance = value

    def _frequency_sweep(self, quantity) -> list[tuple[float, tuple[float, ...]]]:
        rows = []
        for freq in _linspace(0.01, 0.35, 50):
            self.frequency = freq
            values = []
            for resistance in self.RESISTANCES:
                self.set_resistance(resistance)
                values.append(quantity(self.source_current(), resistance))
            rows.append((freq, tuple(values)))
        self.set_resistance(1.0)
        self.frequency = 1.0
        return rows

    def power_frequency_sweep(
        self, path: str | os.PathLike[str] = "RLC_power_frequency_sweep.txt"
    ) -> list[tuple[float, tuple[float, ...]]]:
        """Record dissipated power against frequency for several resistances."""
        print("Performing Power Frequency Sweep for Multiple R values")
        rows = self._frequency_sweep(lambda current, r: 0.5 * abs(current) ** 2 * r)
        header = "# freq " + "".join(f"P(R={r:g}) " for r in self.RESISTANCES)
        _write_table(path, header, rows)
        print(f"Power Frequency Sweep data written to '{Path(path)}' successfully.")
        return rows

    def phase_frequency_sweep(
        self, path: str | os.PathLike[str] = "RLC_phase_frequency_sweep.txt"
    ) -> list[tuple[float, tuple[float, ...]]]:
        """Record the current's phase lag against frequency for several resistances."""
        print("Performing Phase Frequency Sweep for Multiple R values")
        rows = self._frequency_sweep(lambda current, r: -cmath.phase(current))
        header = "# freq " + "".join(f"Phase(R={r:g}) " for r in self.RESISTANCES)
        _write_table(path, header, rows)
        print(f"Phase Frequency Sweep data written to '{Path(path)}' successfully.")
        return rows


class WienBridgeCircuit(Circuit):
    """A Wien-style bridge with resistor R_mid across its output nodes B and C."""

    RESISTANCES = (1.0, 1.5, 2.0, 2.5, 3.0)

    def __init__(self) -> None:
        super().__init__()
        self.set_ac_source("A", 1.0, 1.0)
        # left arm
        self.add_component(Resistor, "A", "B", 1, "R1")
        self.add_component(Resistor, "B", "GND", 1, "R2")
        # right arm
        self.add_component(Capacitor, "A", "C", 1.0, "C1")
        self.add_component(Resistor, "A", "C", 1.0, "R3")
        self.add_component(Capacitor, "C", "D", 1.0, "C2")
        self.add_component(Resistor, "D", "GND", 1.0, "R4")
        # bridge
        self.add_component(Resistor, "B", "C", 1.0, "R_mid")

    def voltage_frequency_sweep(
        self, path: str | os.PathLike[str] = "WienBridge_FreqSweep.txt"
    ) -> list[tuple[float, tuple[float, ...]]]:
        """Record |V(B) - V(C)| against frequency for several values of R2."""
        print("Performing Voltage Frequency Sweep for Multiple R2 values")
        r2 = self.components[1]
        bridge = self.components[6]
        rows = []
        for freq in _linspace(0.01, 0.6, 50):
            self.frequency = freq
            values = []
            for resistance in self.RESISTANCES:
                r2.resistance = resistance
                potentials = self.node_potentials()
                values.append(abs(potentials[bridge.node_1] - potentials[bridge.node_2]))
            rows.append((freq, tuple(values)))
        self.frequency = 1.0
        r2.resistance = 1.0

        header = "# freq " + "".join(f"V(R2={r:g}) " for r in self.RESISTANCES)
        _write_table(path, header, rows)
        print(f"Voltage Frequency Sweep data written to '{Path(path)}' successfully.")
        return rows