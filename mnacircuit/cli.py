"""Command that demonstrates the circuit solver on a set of example circuits."""

from __future__ import annotations

import argparse
from pathlib import Path

from .circuit import Circuit
from .components import Resistor
from .examples import RLC, Cuboid, WienBridgeCircuit
from .formatting import double_hline, format_phasor, hline, vspace


def _section_break() -> None:
    vspace()
    double_hline()
    vspace()


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration; sweep data files go to ``--output-dir``."""
    parser = argparse.ArgumentParser(
        prog="mnacircuit", description="Demonstrate modified nodal analysis of AC circuits."
    )
    parser.add_argument(
        "--output-dir", type=Path, default=Path("."), help="directory for sweep data files"
    )
    args = parser.parse_args(argv)
    out = args.output_dir
    out.mkdir(parents=True, exist_ok=True)

    double_hline()
    print("Running main file to demonstrate example usage of MNA")
    vspace()
    double_hline()

    print("Creating a circuit on the spot (not as a class)")
    hline()
    circuit = Circuit()
    print("printing default circuit data")
    print(circuit.report())
    hline()

    print("Customising the circuit (add resistor and set source)")
    circuit.set_ac_source("A", 1.0, 1.0)
    circuit.add_component(Resistor, "A", "GND", 1.0)
    circuit.v0 = 100.0
    circuit.frequency = 150.0
    print(circuit.report())
    hline()
    print("Copying the circuit")
    hline()
    circuit_2 = circuit.copy()
    print(circuit_2.report())

    _section_break()

    print("Example 2: RLC Circuit")
    hline()
    rlc = RLC()
    print(rlc.report())
    rlc.power_frequency_sweep(out / "RLC_power_frequency_sweep.txt")
    rlc.phase_frequency_sweep(out / "RLC_phase_frequency_sweep.txt")

    _section_break()

    print("Example 3: Wien Bridge Circuit")
    hline()
    bridge = WienBridgeCircuit()
    print(bridge.report())
    bridge.voltage_frequency_sweep(out / "WienBridge_FreqSweep.txt")

    _section_break()

    print("Example 4: Cuboid of resistors")
    hline()
    cuboid = Cuboid()
    print(cuboid.report())
    cuboid.resistance_sweep(out / "Cuboid_ResistanceSweep.txt")

    triangle = Circuit()
    triangle.set_ac_source("A", 1, 1)
    triangle.add_component(Resistor, "A", "B", 1)
    triangle.add_component(Resistor, "A", "GND", 1)
    triangle.add_component(Resistor, "A", "C", 1)
    triangle.add_component(Resistor, "B", "C", 1)
    triangle.add_component(Resistor, "C", "GND", 1)
    triangle.add_component(Resistor, "B", "GND", 1)
    print(f"Rtot{format_phasor(1.0 / triangle.source_current())}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())