# mnacircuit

`mnacircuit` solves linear AC circuits with modified nodal analysis. A circuit is made of
resistors, capacitors and inductors placed between named nodes and driven by a single AC
voltage source that is referred to ground. The package works out the complex node
potentials and the current drawn from the source. It can also produce a text report in which
phasors are written as `magnitude cis phase pi`, to 4 significant figures.

## Installation

```
pip install .
```

To run the tests too:

```
pip install .[test]
pytest
```

## Building a circuit

```python
from mnacircuit.circuit import Circuit
from mnacircuit.components import Resistor, Capacitor, Inductor

circuit = Circuit()
circuit.set_ac_source("A", 1.0, 1.0)          # source node, amplitude V0, frequency (Hz)
circuit.add_component(Resistor, "A", "B", 1.0)
circuit.add_component(Inductor, "B", "C", 1.0)
circuit.add_component(Capacitor, "C", "GND", 1.0, "C1")

print(circuit.source_current())   # complex current leaving the source
print(circuit.node_potentials())  # potentials indexed by node id; GND (id 0) is 0
print(circuit.report())           # nodes, source, and impedance/drop/current per component
```

- `GND` is always node 0. Any other name gets the next free id the first time it is used.
  `Circuit.node_id(name)` returns that id.
- `add_component(kind, node_1, node_2, value, label=None)` creates the component, adds it
  and returns it. If no label is given, the component's default label is used: `R`, `C`
  or `L`.
- `Circuit.frequency` and `Circuit.v0` read and set the source's frequency and amplitude.
  `Circuit.source` is the `ACSource` itself.
- `Circuit.solve()` returns the raw solution `[-I_source, V_1, ..., V_n]`.
- `Circuit.copy()` returns a circuit with its own copy of the source and of the node
  names. It shares the component objects with the original.
- `Circuit.set_components(components)` replaces every component. It forgets all node
  names except `GND`.

### Errors

- `ACSource` raises `ValueError` for a source node that is not positive, for a zero
  amplitude, and for a frequency that is not positive.
- Components raise `ValueError` in these cases:
  - a resistance, capacitance or inductance that is not positive;
  - a node id below -1;
  - two terminals on the same node.
- A node id of -1 marks an unconnected terminal.
- `Circuit.solve()` and the methods that call it raise `CircuitError` for a circuit that
  is empty or has unconnected terminals.
- They raise `mnacircuit.linalg.SingularMatrixError` when the nodal system is singular.

## Example circuits

`mnacircuit.examples` contains three ready-made circuits, all subclasses of `Circuit`.
Each sweep does three things:

- writes whitespace-separated columns, with a `#` header line, to the path it is given;
- returns the rows it wrote;
- restores the parameters it varied.

The three circuits are:

- `RLC` is a series resistor, inductor and capacitor. It has these methods:
  - `set_resistance(value)` changes the resistor.
  - `power_frequency_sweep(path)` records the dissipated power for R = 0.5, 1, 1.5 and 2.
  - `phase_frequency_sweep(path)` records the phase lag of the current for the same
    resistances.
  - Both sweeps use 50 frequencies from 0.01 to 0.35 Hz.
- `WienBridgeCircuit` is a bridge whose output sits across resistor `R_mid`.
  `voltage_frequency_sweep(path)` records |V(B) − V(C)| for R2 = 1 to 3. It uses 50
  frequencies from 0.01 to 0.6 Hz.
- `Cuboid` is a cube of twelve 1 Ω resistors. It has these methods:
  - `total_resistance()` returns V0 / I_source as seen by the source. It raises
    `CircuitError` if the source current is zero.
  - `resistance_sweep(path)` varies resistor `Rab` from 0.01 to 5 Ω, then `Rbg`, and
    records the total resistance for each.

## Command line

```
mnacircuit [--output-dir DIR]
```

This runs a demonstration that prints reports to standard output:

1. It builds a small circuit and copies it.
2. It prints reports for the `RLC`, `WienBridgeCircuit` and `Cuboid` examples.
3. It runs their sweeps and writes the data files to `DIR`. `DIR` defaults to the current
   directory and is created if it does not exist.
4. It prints the total resistance of a small resistor network.

## Other modules

- `mnacircuit.linalg` holds the dense complex LU solver that the circuit uses:
  - `lu_decompose`, `lu_solve_factored` and `lu_solve`, which use partial pivoting;
  - `zero_matrix` and `zero_vector`;
  - `format_matrix` and `format_vector`, which print in phasor form.
- `mnacircuit.formatting` provides:
  - `format_phasor(value)`;
  - the separator printers `hline()`, `double_hline()` and `vspace()`.

## Limitations

A circuit has exactly one AC voltage source, and it always drives a node against ground.
There are no other kinds of source and no non-linear or time-domain elements. Circuits are
built in Python code only. The package does not read or write netlist files, and it does
not plot the sweep data it writes.