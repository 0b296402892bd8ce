import pytest

from mnacircuit.circuit import Circuit, CircuitError, nodes_invalid
from mnacircuit.components import Capacitor, Inductor, Resistor
from mnacircuit.linalg import SingularMatrixError
from mnacircuit.source import ACSource


def _ladder():
    c = Circuit()
    c.set_ac_source("A", 1.0, 1.0)
    c.add_component(Resistor, "A", "B", 2.0)
    c.add_component(Resistor, "B", "GND", 3.0)
    c.add_component(Capacitor, "B", "C", 0.5)
    c.add_component(Inductor, "C", "GND", 0.7)
    c.add_component(Resistor, "A", "C", 1.5)
    return c


def test_node_ids_ground_zero_and_stable():
    c = Circuit()
    assert c.node_id("GND") == 0
    a = c.node_id("A")
    b = c.node_id("B")
    assert a == c.node_id("A")
    assert len({0, a, b}) == 3
    assert c.num_nodes == max(a, b)


def test_add_component_uses_node_ids_and_default_label():
    c = Circuit()
    r = c.add_component(Resistor, "X", "GND", 4.0)
    assert (r.node_1, r.node_2) == (c.node_id("X"), 0)
    assert r.label == "R"
    assert r.resistance == 4.0
    named = c.add_component(Capacitor, "X", "Y", 1.0, "C9")
    assert named.label == "C9"
    assert c.components == [r, named]


def test_single_resistor_ohms_law():
    c = Circuit()
    c.set_ac_source("A", 5.0, 1.0)
    r = c.add_component(Resistor, "A", "GND", 2.5)
    assert c.source_current() * r.resistance == pytest.approx(c.v0)


def test_potentials_ground_and_source_node():
    c = _ladder()
    v = c.node_potentials()
    assert v[0] == 0
    assert v[c.source.node] == pytest.approx(c.v0)
    assert len(v) == c.num_nodes + 1


def test_equal_series_resistors_split_voltage():
    c = Circuit()
    c.set_ac_source("A", 3.0, 1.0)
    c.add_component(Resistor, "A", "B", 1.0)
    c.add_component(Resistor, "B", "GND", 1.0)
    v = c.node_potentials()
    a, b = c.node_id("A"), c.node_id("B")
    assert v[a] - v[b] == pytest.approx(v[b] - v[0])


def test_capacitor_current_leads():
    c = Circuit()
    c.set_ac_source("A", 1.0, 1.0)
    c.add_component(Capacitor, "A", "GND", 1.0)
    assert c.source_current().imag > 0
    assert abs(c.source_current().real) < 1e-12


def test_empty_circuit_raises():
    with pytest.raises(CircuitError):
        Circuit().solve()


def test_invalid_nodes_warn_and_raise():
    with pytest.warns(UserWarning):
        c = Circuit([Resistor()])
    with pytest.raises(CircuitError):
        c.source_current()


def test_nodes_invalid():
    assert nodes_invalid([Resistor(1, 0, 1.0), Capacitor()])
    assert not nodes_invalid([Resistor(1, 0, 1.0)])
    assert not nodes_invalid([])


def test_set_components_rejects_invalid_and_keeps_old():
    c = _ladder()
    before = c.components
    with pytest.raises(CircuitError):
        c.set_components([Resistor()])
    assert c.components == before


def test_set_components_replaces_and_solves():
    c = Circuit()
    r = Resistor(1, 0, 2.0)
    c.set_components([r])
    assert c.components == [r]
    assert c.source_current() * r.resistance == pytest.approx(c.v0)


def test_constructor_with_components_and_source():
    src = ACSource(2, 4.0, 2.0)
    parts = [Resistor(2, 1, 1.0), Resistor(1, 0, 1.0)]
    c = Circuit(parts, src)
    v = c.node_potentials()
    assert v[2] == pytest.approx(src.v0)
    assert v[2] - v[1] == pytest.approx(v[1])


def test_floating_nodes_are_singular():
    c = Circuit()
    c.set_ac_source("A", 1.0, 1.0)
    c.add_component(Resistor, "A", "GND", 1.0)
    c.add_component(Resistor, "B", "C", 1.0)
    with pytest.raises(SingularMatrixError):
        c.solve()


def test_set_ac_source_and_validation():
    c = Circuit()
    c.set_ac_source("N", 2.0, 3.0)
    assert c.source == ACSource(c.node_id("N"), 2.0, 3.0)
    with pytest.raises(ValueError):
        c.set_ac_source("GND", 1.0, 1.0)
    with pytest.raises(ValueError):
        c.frequency = -1.0
    with pytest.raises(ValueError):
        c.v0 = 0


def test_copy_is_independent_in_source_but_shares_components():
    c = _ladder()
    d = c.copy()
    assert d.source == c.source
    assert d.source is not c.source
    d.frequency = 5.0
    assert c.frequency == 1.0
    assert d.components == c.components
    assert d.source_current() != pytest.approx(c.source_current())
    d.frequency = 1.0
    assert d.source_current() == pytest.approx(c.source_current())


def test_report_contents():
    c = _ladder()
    text = c.report()
    assert text.startswith("Printing Circuit Data")
    assert f"Node A has id: {c.node_id('A')}" in text
    assert "Type: Inductor between nodes C and GND" in text
    assert text.count("Component label:") == len(c.components)


def test_report_empty():
    assert Circuit().report().endswith("Empty circuit")