import copy

import pytest

from mnacircuit.source import ACSource


def test_defaults():
    source = ACSource()
    assert source.node == 1
    assert source.v0 == 1
    assert source.frequency == 1.0


def test_values_are_stored():
    source = ACSource(3, 2 + 1j, 50.0)
    assert (source.node, source.v0, source.frequency) == (3, 2 + 1j, 50.0)


def test_v0_is_complex():
    source = ACSource(v0=5)
    assert source.v0 == complex(5, 0)
    assert isinstance(source.v0, complex)


@pytest.mark.parametrize("node", [0, -1, -5])
def test_non_positive_node_raises(node):
    with pytest.raises(ValueError):
        ACSource(node=node)


def test_zero_amplitude_raises():
    with pytest.raises(ValueError):
        ACSource(v0=0)


@pytest.mark.parametrize("freq", [0, -2.5])
def test_non_positive_frequency_raises(freq):
    with pytest.raises(ValueError):
        ACSource(frequency=freq)


def test_setter_validation_keeps_old_value():
    source = ACSource(frequency=10.0)
    with pytest.raises(ValueError):
        source.frequency = -1
    assert source.frequency == 10.0


def test_setters_update():
    source = ACSource()
    source.node = 4
    source.v0 = 100.0
    source.frequency = 150.0
    assert source == ACSource(4, 100.0, 150.0)


def test_copy_is_independent():
    source = ACSource(2, 3.0, 7.0)
    clone = copy.copy(source)
    clone.frequency = 9.0
    assert source.frequency == 7.0
    assert clone != source


def test_equality():
    assert ACSource(2, 1j, 3.0) == ACSource(2, 1j, 3.0)
    assert ACSource(2, 1j, 3.0) != ACSource(2, 1j, 4.0)


def test_repr_mentions_fields():
    text = repr(ACSource(2, 1.0, 3.0))
    assert text.startswith("ACSource(")
    assert "node=2" in text