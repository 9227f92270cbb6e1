"""Tests for the Clusterable element handle."""

import copy

import numpy as np
import pytest

from spatialclust.core.clusterable import Clusterable, wrap_all
from spatialclust.core.exceptions.models.clusterable import ElementContractError
from spatialclust.core.models.spatial import Atom, Cluster


class Opaque:
    pass


class CenterOnly:
    def center(self):
        return (0.0, 0.0, 0.0)


class TestClusterable:
    def test_leaf_flattens_to_itself(self):
        atom = Atom(atomic_number=6, x=1.0, y=2.0, z=3.0)
        handle = Clusterable(atom, Atom)
        assert handle.flatten() == [atom]
        np.testing.assert_allclose(handle.center(), [1.0, 2.0, 3.0])

    def test_collection_flattens_to_concatenation(self, make_atoms):
        first = make_atoms([(0, 0, 0), (1, 0, 0)])
        second = make_atoms([(5, 0, 0)])
        handle = Clusterable([first, second], Atom)
        expected = (
            Clusterable(first, Atom).flatten() + Clusterable(second, Atom).flatten()
        )
        assert handle.flatten() == expected

    def test_empty_collection_flattens_to_nothing(self):
        assert Clusterable([], Atom).flatten() == []

    def test_type_token(self, make_atoms):
        atoms = make_atoms([(0, 0, 0), (1, 0, 0)])
        a = Clusterable(atoms[0], Atom)
        b = Clusterable(atoms[1], Atom)
        group = Clusterable(atoms, Atom)
        assert a.type() == b.type()
        assert a.type() != group.type()
        assert a.type() is Atom
        assert a.type_name == "spatialclust.core.models.spatial.atom.Atom"

    def test_leaf_type(self):
        assert Clusterable(Atom(), Atom).leaf_type is Atom

    def test_copies_alias_the_element(self):
        handle = Clusterable(Atom(x=2.0), Atom)
        for clone in (copy.copy(handle), copy.deepcopy(handle)):
            assert clone.shares_element_with(handle)
            assert clone.flatten()[0] is handle.flatten()[0]

    def test_separate_handles_do_not_alias(self):
        atom = Atom()
        assert not Clusterable(atom, Atom).shares_element_with(Clusterable(atom, Atom))

    def test_wrapping_a_handle_unwraps_it(self):
        atom = Atom(x=3.0)
        outer = Clusterable(Clusterable(atom, Atom), Atom)
        assert outer.type() is Atom
        assert outer.flatten() == [atom]

    def test_adapter_is_immutable(self):
        handle = Clusterable(Atom(), Atom)
        with pytest.raises(AttributeError):
            handle._model._element = Atom(x=1.0)

    def test_missing_rules_fail_at_construction(self):
        with pytest.raises(ElementContractError):
            Clusterable(Opaque(), Atom)
        with pytest.raises(ElementContractError) as info:
            Clusterable(CenterOnly(), Atom)
        assert info.value.capability == "flatten"

    def test_cluster_is_an_element(self, make_atoms):
        cluster = Cluster()
        for atom in make_atoms([(0, 0, 0), (2, 0, 0)]):
            cluster.add(Clusterable(atom, Atom))
        cluster.compute_center()

        handle = Clusterable(cluster, Atom)
        assert handle.type() is Cluster
        assert handle.flatten() == cluster.flatten()
        np.testing.assert_allclose(handle.center(), [1.0, 0.0, 0.0])


class TestWrapAll:
    def test_one_handle_per_element(self, make_atoms):
        atoms = make_atoms([(0, 0, 0), (1, 0, 0), (2, 0, 0)])
        handles = wrap_all(atoms, Atom)
        assert len(handles) == 3
        assert [h.flatten()[0] for h in handles] == atoms

    def test_mixed_kinds(self, make_atoms):
        atoms = make_atoms([(0, 0, 0), (1, 0, 0)])
        handles = wrap_all([atoms[0], atoms, [atoms]], Atom)
        assert [h.type() for h in handles] == [Atom, list, list]
        assert [len(h.flatten()) for h in handles] == [1, 2, 2]
