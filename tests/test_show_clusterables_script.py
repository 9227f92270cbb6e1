"""Tests for the show_clusterables command line script."""

import importlib.util
import logging
from pathlib import Path

import numpy as np
import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "show_clusterables.py"


@pytest.fixture(scope="module")
def show_clusterables():
    spec = importlib.util.spec_from_file_location("show_clusterables", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_one_handle_per_element_kind(show_clusterables):
    single, pair, nested, molecule = show_clusterables.build_handles()

    assert single.type_name.endswith("Atom")
    assert pair.type() is list
    assert nested.type() is list
    assert molecule.type() is show_clusterables.Molecule
    assert [len(h.flatten()) for h in (single, pair, nested, molecule)] == [1, 2, 3, 4]


def test_centers(show_clusterables):
    single, pair, nested, molecule = show_clusterables.build_handles()

    np.testing.assert_allclose(single.center(), [0.0, 0.0, 0.0])
    np.testing.assert_allclose(pair.center(), [0.0, 0.0, 0.0])
    np.testing.assert_allclose(molecule.center(), [1.5, 1.0, 0.0])


def test_nested_list_keeps_leaf_order(show_clusterables):
    single, pair, nested, _ = show_clusterables.build_handles()
    assert nested.flatten() == single.flatten() + pair.flatten()


def test_main_logs_every_handle(show_clusterables, caplog):
    with caplog.at_level(logging.INFO):
        assert show_clusterables.main([]) == 0

    for n in range(1, 5):
        assert f"Clusterable {n}" in caplog.text
    assert "stored type: builtins.list" in caplog.text
    assert "show_clusterables.Molecule" in caplog.text
    assert "C 3.000000 1.000000 0.000000" in caplog.text
