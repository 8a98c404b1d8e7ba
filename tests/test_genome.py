"""Tests for the Genome value type."""

import numpy as np
import pytest

from ecosim.evolution import Genome


class TestGenome:
    def test_length_and_indexing(self):
        genome = Genome([1.0, 2.0, 3.0])
        assert len(genome) == 3
        assert genome[0] == pytest.approx(1.0)
        assert genome[-1] == pytest.approx(3.0)

    def test_genes_are_float32(self):
        genome = Genome([0.1, 0.2])
        assert genome.as_array().dtype == np.float32

    def test_iteration_yields_python_floats(self):
        assert list(Genome([1, 2])) == [1.0, 2.0]
        assert all(isinstance(g, float) for g in Genome([1, 2]))

    def test_item_assignment(self):
        genome = Genome([1.0, 2.0])
        genome[1] = 5.5
        assert genome.to_list() == [1.0, 5.5]

    def test_slicing_not_supported(self):
        genome = Genome([1.0, 2.0, 3.0])
        with pytest.raises(TypeError):
            genome[0:2]
        with pytest.raises(TypeError):
            genome[0:2] = [0.0, 0.0]

    def test_equality_is_tolerant(self):
        assert Genome([1.0, 2.0]) == Genome([1.0000001, 2.0])
        assert Genome([1.0, 2.0]) != Genome([1.0, 2.1])

    def test_different_lengths_are_not_equal(self):
        assert Genome([1.0]) != Genome([1.0, 1.0])

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Genome([1.0]))

    def test_as_array_is_read_only(self):
        genome = Genome([1.0, 2.0])
        with pytest.raises(ValueError):
            genome.as_array()[0] = 9.0

    def test_copy_is_independent(self):
        genome = Genome([1.0, 2.0])
        clone = genome.copy()
        clone[0] = 7.0
        assert genome[0] == pytest.approx(1.0)

    def test_from_array_copies(self):
        source = np.array([1.0, 2.0], dtype=np.float32)
        genome = Genome.from_array(source)
        source[0] = 9.0
        assert genome[0] == pytest.approx(1.0)
