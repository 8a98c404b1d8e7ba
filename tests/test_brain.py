"""Tests for the neural network and the Brain wrapper."""

import numpy as np
import pytest

from ecosim.brains import Brain, Layer, NeuralNetwork, parameter_count
from ecosim.evolution import Genome
from ecosim.exceptions import InvalidParameterError, ShapeMismatchError
from ecosim.eye import Eye


class TestParameterCount:
    def test_counts_biases_and_weights(self):
        # (3 + 1) * 2 + (2 + 1) * 1
        assert parameter_count([3, 2, 1]) == 11

    def test_default_brain_size(self):
        assert Brain.genome_length(Eye()) == (9 + 1) * 18 + (18 + 1) * 2

    @pytest.mark.parametrize("topology", [[3], [], [3, 0, 2]])
    def test_invalid_topology(self, topology):
        with pytest.raises(InvalidParameterError):
            parameter_count(topology)


class TestLayer:
    def test_relu_propagation(self):
        layer = Layer(
            biases=np.array([0.0, 0.5], dtype=np.float32),
            weights=np.array([[-1.0, 1.0], [1.0, 1.0]], dtype=np.float32),
        )
        out = layer.propagate(np.array([2.0, 1.0], dtype=np.float32))
        np.testing.assert_allclose(out, [0.0, 3.5])

    def test_parameters_are_bias_first(self):
        layer = Layer(
            biases=np.array([0.1, 0.2], dtype=np.float32),
            weights=np.array([[1.0, 2.0], [3.0, 4.0]], dtype=np.float32),
        )
        np.testing.assert_allclose(layer.parameters(), [0.1, 1.0, 2.0, 0.2, 3.0, 4.0], rtol=1e-6)


class TestNeuralNetwork:
    def test_from_weights_layout(self):
        weights = [0.5, 1.0, -1.0, 0.25, 2.0, 0.0, 3.0]
        nn = NeuralNetwork.from_weights([2, 1, 2], weights)
        assert nn.topology == [2, 1, 2]
        # hidden = relu(0.5 + 1*x0 - 1*x1); out = relu([0.25 + 2h, 0 + 3h])
        np.testing.assert_allclose(nn.propagate([1.0, 0.5]), [2.25, 3.0])

    def test_weights_round_trip_exactly(self, seeded_rng):
        nn = NeuralNetwork.random(seeded_rng, [3, 4, 2])
        rebuilt = NeuralNetwork.from_weights([3, 4, 2], nn.weights())
        assert np.array_equal(rebuilt.weights(), nn.weights())

    def test_random_weights_in_range(self, seeded_rng):
        nn = NeuralNetwork.random(seeded_rng, [5, 6, 2])
        weights = nn.weights()
        assert weights.size == parameter_count([5, 6, 2])
        assert np.all(weights >= -1.0) and np.all(weights <= 1.0)

    def test_outputs_are_non_negative(self, seeded_rng):
        nn = NeuralNetwork.random(seeded_rng, [4, 8, 2])
        for _ in range(20):
            inputs = [seeded_rng.random() for _ in range(4)]
            assert np.all(nn.propagate(inputs) >= 0.0)

    @pytest.mark.parametrize("count", [10, 12])
    def test_wrong_weight_count(self, count):
        with pytest.raises(ShapeMismatchError):
            NeuralNetwork.from_weights([3, 2, 1], [0.0] * count)

    def test_wrong_input_width(self, seeded_rng):
        nn = NeuralNetwork.random(seeded_rng, [3, 2])
        with pytest.raises(ShapeMismatchError):
            nn.propagate([1.0, 2.0])


class TestBrain:
    def test_genome_round_trip(self, seeded_rng):
        eye = Eye()
        brain = Brain.random(seeded_rng, eye)
        genome = brain.as_genome()
        assert len(genome) == Brain.genome_length(eye)
        assert Brain.from_genome(genome, eye).as_genome() == genome

    def test_propagate_returns_two_floats(self, seeded_rng):
        eye = Eye(cells=3)
        brain = Brain.random(seeded_rng, eye)
        speed, rotation = brain.propagate([0.0, 0.5, 1.0])
        assert isinstance(speed, float) and isinstance(rotation, float)

    def test_mismatched_genome(self):
        with pytest.raises(ShapeMismatchError):
            Brain.from_genome(Genome([0.0] * 5), Eye())
