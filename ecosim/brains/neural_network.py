"""Feed-forward neural network used as an animal's decision function.

Each layer is a set of neurons with a bias and one weight per input;
activation is ReLU. Parameters are flattened neuron by neuron, bias first:

    [n0.bias, n0.w0, n0.w1, ..., n1.bias, n1.w0, ...]   # layer 0
    [...]                                               # layer 1, ...

That order is the genome layout, so ``from_weights(weights())`` is exact.
"""

from __future__ import annotations

import random
from typing import Iterable, List, Sequence

import numpy as np

from ecosim.exceptions import InvalidParameterError, ShapeMismatchError
from ecosim.util.rng import gen_range_inclusive_f32


def _check_topology(topology: Sequence[int]) -> None:
    if len(topology) < 2:
        raise InvalidParameterError(
            f"Network topology needs at least an input and an output layer, got {list(topology)}"
        )
    if any(size < 1 for size in topology):
        raise InvalidParameterError(f"Layer sizes must be positive, got {list(topology)}")


def parameter_count(topology: Sequence[int]) -> int:
    """Number of weights (including biases) a network of this shape holds."""
    _check_topology(topology)
    return sum((inputs + 1) * outputs for inputs, outputs in zip(topology, topology[1:]))


class Layer:
    """Fully connected ReLU layer.

    Attributes:
        biases: float32 array of shape (outputs,)
        weights: float32 array of shape (outputs, inputs)
    """

    __slots__ = ("biases", "weights")

    def __init__(self, biases: np.ndarray, weights: np.ndarray) -> None:
        self.biases = np.asarray(biases, dtype=np.float32)
        self.weights = np.asarray(weights, dtype=np.float32)

    @property
    def input_size(self) -> int:
        return self.weights.shape[1]

    @property
    def output_size(self) -> int:
        return self.weights.shape[0]

    def propagate(self, inputs: np.ndarray) -> np.ndarray:
        return np.maximum(self.weights @ inputs + self.biases, np.float32(0.0))

    def parameters(self) -> np.ndarray:
        """Bias followed by weights, neuron by neuron."""
        return np.column_stack((self.biases, self.weights)).reshape(-1)


class NeuralNetwork:
    """Stack of ReLU layers.

    Example:
        nn = NeuralNetwork.random(rng, [9, 18, 2])
        speed_delta, rotation_delta = nn.propagate(vision)
    """

    def __init__(self, layers: List[Layer]) -> None:
        self.layers = layers

    @property
    def topology(self) -> List[int]:
        return [self.layers[0].input_size] + [layer.output_size for layer in self.layers]

    @classmethod
    def random(cls, rng: random.Random, topology: Sequence[int]) -> "NeuralNetwork":
        """Draw every parameter uniformly from [-1, 1], in parameter order."""
        _check_topology(topology)
        count = parameter_count(topology)
        weights = [gen_range_inclusive_f32(rng, -1.0, 1.0) for _ in range(count)]
        return cls.from_weights(topology, weights)

    @classmethod
    def from_weights(cls, topology: Sequence[int], weights: Iterable[float]) -> "NeuralNetwork":
        """Rebuild a network from a flat parameter vector.

        Raises:
            ShapeMismatchError: If the vector is longer or shorter than the topology needs
        """
        expected = parameter_count(topology)
        flat = np.asarray(list(weights), dtype=np.float32).reshape(-1)
        if flat.size != expected:
            raise ShapeMismatchError(
                f"Topology {list(topology)} needs {expected} weights, got {flat.size}"
            )

        layers = []
        offset = 0
        for inputs, outputs in zip(topology, topology[1:]):
            size = (inputs + 1) * outputs
            block = flat[offset:offset + size].reshape(outputs, inputs + 1)
            layers.append(Layer(block[:, 0].copy(), block[:, 1:].copy()))
            offset += size
        return cls(layers)

    def propagate(self, inputs: Sequence[float]) -> np.ndarray:
        """Run a forward pass.

        Raises:
            ShapeMismatchError: If the input width differs from the first layer's
        """
        values = np.asarray(inputs, dtype=np.float32)
        if values.shape != (self.layers[0].input_size,):
            raise ShapeMismatchError(
                f"Expected {self.layers[0].input_size} inputs, got {values.size}"
            )
        for layer in self.layers:
            values = layer.propagate(values)
        return values

    def weights(self) -> np.ndarray:
        """All parameters as one flat float32 array, in genome order."""
        return np.concatenate([layer.parameters() for layer in self.layers])
