"""Brain: an animal's decision function, sized to its eye.

Topology is ``[eye cells, 2 * eye cells, 2]``. The two outputs are the
requested speed change and rotation change for the step; the simulation
clamps both before applying them.
"""

import random
from typing import Sequence, Tuple

import numpy as np

from ecosim.brains.neural_network import NeuralNetwork, parameter_count
from ecosim.evolution.genome import Genome
from ecosim.eye import Eye

OUTPUT_SIZE = 2


def brain_topology(eye: Eye) -> list:
    return [eye.cells, 2 * eye.cells, OUTPUT_SIZE]


class Brain:
    """Neural decision function whose weights are the animal's genome."""

    def __init__(self, nn: NeuralNetwork) -> None:
        self.nn = nn

    @classmethod
    def random(cls, rng: random.Random, eye: Eye) -> "Brain":
        return cls(NeuralNetwork.random(rng, brain_topology(eye)))

    @classmethod
    def from_genome(cls, genome: Genome, eye: Eye) -> "Brain":
        """Load weights from a genome.

        Raises:
            ShapeMismatchError: If the genome length does not match the topology
        """
        return cls(NeuralNetwork.from_weights(brain_topology(eye), genome.as_array()))

    @staticmethod
    def genome_length(eye: Eye) -> int:
        return parameter_count(brain_topology(eye))

    def as_genome(self) -> Genome:
        return Genome.from_array(self.nn.weights())

    def propagate(self, vision: Sequence[float]) -> Tuple[float, float]:
        """Return (speed delta, rotation delta), unclamped."""
        response = self.nn.propagate(np.asarray(vision, dtype=np.float32))
        return float(response[0]), float(response[1])
