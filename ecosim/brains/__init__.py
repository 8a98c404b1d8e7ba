"""Decision functions for animals."""

from ecosim.brains.brain import Brain
from ecosim.brains.neural_network import Layer, NeuralNetwork, parameter_count

__all__ = [
    "Brain",
    "Layer",
    "NeuralNetwork",
    "parameter_count",
]
