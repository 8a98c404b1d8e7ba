"""Simulation controller and its step pipeline."""

from ecosim.simulation.context import StepContext
from ecosim.simulation.engine import Simulation, build_genetic_algorithm
from ecosim.simulation.pipeline import PipelineStep, SimulationPipeline, default_pipeline

__all__ = [
    "PipelineStep",
    "Simulation",
    "SimulationPipeline",
    "StepContext",
    "build_genetic_algorithm",
    "default_pipeline",
]
