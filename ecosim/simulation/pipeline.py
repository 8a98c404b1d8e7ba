"""Step pipeline for the simulation.

A step is an ordered list of named phases. The default pipeline runs
collisions, then brains, then movement; the order is part of the
simulation's reproducibility contract because collisions consume
randomness (food respawns) and the later phases read their results.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ecosim.simulation.context import StepContext

if TYPE_CHECKING:
    from ecosim.simulation.engine import Simulation


@dataclass
class PipelineStep:
    """A single step in the simulation pipeline.

    Attributes:
        name: Human-readable identifier for the step (e.g., "collisions")
        fn: Function that executes this step, receiving simulation and context
    """

    name: str
    fn: Callable[[Simulation, StepContext], None]


class SimulationPipeline:
    """Ordered sequence of steps executed once per simulation step."""

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    @property
    def steps(self) -> list[PipelineStep]:
        return self._steps

    @property
    def step_names(self) -> list[str]:
        """Get the names of all steps in order."""
        return [step.name for step in self._steps]

    def run(self, simulation: Simulation, ctx: StepContext) -> None:
        """Execute all pipeline steps in order against one context."""
        for step in self._steps:
            step.fn(simulation, ctx)


def _step_collisions(simulation: Simulation, ctx: StepContext) -> None:
    """COLLISIONS: Animals eat nearby food; eaten food respawns."""
    ctx.foods_eaten = simulation._phase_collisions(ctx.rng)


def _step_brains(simulation: Simulation, ctx: StepContext) -> None:
    """BRAINS: Perceive, decide, and adjust speed and heading."""
    simulation._phase_brains()


def _step_movement(simulation: Simulation, ctx: StepContext) -> None:
    """MOVEMENT: Advance along the heading and wrap around the torus."""
    simulation._phase_movement()


def default_pipeline() -> SimulationPipeline:
    """Build the canonical pipeline.

    Phase Order:
        1. collisions: Feed animals, respawn eaten food
        2. brains: Perception and decision
        3. movement: Position update with wrap-around
    """
    return SimulationPipeline(
        [
            PipelineStep("collisions", _step_collisions),
            PipelineStep("brains", _step_brains),
            PipelineStep("movement", _step_movement),
        ]
    )
