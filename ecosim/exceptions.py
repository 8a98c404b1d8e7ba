"""ecosim exception hierarchy.

Centralised base classes so callers can catch narrowly. Every class below
marks a broken contract: nothing in the library retries or repairs them.
"""


class EcosimError(Exception):
    """Root of all ecosim domain exceptions."""


class SimulationError(EcosimError):
    """Errors during simulation execution (world, entities, pipeline)."""


class GeneticsError(SimulationError):
    """Genome encoding, selection, crossover or mutation failure."""


class EmptyPopulationError(GeneticsError, ValueError):
    """An operation that needs at least one individual got none."""


class DegenerateWeightsError(GeneticsError, ValueError):
    """No valid fitness-weighted choice exists (all weights zero, or a weight is negative/NaN)."""


class LengthMismatchError(GeneticsError, ValueError):
    """Two genomes that must share a length do not."""


class ShapeMismatchError(GeneticsError, ValueError):
    """A weight vector does not fit the network topology it is loaded into."""


class ConfigurationError(EcosimError):
    """Invalid or missing configuration."""


class InvalidParameterError(ConfigurationError, ValueError):
    """A strategy or collaborator was constructed with an out-of-range parameter."""
