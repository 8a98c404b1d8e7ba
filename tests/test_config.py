"""Tests for configuration dataclasses and validation."""

import pytest

from ecosim.config import AnimalConfig, EvolutionConfig, SimulationConfig, WorldConfig
from ecosim.exceptions import ConfigurationError
from ecosim.simulation import build_genetic_algorithm


class TestSimulationConfig:
    def test_defaults_are_valid(self):
        config = SimulationConfig()
        assert config.validate() is config
        assert config.world.animals == 40
        assert config.world.foods == 60
        assert config.evolution.generation_length == 2500

    def test_to_dict(self):
        data = SimulationConfig().to_dict()
        assert set(data) == {"world", "animal", "evolution"}
        assert data["evolution"]["mutation_chance"] == pytest.approx(0.01)

    @pytest.mark.parametrize(
        "config",
        [
            SimulationConfig(world=WorldConfig(animals=0)),
            SimulationConfig(world=WorldConfig(foods=-1)),
            SimulationConfig(world=WorldConfig(eat_distance=-0.1)),
            SimulationConfig(animal=AnimalConfig(speed_min=0.0)),
            SimulationConfig(animal=AnimalConfig(speed_min=0.01, speed_max=0.005)),
            SimulationConfig(animal=AnimalConfig(initial_speed=0.1)),
            SimulationConfig(animal=AnimalConfig(speed_accel=-1.0)),
            SimulationConfig(evolution=EvolutionConfig(generation_length=0)),
            SimulationConfig(evolution=EvolutionConfig(mutation_chance=1.5)),
            SimulationConfig(evolution=EvolutionConfig(mutation_coefficient=-0.3)),
        ],
    )
    def test_invalid_values_rejected(self, config):
        with pytest.raises(ConfigurationError):
            config.validate()

    def test_build_genetic_algorithm_uses_mutation_settings(self):
        ga = build_genetic_algorithm(EvolutionConfig(mutation_chance=0.2, mutation_coefficient=0.7))
        assert float(ga.mutation_method.chance) == pytest.approx(0.2)
        assert float(ga.mutation_method.coefficient) == pytest.approx(0.7)
