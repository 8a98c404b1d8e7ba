"""Main entry point for the ecosim foraging simulation.

Runs the simulation headless for a number of generations and logs the
fitness statistics of every finished generation.
"""

import argparse
import json
import logging
import sys

from ecosim.config import SimulationConfig
from ecosim.exceptions import EcosimError
from ecosim.logging_config import configure_logging
from ecosim.simulation import Simulation
from ecosim.util import ChaCha8Random

logger = logging.getLogger(__name__)


def run_headless(generations: int, config: SimulationConfig, seed=None, export_stats=None):
    """Train the simulation for a number of generations.

    Args:
        generations: Number of generations to complete
        config: Simulation configuration
        seed: Optional integer seed for deterministic behavior
        export_stats: Optional filename to export per-generation stats as JSON

    Returns:
        List of per-generation statistics dicts
    """
    rng = ChaCha8Random(seed)
    simulation = Simulation.random(rng, config)

    history = []
    for _ in range(generations):
        statistics = simulation.train(rng)
        record = {"generation": simulation.generation, **statistics.to_dict()}
        history.append(record)
        logger.info("Generation %d: %s", simulation.generation, statistics)

    if export_stats:
        with open(export_stats, "w", encoding="utf-8") as f:
            json.dump(history, f, indent=2)
        logger.info("Stats exported to: %s", export_stats)

    return history


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Evolving Foraging Simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run 10 generations with default settings
  python main.py

  # Reproducible run
  python main.py --generations 50 --seed 42

  # Small, fast world with stats exported for analysis
  python main.py --animals 10 --foods 20 --generation-length 500 --export-stats run.json
        """,
    )

    parser.add_argument(
        "--generations",
        type=int,
        default=10,
        help="Number of generations to simulate (default: 10)",
    )

    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for deterministic behavior (optional)"
    )

    parser.add_argument("--animals", type=int, default=None, help="Number of animals")
    parser.add_argument("--foods", type=int, default=None, help="Number of food items")
    parser.add_argument(
        "--generation-length", type=int, default=None, help="Steps per generation"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: ECOSIM_LOG_LEVEL env var or INFO)",
    )

    parser.add_argument(
        "--export-stats",
        type=str,
        default=None,
        metavar="FILENAME",
        help="Export per-generation stats to a JSON file (e.g., results.json)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    config = SimulationConfig()
    if args.animals is not None:
        config.world.animals = args.animals
    if args.foods is not None:
        config.world.foods = args.foods
    if args.generation_length is not None:
        config.evolution.generation_length = args.generation_length
    return config.validate()


def main(argv=None):
    """Parse command-line arguments and run the simulation."""
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level, extra_loggers=[__name__])

    try:
        config = config_from_args(args)
        logger.info(
            "Starting simulation: %d generations, %d animals, %d foods, seed=%s",
            args.generations,
            config.world.animals,
            config.world.foods,
            args.seed,
        )
        run_headless(args.generations, config, seed=args.seed, export_stats=args.export_stats)
    except EcosimError as e:
        logger.error("Simulation failed: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
