"""Genetic algorithm configuration constants."""

# Steps an animal lives before the population is replaced
GENERATION_LENGTH = 2500

# Gaussian mutation
MUTATION_CHANCE = 0.01  # Per-gene probability of being perturbed
MUTATION_COEFFICIENT = 0.3  # Maximum perturbation magnitude
