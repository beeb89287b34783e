"""Genetic-algorithm machinery: individuals, populations, operators and the engine."""
