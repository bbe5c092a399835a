"""Competitor registry backend: persons, competitions and results."""
