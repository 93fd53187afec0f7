"""Simulation engine: models, enums and the season/offseason systems."""
