"""Shared type definitions for planegeo."""

Coord = tuple[float, float]
