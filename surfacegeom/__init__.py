"""Parametrized surfaces, their differential geometry, and triangle and mesh helpers."""

__version__ = "0.1.0"