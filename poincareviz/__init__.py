"""Scatter views of Poincaré sections and invariant manifolds from point files."""

__version__ = "0.1.0"