"""Recursive ray tracing of sphere scenes with reflection, refraction and shadows."""

__version__ = "0.1.0"
