"""Dining philosophers simulation with threads and a starvation monitor."""

__version__ = "1.0.0"