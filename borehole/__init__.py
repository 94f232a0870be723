"""Simulated borehole sensor monitoring: readings, alerts and dashboard helpers."""

__version__ = "0.1.0"
