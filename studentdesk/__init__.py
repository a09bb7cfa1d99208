"""Console student register with a simulated pressure-alarm controller."""

__version__ = "0.1.0"