"""FX Monitor - simulated foreign-exchange monitoring service."""

__version__ = "1.0.0"
