"""Time-step simulation of ambulance dispatch across a network of hospitals."""

__version__ = "0.1.0"