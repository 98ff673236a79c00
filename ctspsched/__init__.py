"""TSPLIB distances and parsing, CTSP instance models and scheduler file names."""

__version__ = "0.1.0"