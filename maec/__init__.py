"""Modular audio engine components: chains of modules that generate and process audio."""

__version__ = "0.1.0"