"""Configurable rules engine for chess variants."""

__version__ = "0.1.0"
