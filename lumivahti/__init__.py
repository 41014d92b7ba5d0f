"""Lumivahti – roof snow load estimate and thaw warning for Finnish postal codes."""

__version__ = "1.0.0"
