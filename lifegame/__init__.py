"""A tiny turn-based text game built around a polymorphic action hierarchy."""

__version__ = "0.1.0"
