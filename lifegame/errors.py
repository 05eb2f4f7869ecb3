from __future__ import annotations


class DomainError(ValueError):
    """Raised when a game object would break one of its invariants."""


class ConfigError(RuntimeError):
    pass
