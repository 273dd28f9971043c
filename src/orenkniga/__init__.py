"""Terminal e-book reader with deterministic pagination."""

__version__ = "0.1.0"
