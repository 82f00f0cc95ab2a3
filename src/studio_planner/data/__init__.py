"""Data loading utilities."""

from .movement_loader import import_movements, load_movements

__all__ = ["import_movements", "load_movements"]
