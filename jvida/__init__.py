"""Conway's Game of Life on a square world: model, texts, saved generations and a text menu."""

__version__ = "1.0.0"
__all__ = ["model", "view", "storage", "controller"]