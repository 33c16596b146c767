"""Entity-component-system engine, collision, map and screen helpers for 2D platformer games."""

__version__ = "0.1.0"