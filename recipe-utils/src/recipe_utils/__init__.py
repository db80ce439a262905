"""Recipe Utils - Quantity, duration and serving-size utilities for recipes."""

__version__ = "0.1.0"

from . import durations, quantities, recipes

__all__ = ["durations", "quantities", "recipes"]
