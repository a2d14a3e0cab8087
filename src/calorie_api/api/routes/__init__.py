"""API routes."""

from . import calorie_intake

__all__ = ["calorie_intake"]
