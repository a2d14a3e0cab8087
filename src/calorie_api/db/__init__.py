"""Database layer."""

from .mongo import MongoDB
from .unit_of_work import UnitOfWork

__all__ = ["MongoDB", "UnitOfWork"]
