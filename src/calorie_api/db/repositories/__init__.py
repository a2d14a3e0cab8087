"""Repository classes for database access."""

from .users import UserRepository

__all__ = ["UserRepository"]
