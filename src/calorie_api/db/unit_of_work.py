"""Unit of Work pattern for managing repository access."""

from motor.motor_asyncio import AsyncIOMotorDatabase

from .repositories.users import UserRepository


class UnitOfWork:
    """
    Unit of Work pattern implementation.

    Groups repository access and provides a single injection point for services.

    Usage:
        uow = UnitOfWork(db)
        profile = await uow.users.get_profile(user_id)
    """

    def __init__(self, db: AsyncIOMotorDatabase, users_collection: str = "users"):
        """
        Initialize Unit of Work with database instance.

        Args:
            db: Motor database instance
            users_collection: Name of the collection holding user documents
        """
        self._db = db
        self._users_collection = users_collection
        self._users: UserRepository | None = None

    @property
    def users(self) -> UserRepository:
        """Get Users repository (lazy loaded)."""
        if self._users is None:
            self._users = UserRepository(self._db[self._users_collection])
        return self._users
