"""MongoDB client lifecycle for the users database."""

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase


class MongoDB:
    """Process-wide Motor client, opened and closed by the app lifespan."""

    client: AsyncIOMotorClient | None = None
    _db_name: str = "fitness_db"

    @classmethod
    def connect(cls, uri: str, db_name: str) -> None:
        """
        Open the client.

        Datetimes come back timezone-aware (UTC) so stored entry dates
        compare directly with parsed request dates.
        """
        cls.client = AsyncIOMotorClient(uri, tz_aware=True)
        cls._db_name = db_name

    @classmethod
    def close(cls) -> None:
        if cls.client is not None:
            cls.client.close()
            cls.client = None

    @classmethod
    def get_database(cls) -> AsyncIOMotorDatabase:
        """
        Raises:
            RuntimeError: If called outside the app lifespan
        """
        if cls.client is None:
            raise RuntimeError("MongoDB not connected")
        return cls.client[cls._db_name]

    @classmethod
    def is_connected(cls) -> bool:
        return cls.client is not None
