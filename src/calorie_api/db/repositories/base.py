"""Base repository class with common database operations."""

from typing import Any, Generic, TypeVar

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


class BaseRepository(Generic[T]):
    """
    Base repository providing common document operations.

    Subclasses should set the `model_class` attribute to enable
    automatic document-to-model conversion.
    """

    model_class: type[T] | None = None

    def __init__(self, collection: AsyncIOMotorCollection):
        """
        Initialize repository with a MongoDB collection.

        Args:
            collection: Motor collection instance
        """
        self.collection = collection

    @staticmethod
    def _object_id(id: str) -> ObjectId | None:
        """Parse a string id, returning None if it is not a valid ObjectId."""
        try:
            return ObjectId(id)
        except (InvalidId, TypeError):
            return None

    def _to_model(self, doc: dict[str, Any] | None) -> T | dict[str, Any] | None:
        """Convert MongoDB document to Pydantic model if model_class is set."""
        if doc is None:
            return None
        if self.model_class is not None:
            # Convert ObjectId to string for id field
            if "_id" in doc:
                doc["id"] = str(doc.pop("_id"))
            return self.model_class.model_validate(doc)
        return doc

    async def find_by_id(
        self,
        id: str,
        projection: dict[str, Any] | None = None,
    ) -> T | dict[str, Any] | None:
        """
        Find document by ID.

        Args:
            id: Document ObjectId as string
            projection: Optional field projection

        Returns:
            Document as model or dict, or None if not found or id is malformed
        """
        oid = self._object_id(id)
        if oid is None:
            return None
        doc = await self.collection.find_one({"_id": oid}, projection)
        return self._to_model(doc)

    async def update_one(self, id: str, update: dict[str, Any]) -> bool:
        """
        Update a single document by ID.

        Args:
            id: Document ObjectId as string
            update: Update operators ($push, $pull, ...)

        Returns:
            True if a document matched the id
        """
        oid = self._object_id(id)
        if oid is None:
            return False

        result = await self.collection.update_one({"_id": oid}, update)
        return result.matched_count > 0
