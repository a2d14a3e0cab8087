"""Repository for the users collection (calorie intake + biometrics)."""

from datetime import datetime

from motor.motor_asyncio import AsyncIOMotorCollection

from calorie_api.models.calorie_intake import CalorieEntry
from calorie_api.models.user import UserProfile

from .base import BaseRepository

# Fields this service reads; the rest of the user document belongs to other services.
PROFILE_PROJECTION = {
    "height": 1,
    "weight": 1,
    "dob": 1,
    "gender": 1,
    "goal": 1,
    "calorieIntake": 1,
}


class UserRepository(BaseRepository[UserProfile]):
    """
    Repository for user documents.

    Calorie entries live in the embedded `calorieIntake` array. Writes are
    single-document update operators ($push, $pull), so concurrent
    mutations for the same user never overwrite each other.
    """

    model_class = UserProfile

    def __init__(self, collection: AsyncIOMotorCollection):
        super().__init__(collection)

    async def get_profile(self, user_id: str) -> UserProfile | None:
        """
        Load the biometric profile and calorie history of a user.

        Args:
            user_id: User ObjectId as string

        Returns:
            UserProfile, or None if no such user exists
        """
        return await self.find_by_id(user_id, projection=PROFILE_PROJECTION)

    async def push_calorie_entry(self, user_id: str, entry: CalorieEntry) -> bool:
        """
        Append a calorie entry to the user's history.

        Returns:
            True if the user exists
        """
        return await self.update_one(
            user_id,
            {"$push": {"calorieIntake": entry.to_mongo()}},
        )

    async def pull_calorie_entries(self, user_id: str, item: str, date: datetime) -> bool:
        """
        Remove every entry with exactly this item and date.

        Other entries are left as stored, including keys this service does
        not model.

        Returns:
            True if the user exists
        """
        return await self.update_one(
            user_id,
            {"$pull": {"calorieIntake": {"item": item, "date": date}}},
        )
