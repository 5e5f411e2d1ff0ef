# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.constants import UserFields
from ...domain.exceptions import StorageError, UserAlreadyExistsError, UserNotFoundError
from ...domain.models.user import User
from ...domain.repositories.user_repository import UserRepository


EMAIL_INDEX_NAME = "email_unique"


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: AsyncIOMotorCollection) -> None:
        self.user_collection = user_collection
        self.indexes_ensured = False

    async def ensure_indexes(self) -> None:
        """
        Create the unique index on email

        Uniqueness is enforced here rather than by a find-then-insert check,
        so concurrent creates for the same email cannot both succeed.
        """
        try:
            await self.user_collection.create_index(
                [(UserFields.EMAIL, ASCENDING)],
                unique=True,
                name=EMAIL_INDEX_NAME,
            )
        except PyMongoError as e:
            raise StorageError(f"Error creating user indexes: {str(e)}")
        self.indexes_ensured = True

    async def create(self, user: User) -> User:
        """
        Insert a new user

        Args:
            user: User domain model without an id

        Returns:
            Saved User domain model with ID set

        Raises:
            UserAlreadyExistsError: If the email is already taken
            StorageError: If the unique email index cannot be created
        """
        # Never insert without the unique index in place (startup may have failed to build it)
        if not self.indexes_ensured:
            await self.ensure_indexes()

        user_dict = self._user_to_dict(user)
        try:
            result = await self.user_collection.insert_one(user_dict)
        except DuplicateKeyError:
            raise UserAlreadyExistsError()
        except PyMongoError as e:
            raise StorageError(f"Error creating user: {str(e)}")

        user_dict[UserFields.MONGO_ID] = result.inserted_id
        return self._document_to_user(user_dict)

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
        except PyMongoError as e:
            raise StorageError(f"Error finding user by email: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)

    async def update(
        self,
        email: str,
        full_name: Optional[str] = None,
        password: Optional[str] = None,
    ) -> User:
        """
        Replace full name and/or password of an existing user

        Empty or missing values leave the stored field unchanged.

        Raises:
            UserNotFoundError: If no user has this email
        """
        changes: Dict[str, Any] = {}
        if full_name:
            changes[UserFields.FULL_NAME] = full_name
        if password:
            changes[UserFields.PASSWORD] = password

        if not changes:
            user = await self.find_by_email(email)
            if user is None:
                raise UserNotFoundError()
            return user

        try:
            document = await self.user_collection.find_one_and_update(
                {UserFields.EMAIL: email},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise StorageError(f"Error updating user: {str(e)}")

        if document is None:
            raise UserNotFoundError()
        return self._document_to_user(document)

    async def delete(self, email: str) -> None:
        """
        Delete user by email

        Raises:
            UserNotFoundError: If no user has this email
        """
        try:
            document = await self.user_collection.find_one_and_delete({UserFields.EMAIL: email})
        except PyMongoError as e:
            raise StorageError(f"Error deleting user: {str(e)}")
        if document is None:
            raise UserNotFoundError()

    async def list_all(self) -> List[User]:
        """
        List every user projected to full name and email

        Returns:
            Users with id, password and image_path left empty
        """
        projection = {UserFields.MONGO_ID: 0, UserFields.FULL_NAME: 1, UserFields.EMAIL: 1}
        try:
            cursor = self.user_collection.find({}, projection)
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            raise StorageError(f"Error retrieving users: {str(e)}")

        return [
            User(
                id=None,
                full_name=document.get(UserFields.FULL_NAME, ""),
                email=document.get(UserFields.EMAIL, ""),
                password="",
            )
            for document in documents
        ]

    async def set_image_path(self, email: str, image_path: str) -> bool:
        """
        Record the profile image path unless one is already set

        Returns:
            True if the user was updated, False if no user without an image matched
        """
        try:
            result = await self.user_collection.update_one(
                {UserFields.EMAIL: email, UserFields.IMAGE_PATH: {"$in": [None, ""]}},
                {"$set": {UserFields.IMAGE_PATH: image_path}},
            )
        except PyMongoError as e:
            raise StorageError(f"Error saving image path: {str(e)}")
        return result.modified_count == 1

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            full_name=document.get(UserFields.FULL_NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            password=document.get(UserFields.PASSWORD, ""),
            image_path=document.get(UserFields.IMAGE_PATH),
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        user_dict = {
            UserFields.FULL_NAME: user.full_name,
            UserFields.EMAIL: user.email,
            UserFields.PASSWORD: user.password,
        }
        if user.image_path:
            user_dict[UserFields.IMAGE_PATH] = user.image_path
        return user_dict
