# Standard library imports
import logging
import re
from typing import Any, Dict, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...core.exceptions import ConflictError, NotFoundError
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.models.pagination import PaginatedResult
from ...domain.constants import UserFields
from .mongo_connection import get_user_collection

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User does not exist with this id"


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def ensure_indexes(self) -> None:
        """Create the unique email index that backs the one-account-per-email rule"""
        await self.user_collection.create_index(UserFields.EMAIL, unique=True)

    async def list(self, search: str, page: int, limit: int) -> PaginatedResult[User]:
        """
        Search non-admin users, one page at a time

        Args:
            search: Free-text term matched case-insensitively against name, email and phone
            page: 1-based page number
            limit: Page size

        Returns:
            PaginatedResult of users without passwords
        """
        query = self._build_search_filter(search)
        projection = {UserFields.PASSWORD: 0}

        cursor = self.user_collection.find(query, projection).skip((page - 1) * limit).limit(limit)
        documents = await cursor.to_list(length=limit)
        count = await self.user_collection.count_documents(query)

        users = [self._document_to_user(document) for document in documents]
        return PaginatedResult.build(users, count=count, page=page, limit=limit)

    async def get_by_id(self, user_id: str) -> User:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model without password

        Raises:
            NotFoundError: If the ID is malformed or no user has it
        """
        object_id = self._to_object_id(user_id)
        document = await self.user_collection.find_one(
            {UserFields.MONGO_ID: object_id},
            {UserFields.PASSWORD: 0},
        )
        if document is None:
            raise NotFoundError(USER_NOT_FOUND)
        return self._document_to_user(document)

    async def create(self, user: User) -> User:
        """
        Insert a new user

        Args:
            user: User domain model without an ID

        Returns:
            Created User domain model with ID set

        Raises:
            ConflictError: If a user with the same email already exists
        """
        user_dict = self._user_to_dict(user)

        try:
            result = await self.user_collection.insert_one(user_dict)
        except DuplicateKeyError:
            raise ConflictError("User with this email already exists")

        new_document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
        if new_document is None:
            raise RuntimeError("User was created but could not be retrieved")

        return self._document_to_user(new_document)

    async def update_by_id(self, user_id: str, fields: Dict[str, Any]) -> User:
        """
        Apply whitelisted fields to a user

        Args:
            user_id: ID of the user to update
            fields: Candidate updates; keys outside UserFields.UPDATABLE are dropped

        Returns:
            Updated User without password and image

        Raises:
            NotFoundError: If the user does not exist
        """
        object_id = self._to_object_id(user_id)
        updates = {key: value for key, value in fields.items() if key in UserFields.UPDATABLE}
        projection = {UserFields.PASSWORD: 0, UserFields.IMAGE: 0}

        if not updates:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id}, projection)
        else:
            document = await self.user_collection.find_one_and_update(
                {UserFields.MONGO_ID: object_id},
                {"$set": updates},
                projection=projection,
                return_document=ReturnDocument.AFTER,
            )

        if document is None:
            raise NotFoundError(USER_NOT_FOUND)
        return self._document_to_user(document)

    async def delete_by_id(self, user_id: str) -> User:
        """
        Delete a user

        Args:
            user_id: ID of the user to delete

        Returns:
            The deleted User, so callers can clean up its image

        Raises:
            NotFoundError: If the user does not exist
        """
        object_id = self._to_object_id(user_id)

        document = await self.user_collection.find_one_and_delete({UserFields.MONGO_ID: object_id})
        if document is None:
            raise NotFoundError(USER_NOT_FOUND)
        return self._document_to_user(document)

    async def exists_by_email(self, email: str) -> bool:
        """Check whether a user with this email exists"""
        if not email:
            return False

        document = await self.user_collection.find_one(
            {UserFields.EMAIL: email},
            {UserFields.MONGO_ID: 1},
        )
        return document is not None

    @staticmethod
    def _build_search_filter(search: str) -> Dict[str, Any]:
        pattern = {"$regex": f".*{re.escape(search or '')}.*", "$options": "i"}
        return {
            UserFields.IS_ADMIN: {"$ne": True},
            "$or": [{field: pattern} for field in UserFields.SEARCHABLE],
        }

    @staticmethod
    def _to_object_id(user_id: str) -> ObjectId:
        try:
            return ObjectId(user_id)
        except (InvalidId, ValueError, TypeError):
            raise NotFoundError(USER_NOT_FOUND)

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
            name=document.get(UserFields.NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            phone=document.get(UserFields.PHONE, ""),
            password=document.get(UserFields.PASSWORD),
            address=document.get(UserFields.ADDRESS, ""),
            image=document.get(UserFields.IMAGE),
            is_admin=bool(document.get(UserFields.IS_ADMIN, False)),
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        if not user:
            raise ValueError("User cannot be None")

        return {
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email,
            UserFields.PHONE: user.phone,
            UserFields.PASSWORD: user.password,
            UserFields.ADDRESS: user.address,
            UserFields.IMAGE: user.image,
            UserFields.IS_ADMIN: user.is_admin,
        }
