# Standard library imports
import logging
from typing import Any, Dict, List, Optional, Union

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user_record import NewUserRecord, UserChanges, UserRecord
from ...domain.constants import UserFields
from ...domain.exceptions import DuplicateRecordError, RepositoryError
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import get_user_collection

logger = logging.getLogger(__name__)


def _to_mongo_id(user_id: str) -> Union[ObjectId, str]:
    """ObjectId for 24-char hex IDs, the raw string for any other ID format"""
    try:
        return ObjectId(user_id)
    except (InvalidId, TypeError):
        return user_id


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            UserRecord if found, None otherwise
        """
        if not user_id:
            return None

        document = await self._find_one({UserFields.MONGO_ID: _to_mongo_id(user_id)}, "find_by_id")
        return self._document_to_record(document) if document is not None else None

    async def find_by_email(self, email: str) -> Optional[UserRecord]:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            UserRecord if found, None otherwise
        """
        if not email:
            return None

        document = await self._find_one({UserFields.EMAIL: email}, "find_by_email")
        return self._document_to_record(document) if document is not None else None

    async def find_all(self) -> List[UserRecord]:
        """List every stored user ordered by creation time"""
        try:
            cursor = self.user_collection.find({}).sort(UserFields.CREATED_AT, 1)
            records = []
            async for document in cursor:
                records.append(self._document_to_record(document))
            return records
        except PyMongoError as e:
            logger.error(f"Error listing users: {e}", exc_info=True)
            raise RepositoryError(f"Error listing users: {str(e)}", operation="find_all")

    async def add(self, record: NewUserRecord) -> UserRecord:
        """
        Insert a new user

        Args:
            record: New user payload with a pre-generated ID

        Returns:
            Stored UserRecord with created_at/updated_at set

        Raises:
            DuplicateRecordError: If the ID or email is already taken
        """
        now = utc_now()
        document = {
            UserFields.MONGO_ID: _to_mongo_id(record.id),
            UserFields.NAME: record.name,
            UserFields.EMAIL: record.email,
            UserFields.ACCESS_TOKEN: record.access_token,
            UserFields.PASSWORD_HASH: record.password_hash,
            UserFields.CREATED_AT: now,
            UserFields.UPDATED_AT: now,
        }

        try:
            await self.user_collection.insert_one(document)
        except DuplicateKeyError as e:
            logger.warning(f"Duplicate key while adding user {record.id}: {e}")
            raise DuplicateRecordError(f"User {record.id} conflicts with an existing record", operation="add")
        except PyMongoError as e:
            logger.error(f"Error adding user {record.id}: {e}", exc_info=True)
            raise RepositoryError(f"Error adding user: {str(e)}", operation="add")

        return self._document_to_record(document)

    async def update_by_id(self, user_id: str, changes: UserChanges) -> Optional[UserRecord]:
        """
        Apply a partial update to the user with this ID

        Args:
            user_id: ID of the user to update
            changes: Fields to overwrite; unset fields are left untouched

        Returns:
            Updated UserRecord, or None if no user has this ID
        """
        if not user_id:
            return None
        return await self._update({UserFields.MONGO_ID: _to_mongo_id(user_id)}, changes, "update_by_id")

    async def update_by_email(self, email: str, changes: UserChanges) -> Optional[UserRecord]:
        """
        Apply a partial update to the user with this email

        Args:
            email: Email of the user to update
            changes: Fields to overwrite; unset fields are left untouched

        Returns:
            Updated UserRecord, or None if no user has this email
        """
        if not email:
            return None
        return await self._update({UserFields.EMAIL: email}, changes, "update_by_email")

    async def _find_one(self, query: dict, operation: str) -> Optional[dict]:
        try:
            return await self.user_collection.find_one(query)
        except PyMongoError as e:
            logger.error(f"Error in {operation}: {e}", exc_info=True)
            raise RepositoryError(f"Error finding user: {str(e)}", operation=operation)

    async def _update(self, query: dict, changes: UserChanges, operation: str) -> Optional[UserRecord]:
        values: Dict[str, Any] = {**changes.to_dict(), UserFields.UPDATED_AT: utc_now()}

        try:
            document = await self.user_collection.find_one_and_update(
                query,
                {"$set": values},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            logger.warning(f"Duplicate key in {operation}: {e}")
            raise DuplicateRecordError("Update conflicts with an existing record", operation=operation)
        except PyMongoError as e:
            logger.error(f"Error in {operation}: {e}", exc_info=True)
            raise RepositoryError(f"Error updating user: {str(e)}", operation=operation)

        if document is None:
            return None
        return self._document_to_record(document)

    def _document_to_record(self, document: dict) -> UserRecord:
        """
        Convert MongoDB document to UserRecord

        Documents written without timestamps get ``created_at`` from the
        ObjectId (or the current time for other ID formats) and
        ``updated_at`` equal to ``created_at``.

        Args:
            document: MongoDB document dictionary

        Returns:
            UserRecord domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise RepositoryError("Invalid document: missing _id field", operation="decode")

        mongo_id = document[UserFields.MONGO_ID]
        created_at = ensure_utc(document.get(UserFields.CREATED_AT))
        if created_at is None:
            created_at = mongo_id.generation_time if isinstance(mongo_id, ObjectId) else utc_now()
        updated_at = ensure_utc(document.get(UserFields.UPDATED_AT)) or created_at

        return UserRecord(
            id=str(mongo_id),
            name=document.get(UserFields.NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            access_token=document.get(UserFields.ACCESS_TOKEN, ""),
            password_hash=document.get(UserFields.PASSWORD_HASH),
            created_at=created_at,
            updated_at=updated_at,
        )
