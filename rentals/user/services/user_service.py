"""
User service for account lifecycle management.

Handles registration, credential checks, profile reads and profile edits.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from common.auth import PasswordGuard
from common.utils.exceptions import (
    ConflictException,
    InvalidCredentialsException,
    NotFoundException,
    UnauthorizedException,
)
from rentals.database import USERS, PLACES, RESERVATIONS, REVIEWS, to_object_id

logger = logging.getLogger(__name__)

EMAIL_TAKEN_MESSAGE = "An account with that email already exists."
INVALID_LOGIN_MESSAGE = "Invalid email or password."
USER_NOT_FOUND_MESSAGE = "User not found."
INVALID_USER_ID_MESSAGE = "Please provide a valid user ID."

# Never leaves the service
PRIVATE_FIELDS = {"password": 0}
PUBLIC_PROFILE_FIELDS = {"name": 1, "avatar": 1}


class UserService:
    """
    Manages user accounts and profile data.
    """

    def __init__(self, db: AsyncIOMotorDatabase, password_guard: PasswordGuard):
        """
        Initialize UserService.

        Args:
            db: MongoDB database connection
            password_guard: For hashing and checking passwords
        """
        self._password_guard = password_guard
        self._users_collection = db[USERS]
        self._places_collection = db[PLACES]
        self._reservations_collection = db[RESERVATIONS]
        self._reviews_collection = db[REVIEWS]

    @staticmethod
    def _normalize_email(email: str) -> str:
        return email.strip().lower()

    async def create_user(self, name: str, email: str, password: str) -> dict:
        """
        Register a new user.

        Args:
            name: Display name
            email: Email address, unique across accounts
            password: Plaintext password, stored hashed

        Returns:
            Created user document (without password)

        Raises:
            ConflictException: Email already registered
        """
        email = self._normalize_email(email)

        existing = await self._users_collection.find_one({"email": email}, {"_id": 1})
        if existing:
            raise ConflictException(message=EMAIL_TAKEN_MESSAGE, code="EMAIL_TAKEN")

        now = datetime.now(timezone.utc)
        user_doc = {
            "name": name,
            "email": email,
            "password": await self._password_guard.hash_async(password),
            "bio": None,
            "avatar": None,
            "places": [],
            "reservations": [],
            "reviews": [],
            "createdAt": now,
            "updatedAt": now,
        }

        try:
            result = await self._users_collection.insert_one(user_doc)
        except DuplicateKeyError:
            # Lost a race with a concurrent registration for the same email
            raise ConflictException(message=EMAIL_TAKEN_MESSAGE, code="EMAIL_TAKEN")

        created = {k: v for k, v in user_doc.items() if k != "password"}
        created["_id"] = result.inserted_id

        logger.info(f"User created: {result.inserted_id}")
        return created

    async def authenticate(self, email: str, password: str) -> dict:
        """
        Check login credentials.

        Returns:
            The matching user document (without password)

        Raises:
            InvalidCredentialsException: Unknown email or wrong password
        """
        user = await self._users_collection.find_one({"email": self._normalize_email(email)})
        if not user:
            raise InvalidCredentialsException(message=INVALID_LOGIN_MESSAGE)

        if not await self._password_guard.verify_async(password, user.get("password")):
            raise InvalidCredentialsException(message=INVALID_LOGIN_MESSAGE)

        user.pop("password", None)
        return user

    async def get_user_by_id(self, user_id: str, include_password: bool = False) -> Optional[dict]:
        """
        Load user by MongoDB ID.

        Args:
            user_id: MongoDB ObjectId as string
            include_password: Keep the password hash in the result

        Returns:
            User document or None if not found
        """
        oid = to_object_id(user_id, field="id", message=INVALID_USER_ID_MESSAGE)
        projection = None if include_password else PRIVATE_FIELDS
        return await self._users_collection.find_one({"_id": oid}, projection)

    async def get_me(self, user_id: str) -> dict:
        """
        Load the authenticated user's account with everything they own.

        The place, reservation and review lists are read from their own
        collections rather than from the references cached on the user.

        Raises:
            NotFoundException: User no longer exists
        """
        user = await self.get_user_by_id(user_id)
        if not user:
            raise NotFoundException(message=USER_NOT_FOUND_MESSAGE, code="USER_NOT_FOUND")

        oid = user["_id"]
        user["places"] = await self._places_collection.find({"ownerId": oid}).to_list(length=None)
        user["reservations"] = await self._reservations_collection.find({"userId": oid}).to_list(length=None)
        user["reviews"] = await self._reviews_collection.find({"userId": oid}).to_list(length=None)
        return user

    async def get_public_profile(self, user_id: str) -> dict:
        """
        Load the public view of a user: name, avatar and listings.

        Raises:
            ValidationException: Malformed user ID
            NotFoundException: User does not exist
        """
        oid = to_object_id(user_id, field="id", message=INVALID_USER_ID_MESSAGE)
        user = await self._users_collection.find_one({"_id": oid}, PUBLIC_PROFILE_FIELDS)
        if not user:
            raise NotFoundException(message=USER_NOT_FOUND_MESSAGE, code="USER_NOT_FOUND")

        user["places"] = await self._places_collection.find({"ownerId": oid}).to_list(length=None)
        return user

    async def update_profile(self, user_id: str, changes: dict) -> dict:
        """
        Apply a partial profile update.

        Changing the password needs the old password; changing the email
        needs the current password.

        Args:
            user_id: MongoDB user ID
            changes: Validated fields (name, bio, avatar, email, newPassword,
                oldPassword, password)

        Returns:
            Updated user document (without password)

        Raises:
            UnauthorizedException: Re-authentication password missing
            InvalidCredentialsException: Re-authentication password wrong
            ConflictException: New email already used by another account
            NotFoundException: User no longer exists
        """
        changes = dict(changes)
        user = await self.get_user_by_id(user_id, include_password=True)
        if not user:
            raise NotFoundException(message=USER_NOT_FOUND_MESSAGE, code="USER_NOT_FOUND")

        new_password = changes.pop("newPassword", None)
        old_password = changes.pop("oldPassword", None)
        current_password = changes.pop("password", None)

        updates = {k: v for k, v in changes.items() if k in ("name", "bio", "avatar")}

        if new_password:
            if not old_password:
                raise UnauthorizedException(message="Please enter your old password.")
            if not await self._password_guard.verify_async(old_password, user["password"]):
                raise InvalidCredentialsException()
            updates["password"] = await self._password_guard.hash_async(new_password)

        new_email = changes.get("email")
        if new_email:
            if not current_password:
                raise UnauthorizedException(message="Please enter your password.")
            if not await self._password_guard.verify_async(current_password, user["password"]):
                raise InvalidCredentialsException()

            new_email = self._normalize_email(new_email)
            taken = await self._users_collection.find_one(
                {"email": new_email, "_id": {"$ne": user["_id"]}},
                {"_id": 1},
            )
            if taken:
                raise ConflictException(message=EMAIL_TAKEN_MESSAGE, code="EMAIL_TAKEN")
            updates["email"] = new_email

        updates["updatedAt"] = datetime.now(timezone.utc)

        try:
            updated = await self._users_collection.find_one_and_update(
                {"_id": user["_id"]},
                {"$set": updates},
                projection=PRIVATE_FIELDS,
                return_document=True,
            )
        except DuplicateKeyError:
            raise ConflictException(message=EMAIL_TAKEN_MESSAGE, code="EMAIL_TAKEN")

        if not updated:
            raise NotFoundException(message=USER_NOT_FOUND_MESSAGE, code="USER_NOT_FOUND")

        logger.info(f"User {user_id} updated fields: {sorted(k for k in updates if k != 'password')}")
        return updated

    async def add_reference(self, user_id: ObjectId, field: str, ref_id: ObjectId) -> None:
        """Append an id to one of the user's cached reference lists."""
        await self._users_collection.update_one(
            {"_id": user_id},
            {"$push": {field: ref_id}},
        )
