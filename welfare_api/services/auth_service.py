"""
Registration and login against the users collection
"""
import logging
from typing import Optional

from pymongo.errors import DuplicateKeyError

from ..database import USERS
from ..exceptions import DuplicateEmailError, InvalidCredentialsError
from ..models.user import UserPublic, UserRecord
from ..utils.security import hash_password_async, verify_password_async
from .mongo_service import MongoService

logger = logging.getLogger(__name__)


class AuthService:
    """Service for user accounts. No session or token is issued."""

    def __init__(self, mongo: MongoService):
        self.mongo = mongo

    async def register(self, email: str, password: str, role: Optional[str] = None) -> UserPublic:
        """
        Create a user with a hashed password

        Raises:
            DuplicateEmailError: the email is already registered
        """
        record = UserRecord(
            email=email,
            password=await hash_password_async(password),
            role=role or "family"
        )
        try:
            doc = await self.mongo.insert_document(USERS, record.model_dump(by_alias=True))
        except DuplicateKeyError:
            raise DuplicateEmailError(email)

        logger.info(f"User registered: {email}")
        return UserPublic(id=str(doc["_id"]), email=doc["email"], role=doc["role"])

    async def login(self, email: str, password: str) -> UserPublic:
        """
        Verify credentials

        Raises:
            InvalidCredentialsError: unknown email or wrong password
        """
        doc = await self.mongo.find_document(USERS, {"email": email})
        if not doc:
            raise InvalidCredentialsError()

        if not await verify_password_async(password, doc.get("password", "")):
            raise InvalidCredentialsError()

        return UserPublic(id=str(doc["_id"]), email=doc["email"], role=doc.get("role", "family"))
