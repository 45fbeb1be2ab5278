"""
User service.

Business logic for user management, the owner bootstrap and authentication.
"""

import logging
from typing import Optional

from pymongo.database import Database

from app.core.config import settings
from app.core.errors import AuthenticationError, ConfigurationError, ConflictError, NotFoundError, ValidationError
from app.core.security import create_access_token, get_password_hash, verify_password
from app.db.repositories.user import OwnerRepository, UserRepository
from app.models.user import Role, public_user
from app.schemas.user import LoginRequest, Token, UserCreate, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    """Service for user-related business logic."""

    def __init__(self, db: Database):
        """
        Initialize service with the database handle.

        Args:
            db: pymongo database
        """
        self.repository = UserRepository(db)
        self.owners = OwnerRepository(db)

    def register(self, user_data: UserCreate) -> dict:
        """
        Provision a new user.

        Args:
            user_data: User registration data

        Returns:
            Created user, without credentials

        Raises:
            ConflictError: If the username is already taken
        """
        if self.repository.exists_by_username(user_data.username):
            raise ConflictError("Username already exists")

        doc = user_data.to_document()
        doc["hashed_password"] = get_password_hash(doc.pop("password"))
        doc.setdefault("name", user_data.username)
        user = self.repository.insert(doc)
        logger.info("Created %s user %s in academy %s", user["role"], user["username"], user["academyId"])
        return public_user(user)

    def init_owner(self) -> tuple[dict, bool]:
        """Create the owner account from settings if it does not exist yet.

        Returns:
            Tuple of (owner, created)
        """
        if not settings.OWNER_USERNAME or not settings.OWNER_PASSWORD:
            raise ConfigurationError("OWNER_USERNAME and OWNER_PASSWORD must be configured")

        existing = self.owners.get_by_username(settings.OWNER_USERNAME)
        if existing:
            return public_user(existing), False

        owner = self.owners.insert({
            "username": settings.OWNER_USERNAME,
            "hashed_password": get_password_hash(settings.OWNER_PASSWORD),
            "email": settings.OWNER_EMAIL,
            "name": "Owner",
            "role": Role.OWNER.value,
        })
        logger.info("Owner account %s initialized", owner["username"])
        return public_user(owner), True

    def authenticate(self, login_data: LoginRequest) -> tuple[Token, dict]:
        """
        Authenticate a user or the owner and return an access token.

        Raises:
            AuthenticationError: If credentials are invalid
        """
        account = self.owners.get_by_username(login_data.username) or \
            self.repository.get_by_username(login_data.username)

        if not account or not verify_password(login_data.password, account.get("hashed_password", "")):
            raise AuthenticationError("Invalid credentials")

        claims = {"role": account.get("role"), "academyId": account.get("academyId")}
        token = create_access_token(account["username"], claims)
        return Token(access_token=token), public_user(account)

    def get_user_by_username(self, username: str) -> Optional[dict]:
        account = self.owners.get_by_username(username) or self.repository.get_by_username(username)
        return public_user(account) if account else None

    def get_user(self, user_id: str) -> dict:
        user = self.repository.find_by_id(user_id)
        if not user or user.get("isDeleted"):
            raise NotFoundError("User not found")
        return public_user(user)

    def list_users(self, academy_id: str, role: Optional[Role] = None) -> list[dict]:
        users = self.repository.get_by_academy(academy_id, role.value if role else None)
        return [public_user(u) for u in users]

    def update_user(self, user_id: str, data: UserUpdate) -> dict:
        changes = data.changes()
        if not changes:
            raise ValidationError("No changes provided")
        if "password" in changes:
            changes["hashed_password"] = get_password_hash(changes.pop("password"))
        user = self.repository.update_fields(user_id, changes)
        if not user:
            raise NotFoundError("User not found")
        return public_user(user)

    def delete_user(self, user_id: str) -> None:
        # users are only ever soft-deleted
        if not self.repository.soft_delete(user_id):
            raise NotFoundError("User not found")
