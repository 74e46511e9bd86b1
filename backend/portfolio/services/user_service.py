"""
Service for user accounts
"""
from typing import Optional

from portfolio.core.logging_config import LoggingConfig
from portfolio.models.user import User
from portfolio.schemas.user import UserCreate
from portfolio.services.base import BaseService

logger = LoggingConfig.get_logger(__name__)


class UserService(BaseService):
    """Stores user accounts. Passwords arrive already hashed."""

    def create_user(self, data: UserCreate) -> User:
        """
        Create a user

        Raises:
            ConstraintViolation: If the username is taken (kind=unique)
        """
        user = User.from_create(data)
        self.db.add(user)
        self._commit("users")
        self.db.refresh(user)

        logger.info(f"Created user {user.id} ({user.username})")
        return user

    def get_user(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_user_or_raise(self, user_id: int) -> User:
        return self._get_or_raise(User, user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()
