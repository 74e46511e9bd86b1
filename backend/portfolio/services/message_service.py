"""
Service for contact-form messages
"""
from typing import List, Optional

from portfolio.core.logging_config import LoggingConfig
from portfolio.models.message import Message
from portfolio.schemas.message import MessageCreate
from portfolio.services.base import BaseService

logger = LoggingConfig.get_logger(__name__)


class MessageService(BaseService):
    """Stores contact-form submissions"""

    def create_message(self, data: MessageCreate) -> Message:
        message = Message.from_create(data)
        self.db.add(message)
        self._commit("messages")
        self.db.refresh(message)

        logger.info(f"Stored message {message.id}")
        return message

    def get_message(self, message_id: int) -> Optional[Message]:
        return self.db.get(Message, message_id)

    def get_message_or_raise(self, message_id: int) -> Message:
        return self._get_or_raise(Message, message_id)

    def list_messages(self, limit: Optional[int] = None) -> List[Message]:
        """Newest first"""
        query = self.db.query(Message).order_by(Message.created_at.desc(), Message.id.desc())
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def delete_message(self, message_id: int) -> None:
        """Administrative delete"""
        message = self.get_message_or_raise(message_id)
        self.db.delete(message)
        self._commit("messages")
        logger.info(f"Deleted message {message_id}")
