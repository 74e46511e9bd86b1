"""
Message model for contact form submissions
"""
from sqlalchemy import Column, DateTime, Integer, Text, func

from portfolio.core.database import Base
from portfolio.schemas.message import MessageCreate
from portfolio.utils.datetime_utils import utc_now


class Message(Base):
    """Contact-form submission. Created once, never updated."""
    __tablename__ = "messages"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    subject = Column(Text, nullable=True)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utc_now, server_default=func.now())

    @classmethod
    def from_create(cls, data: MessageCreate) -> "Message":
        return cls(
            name=data.name,
            email=data.email,
            subject=data.subject,
            message=data.message,
            created_at=utc_now(),
        )

    def __repr__(self):
        return f"<Message(id={self.id}, email={self.email}, subject={self.subject})>"
