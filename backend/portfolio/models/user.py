"""
User model
"""
from sqlalchemy import Column, Integer, Text

from portfolio.core.database import Base
from portfolio.schemas.user import UserCreate


class User(Base):
    """User account; username is globally unique"""
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(Text, nullable=False, unique=True)
    password = Column(Text, nullable=False)

    @classmethod
    def from_create(cls, data: UserCreate) -> "User":
        return cls(username=data.username, password=data.password)

    def __repr__(self):
        return f"<User(id={self.id}, username={self.username})>"
