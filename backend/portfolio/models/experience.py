"""
Experience and ExperienceDetail models

An experience (a job or a degree) owns an ordered list of bullet-point
details. The table carries no ON DELETE CASCADE; ExperienceService deletes
the details before their parent.
"""
from sqlalchemy import Column, ForeignKey, Integer, Text, text
from sqlalchemy.orm import relationship

from portfolio.core.database import Base
from portfolio.schemas.experience import (ExperienceCreate,
                                          ExperienceDetailCreate)


class ExperienceDetail(Base):
    """Single bullet point of an experience"""
    __tablename__ = "experience_details"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    experience_id = Column(Integer, ForeignKey("experiences.id"), nullable=False, index=True)
    detail = Column(Text, nullable=False)
    order = Column("order", Integer, default=0, server_default=text("0"))

    @classmethod
    def from_create(cls, data: ExperienceDetailCreate) -> "ExperienceDetail":
        return cls(
            experience_id=data.experience_id,
            detail=data.detail,
            order=data.order if data.order is not None else 0,
        )

    def __repr__(self):
        return f"<ExperienceDetail(id={self.id}, experience_id={self.experience_id}, order={self.order})>"


class Experience(Base):
    """Work or education entry"""
    __tablename__ = "experiences"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    subtitle = Column(Text, nullable=False)
    date = Column(Text, nullable=True)
    type = Column(Text, nullable=False)  # ExperienceType value
    order = Column("order", Integer, default=0, server_default=text("0"))

    # Relationships
    details = relationship(
        ExperienceDetail,
        viewonly=True,
        lazy="raise",
        order_by=[ExperienceDetail.order, ExperienceDetail.id],
    )

    @classmethod
    def from_create(cls, data: ExperienceCreate) -> "Experience":
        return cls(
            title=data.title,
            subtitle=data.subtitle,
            date=data.date,
            type=data.type.value,
            order=data.order if data.order is not None else 0,
        )

    def __repr__(self):
        return f"<Experience(id={self.id}, title={self.title}, type={self.type})>"
