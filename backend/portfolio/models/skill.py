"""
Skill model
"""
from sqlalchemy import Column, Integer, Text, text

from portfolio.core.database import Base
from portfolio.schemas.skill import SkillCreate


class Skill(Base):
    """Skill shown on the portfolio, displayed per category by ``order``"""
    __tablename__ = "skills"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False, unique=True)
    icon = Column(Text, nullable=False)
    category = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    order = Column("order", Integer, default=0, server_default=text("0"))

    @classmethod
    def from_create(cls, data: SkillCreate) -> "Skill":
        return cls(
            name=data.name,
            icon=data.icon,
            category=data.category,
            description=data.description,
            order=data.order if data.order is not None else 0,
        )

    def __repr__(self):
        return f"<Skill(id={self.id}, name={self.name}, category={self.category})>"
