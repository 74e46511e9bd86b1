"""
SQLAlchemy models
"""
from portfolio.core.database import Base
from portfolio.models.experience import Experience, ExperienceDetail
from portfolio.models.message import Message
from portfolio.models.project import Project, ProjectTag, Tag
from portfolio.models.skill import Skill
from portfolio.models.user import User

__all__ = [
    "Base",
    # Contact
    "Message",
    # Authentication
    "User",
    # Projects
    "Project",
    "Tag",
    "ProjectTag",
    # Skills
    "Skill",
    # Experiences
    "Experience",
    "ExperienceDetail",
]
