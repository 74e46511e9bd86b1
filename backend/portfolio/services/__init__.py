"""
Persistence services over the portfolio schema
"""
from portfolio.services.experience_service import ExperienceService
from portfolio.services.message_service import MessageService
from portfolio.services.project_service import ProjectService
from portfolio.services.skill_service import SkillService
from portfolio.services.tag_service import TagService
from portfolio.services.user_service import UserService

__all__ = [
    "ExperienceService",
    "MessageService",
    "ProjectService",
    "SkillService",
    "TagService",
    "UserService",
]
