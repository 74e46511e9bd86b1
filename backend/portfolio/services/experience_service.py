"""
Service for work/education experiences and their details
"""
from typing import Iterable, List, Optional, Union

from sqlalchemy import delete, func

from portfolio.core.logging_config import LoggingConfig
from portfolio.models.experience import Experience, ExperienceDetail
from portfolio.schemas.experience import (ExperienceCreate,
                                          ExperienceDetailCreate,
                                          ExperienceDetailRecord,
                                          ExperienceRecord, ExperienceType,
                                          ExperienceWithDetails)
from portfolio.services.base import BaseService

logger = LoggingConfig.get_logger(__name__)


class ExperienceService(BaseService):
    """
    Experiences own their details. Details come back ordered by ``order``
    ascending, ties broken by id.
    """

    def create_experience(self, data: ExperienceCreate, details: Iterable[str] = ()) -> Experience:
        """
        Create an experience with optional bullet points

        Args:
            data: Validated insertable experience
            details: Detail texts; each gets its position as ``order``

        Returns:
            The stored experience

        Raises:
            pydantic.ValidationError: If a detail is not a string; nothing is
                stored in that case
        """
        # experience_id 0 is a placeholder until the parent has an id
        detail_shapes = [
            ExperienceDetailCreate(experience_id=0, detail=text, order=position)
            for position, text in enumerate(details)
        ]

        with self._transaction():
            experience = Experience.from_create(data)
            self.db.add(experience)
            self._flush("experiences")

            for shape in detail_shapes:
                self.db.add(
                    ExperienceDetail.from_create(
                        shape.model_copy(update={"experience_id": experience.id})
                    )
                )
            self._commit("experience_details")
        self.db.refresh(experience)

        logger.info(f"Created {experience.type} experience {experience.id} ({experience.title})")
        return experience

    def add_detail(self, data: ExperienceDetailCreate) -> ExperienceDetail:
        """
        Raises:
            ConstraintViolation: If the parent experience does not exist (kind=foreign_key)
        """
        detail = ExperienceDetail.from_create(data)
        self.db.add(detail)
        self._commit("experience_details")
        self.db.refresh(detail)
        return detail

    def get_experience(self, experience_id: int) -> Optional[Experience]:
        return self.db.get(Experience, experience_id)

    def get_experience_or_raise(self, experience_id: int) -> Experience:
        return self._get_or_raise(Experience, experience_id)

    def list_experiences(self, type: Optional[Union[ExperienceType, str]] = None) -> List[Experience]:
        query = self.db.query(Experience)
        if type is not None:
            query = query.filter(Experience.type == ExperienceType(type).value)
        return query.order_by(func.coalesce(Experience.order, 0), Experience.id).all()

    def get_details(self, experience_id: int) -> List[ExperienceDetail]:
        return (
            self.db.query(ExperienceDetail)
            .filter(ExperienceDetail.experience_id == experience_id)
            .order_by(func.coalesce(ExperienceDetail.order, 0), ExperienceDetail.id)
            .all()
        )

    def get_experience_with_details(self, experience_id: int) -> ExperienceWithDetails:
        """
        Raises:
            NotFoundError: If the experience does not exist
        """
        experience = self.get_experience_or_raise(experience_id)
        record = ExperienceRecord.model_validate(experience)
        return ExperienceWithDetails(
            **record.model_dump(),
            details=[ExperienceDetailRecord.model_validate(d) for d in self.get_details(experience_id)],
        )

    def delete_experience(self, experience_id: int) -> int:
        """
        Delete an experience and its details

        Returns:
            Number of details removed with it
        """
        experience = self.get_experience_or_raise(experience_id)
        result = self.db.execute(
            delete(ExperienceDetail).where(ExperienceDetail.experience_id == experience_id)
        )
        self.db.delete(experience)
        self._commit("experiences")

        logger.info(f"Deleted experience {experience_id} with {result.rowcount} details")
        return result.rowcount
