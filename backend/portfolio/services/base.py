"""
Shared plumbing for persistence services
"""
from contextlib import contextmanager
from typing import Any, Iterator, Optional, Type

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from portfolio.core.exceptions import ConstraintViolation, NotFoundError
from portfolio.core.logging_config import LoggingConfig

logger = LoggingConfig.get_logger(__name__)


class BaseService:
    """Holds the session and turns storage rejections into ConstraintViolation"""

    def __init__(self, db: Session):
        self.db = db

    def _commit(self, table: str) -> None:
        """
        Commit the current transaction

        Raises:
            ConstraintViolation: If the store rejected the write; the
                transaction is rolled back first
        """
        try:
            self.db.commit()
        except IntegrityError as exc:
            self._reject(exc, table)

    def _flush(self, table: str) -> None:
        """Flush pending rows so generated ids are available, same error contract as _commit"""
        try:
            self.db.flush()
        except IntegrityError as exc:
            self._reject(exc, table)

    @contextmanager
    def _transaction(self) -> Iterator[None]:
        """Roll back everything pending if a multi-step write fails for any reason"""
        try:
            yield
        except Exception:
            self.db.rollback()
            raise

    def _reject(self, exc: IntegrityError, table: str) -> None:
        self.db.rollback()
        violation = ConstraintViolation.from_integrity_error(exc, table)
        logger.warning(
            f"Write rejected on {table}: {violation.kind.value}",
            extra={"table": table, "constraint": violation.kind.value},
        )
        raise violation from exc

    def _get_or_raise(self, model: Type[Any], key: Any, entity: Optional[str] = None) -> Any:
        obj = self.db.get(model, key)
        if obj is None:
            raise NotFoundError(entity or model.__name__, key)
        return obj
