"""
Persistence-layer errors

Hierarchy:
    PortfolioError (base)
    ├── ConstraintViolation   - unique / foreign key / not-null rejection by the store
    └── NotFoundError         - lookup by identity found nothing

Validation failures are not exceptions: validators return a ValidationResult.
"""
from enum import Enum
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError


class ConstraintKind(str, Enum):
    """Which storage rule rejected the write"""
    UNIQUE = "unique"
    FOREIGN_KEY = "foreign_key"
    NOT_NULL = "not_null"
    UNKNOWN = "unknown"


# PostgreSQL SQLSTATE codes for integrity violations
_PG_CODES = {
    "23505": ConstraintKind.UNIQUE,
    "23503": ConstraintKind.FOREIGN_KEY,
    "23502": ConstraintKind.NOT_NULL,
}


class PortfolioError(Exception):
    """Base class for persistence errors"""

    def to_dict(self) -> Dict[str, Any]:
        return {"error": type(self).__name__, "message": str(self)}


class ConstraintViolation(PortfolioError):
    """The store rejected a write because of a uniqueness or referential rule"""

    def __init__(
        self,
        kind: ConstraintKind,
        table: str,
        detail: Optional[str] = None,
    ) -> None:
        self.kind = kind
        self.table = table
        self.detail = detail
        message = f"{kind.value} constraint violated on '{table}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

    @classmethod
    def from_integrity_error(cls, exc: IntegrityError, table: str) -> "ConstraintViolation":
        """Classify a driver IntegrityError (SQLite message text or PostgreSQL SQLSTATE)"""
        orig = exc.orig
        detail = str(orig) if orig is not None else str(exc)

        kind = ConstraintKind.UNKNOWN
        pgcode = getattr(orig, "pgcode", None)
        if pgcode in _PG_CODES:
            kind = _PG_CODES[pgcode]
        else:
            text = detail.upper()
            # SQLite reports a duplicate composite primary key as a UNIQUE failure
            if "UNIQUE" in text or "PRIMARY KEY" in text:
                kind = ConstraintKind.UNIQUE
            elif "FOREIGN KEY" in text:
                kind = ConstraintKind.FOREIGN_KEY
            elif "NOT NULL" in text:
                kind = ConstraintKind.NOT_NULL

        return cls(kind=kind, table=table, detail=detail)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": "ConstraintViolation",
            "kind": self.kind.value,
            "table": self.table,
            "detail": self.detail,
        }


class NotFoundError(PortfolioError):
    """Lookup by identity that does not exist"""

    def __init__(self, entity: str, key: Any) -> None:
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} with id {key} not found")

    def to_dict(self) -> Dict[str, Any]:
        return {"error": "NotFoundError", "entity": self.entity, "key": self.key}
