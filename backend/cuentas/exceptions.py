import re
from typing import Optional

# Columns of ``cuentas`` that carry a unique index
_UNIQUE_COLUMNS = ("username", "email")

# Where each driver names the violated column or index. Checked in order; the
# duplicated value itself is never searched.
_CONFLICT_COLUMN_PATTERNS = (
    # SQLite: UNIQUE constraint failed: cuentas.username
    re.compile(r"unique constraint failed: cuentas\.(\w+)"),
    # PostgreSQL: ... unique constraint "ix_cuentas_username"
    re.compile(r'constraint "ix_cuentas_(\w+)"'),
    # MySQL: Duplicate entry '...' for key 'cuentas.ix_cuentas_username'
    re.compile(r"for key '(?:\w+\.)?ix_cuentas_(\w+)'"),
    # PostgreSQL DETAIL line: Key (username)=(...) already exists.
    re.compile(r"key \((\w+)\)="),
)


class PersistenceError(Exception):
    """A write against the account tables failed and was rolled back."""

    def __init__(self, message: str, detail: Optional[str] = None, cause: Optional[Exception] = None):
        self.message = message
        self.detail = detail or ""
        self.cause = cause
        super().__init__(message if not detail else f"{message}: {detail}")

    @classmethod
    def from_sqlalchemy(cls, message: str, exc: Exception) -> "PersistenceError":
        # DBAPIError wraps the driver exception in .orig
        orig = getattr(exc, "orig", None)
        return cls(message, detail=str(orig if orig is not None else exc), cause=exc)

    @property
    def is_unique_violation(self) -> bool:
        text = self.detail.lower()
        return "unique constraint" in text or "duplicate key" in text or "duplicate entry" in text

    @property
    def is_foreign_key_violation(self) -> bool:
        text = self.detail.lower()
        return "foreign key" in text or "reference constraint" in text

    def conflict_field(self) -> str:
        """Name the unique column the driver reports as violated, if any."""
        text = self.detail.lower()
        for pattern in _CONFLICT_COLUMN_PATTERNS:
            match = pattern.search(text)
            if match:
                column = match.group(1)
                return column if column in _UNIQUE_COLUMNS else "unique"
        return "unique"
