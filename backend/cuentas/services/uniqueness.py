"""Existence checks for the unique account columns."""
from typing import Optional
from sqlalchemy.orm import Session

from ..models.cuenta import Account


class UniquenessGuard:
    """
    Read-only lookups run before insert/update.

    Comparisons are case-sensitive. These checks narrow the race window but
    the table's unique constraints stay the final authority.
    """

    def __init__(self, db: Session):
        self.db = db

    def username_exists(self, username: str, exclude_id: Optional[int] = None) -> bool:
        return self._exists(Account.username == username, exclude_id)

    def email_exists(self, email: str, exclude_id: Optional[int] = None) -> bool:
        return self._exists(Account.email == email, exclude_id)

    def _exists(self, criterion, exclude_id: Optional[int]) -> bool:
        q = self.db.query(Account.id).filter(criterion)
        if exclude_id is not None:
            q = q.filter(Account.id != exclude_id)
        return self.db.query(q.exists()).scalar()
