"""
CRUD access to the ``cuentas`` table.

Reads return ``None`` for missing rows. Writes commit immediately; any
database error is rolled back and re-raised as PersistenceError.
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..exceptions import PersistenceError
from ..models.cuenta import Account

logger = logging.getLogger(__name__)

# Columns a caller may overwrite through update()
UPDATABLE_FIELDS = ("username", "email", "first_name", "last_name", "age", "role", "password_hash")


class AccountStore:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, account_id: int) -> Optional[Account]:
        return self.db.get(Account, account_id)

    def get_by_username(self, username: str) -> Optional[Account]:
        return self.db.query(Account).filter(Account.username == username).first()

    def get_by_role(self, role_id: int) -> List[Account]:
        return self.db.query(Account).filter(Account.role == role_id).all()

    def list_all(self) -> List[Account]:
        return self.db.query(Account).all()

    def insert(self, account: Account) -> int:
        """Persist a new account and return its server-assigned id."""
        try:
            self.db.add(account)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise PersistenceError.from_sqlalchemy("Account insert failed", exc)
        self.db.refresh(account)
        return account.id

    def update(self, account_id: int, values: Dict[str, Any]) -> Optional[Account]:
        """
        Merge ``values`` onto the stored row.

        Keys that are absent or None keep their stored value. An empty
        ``password_hash`` never overwrites the existing one.
        """
        account = self.db.get(Account, account_id)
        if account is None:
            return None

        for name in UPDATABLE_FIELDS:
            value = values.get(name)
            if value is None:
                continue
            if name == "password_hash" and value == "":
                continue
            setattr(account, name, value)

        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise PersistenceError.from_sqlalchemy("Account update failed", exc)
        self.db.refresh(account)
        return account

    def set_password_hash(self, account: Account, password_hash: str) -> None:
        try:
            account.password_hash = password_hash
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise PersistenceError.from_sqlalchemy("Password hash update failed", exc)

    def delete(self, account_id: int) -> bool:
        """Remove only the account row. Dependents are not touched."""
        try:
            removed = self.db.query(Account).filter(Account.id == account_id).delete()
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise PersistenceError.from_sqlalchemy("Account delete failed", exc)
        return removed > 0
