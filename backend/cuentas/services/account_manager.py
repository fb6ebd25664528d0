"""
Account lifecycle: create, read, update, delete and credential checks.

Every public method returns a tagged result from ``results``. Authorization
is the caller's job; this class never looks at who is asking.
"""
import logging
from typing import List, Optional

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.orm import Session

from ..core.permissions import role_name
from ..core.security import PasswordHasher, password_hasher
from ..exceptions import PersistenceError
from ..models.cuenta import Account
from ..schemas.cuenta import AccountCreate, AccountUpdate
from .account_store import AccountStore
from .cascade_deletion import CascadeDeletionCoordinator
from .results import (
    ConflictError,
    Failure,
    InvalidCredentials,
    NotFound,
    Result,
    Success,
    ValidationError,
)
from .uniqueness import UniquenessGuard

logger = logging.getLogger(__name__)

MIN_USERNAME_LENGTH = 4
MIN_PASSWORD_LENGTH = 6

CONFLICT_MESSAGES = {
    "username": "Username is already in use",
    "email": "Email address is already registered",
    "unique": "An account with these details already exists",
}


def is_valid_email(value: Optional[str]) -> bool:
    if not value:
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _conflict_from(exc: PersistenceError) -> ConflictError:
    field = exc.conflict_field()
    return ConflictError(field=field, message=CONFLICT_MESSAGES[field])


class AccountLifecycleManager:
    def __init__(self, db: Session, hasher: Optional[PasswordHasher] = None):
        self.store = AccountStore(db)
        self.guard = UniquenessGuard(db)
        self.cascade = CascadeDeletionCoordinator(db)
        self.hasher = hasher or password_hasher

    # ── reads ────────────────────────────────────────────────────────────────

    def list_all(self) -> List[Account]:
        return self.store.list_all()

    def get_by_id(self, account_id: int) -> Result:
        account = self.store.get_by_id(account_id)
        if account is None:
            return NotFound(f"Account with id {account_id} not found")
        return Success(account)

    def get_by_username(self, username: str) -> Result:
        account = self.store.get_by_username(username)
        if account is None:
            return NotFound(f"Account '{username}' not found")
        return Success(account)

    def get_by_role(self, role_id: int) -> List[Account]:
        return self.store.get_by_role(role_id)

    # ── create ───────────────────────────────────────────────────────────────

    def create(self, candidate: AccountCreate) -> Result:
        """Validate, hash and insert. Stops at the first failed check."""
        error = self._first_create_error(candidate)
        if error is not None:
            return error

        account = Account(
            username=candidate.username,
            password_hash=self.hasher.hash(candidate.password),
            email=candidate.email,
            first_name=candidate.first_name,
            last_name=candidate.last_name,
            age=candidate.age,
            role=candidate.role,
        )
        try:
            new_id = self.store.insert(account)
        except PersistenceError as exc:
            if exc.is_unique_violation:
                # Lost a race against a concurrent create
                logger.info("Create of '%s' hit a unique constraint: %s", candidate.username, exc.detail)
                return _conflict_from(exc)
            logger.error("Account create failed for '%s': %s", candidate.username, exc)
            return Failure("Account could not be created", cause=exc)

        if not new_id:
            return Failure("Account could not be created")
        logger.info("Created account %s (%s)", new_id, role_name(candidate.role))
        return Success(new_id)

    def _first_create_error(self, candidate: AccountCreate) -> Optional[Result]:
        if not candidate.username or len(candidate.username) < MIN_USERNAME_LENGTH:
            return ValidationError([f"Username must be at least {MIN_USERNAME_LENGTH} characters"])
        if not candidate.password or len(candidate.password) < MIN_PASSWORD_LENGTH:
            return ValidationError([f"Password must be at least {MIN_PASSWORD_LENGTH} characters"])
        if not is_valid_email(candidate.email):
            return ValidationError(["Email address is not valid"])
        if self.guard.username_exists(candidate.username):
            return ConflictError(field="username", message=CONFLICT_MESSAGES["username"])
        if self.guard.email_exists(candidate.email):
            return ConflictError(field="email", message=CONFLICT_MESSAGES["email"])
        return None

    # ── update ───────────────────────────────────────────────────────────────

    def update(self, account_id: int, candidate: AccountUpdate) -> Result:
        """
        Merge ``candidate`` onto the stored account.

        All field problems are reported together. Uniqueness is left to the
        table constraints; a violation is mapped back to the offending field.
        """
        if account_id != candidate.id:
            return ValidationError(["Path id does not match account id"])

        existing = self.store.get_by_id(account_id)
        if existing is None:
            return NotFound(f"Account with id {account_id} not found")

        errors = self._update_errors(candidate)
        if errors:
            return ValidationError(errors)

        values = {
            "username": candidate.username or None,
            "email": candidate.email or None,
            "first_name": candidate.first_name,
            "last_name": candidate.last_name,
            "age": candidate.age,
            "role": candidate.role,
        }
        if candidate.password:
            values["password_hash"] = self.hasher.hash(candidate.password)
        else:
            values["password_hash"] = existing.password_hash

        try:
            updated = self.store.update(account_id, values)
        except PersistenceError as exc:
            if exc.is_unique_violation:
                logger.info("Update of account %s hit a unique constraint: %s", account_id, exc.detail)
                return _conflict_from(exc)
            logger.error("Account update failed for %s: %s", account_id, exc)
            return Failure("Account could not be updated", cause=exc)

        if updated is None:
            return NotFound(f"Account with id {account_id} not found")
        return Success(updated)

    @staticmethod
    def _update_errors(candidate: AccountUpdate) -> List[str]:
        errors = []
        if candidate.email and not is_valid_email(candidate.email):
            errors.append("Email address is not valid")
        if not candidate.first_name or not candidate.first_name.strip():
            errors.append("First name is required")
        if not candidate.last_name or not candidate.last_name.strip():
            errors.append("Last name is required")
        if candidate.age is None or candidate.age <= 0:
            errors.append("Age must be greater than zero")
        return errors

    # ── delete ───────────────────────────────────────────────────────────────

    def delete(self, account_id: int) -> Result:
        if self.store.get_by_id(account_id) is None:
            return NotFound(f"Account with id {account_id} not found")

        outcome = self.cascade.delete_account_cascade(account_id)
        if not isinstance(outcome, Failure):
            return outcome

        cause = outcome.cause
        if isinstance(cause, PersistenceError) and cause.is_foreign_key_violation:
            return ConflictError(
                field="dependents",
                message="Account cannot be deleted because related records "
                        "(appointments, medical history) still reference it",
            )
        return Failure("Internal error while deleting the account", cause=cause)

    # ── credentials ──────────────────────────────────────────────────────────

    def validate_credentials(self, username: str, password: str) -> Result:
        """
        Return the matching account, or InvalidCredentials.

        Unknown usernames and wrong passwords produce the same result.
        """
        account = self.store.get_by_username(username)
        if account is None or not self.hasher.verify(password, account.password_hash):
            return InvalidCredentials()

        if self.hasher.needs_rehash(account.password_hash):
            try:
                self.store.set_password_hash(account, self.hasher.hash(password))
                logger.info("Upgraded password hash for account %s", account.id)
            except PersistenceError as exc:
                # The login itself is valid; the upgrade is retried next time
                logger.warning("Password hash upgrade failed for account %s: %s", account.id, exc)
        return Success(account)
