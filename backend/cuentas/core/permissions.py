"""
Role checks used by the HTTP layer before it calls the account manager.
The manager itself never looks at the caller.
"""
from .config import settings
from ..models.cuenta import Role

ROLE_NAMES: dict = {
    Role.ADMIN: "admin",
    Role.DOCTOR: "doctor",
    Role.PATIENT: "patient",
}


def is_admin(role: int) -> bool:
    return role == settings.ADMIN_ROLE_ID


def can_view_account(caller_id: int, caller_role: int, account_id: int) -> bool:
    """Callers may read their own account; administrators may read any."""
    return caller_id == account_id or is_admin(caller_role)


def role_name(role: int) -> str:
    return ROLE_NAMES.get(role, f"role-{role}")
