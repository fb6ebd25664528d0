from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from ..models.base import get_db
from ..core.security import get_current_user, require_admin
from ..core.permissions import can_view_account, is_admin
from ..schemas.cuenta import (
    AccountCreate,
    AccountCreatedResponse,
    AccountResponse,
    AccountUpdate,
)
from ..services.account_manager import AccountLifecycleManager
from ._results import unwrap

router = APIRouter(prefix="/cuentas", tags=["cuentas"])


def get_manager(db: Session = Depends(get_db)) -> AccountLifecycleManager:
    return AccountLifecycleManager(db)


@router.get("/", response_model=List[AccountResponse])
def list_accounts(
    manager: AccountLifecycleManager = Depends(get_manager),
    _admin=Depends(require_admin),
):
    """Admin-only: every account in the system."""
    return manager.list_all()


@router.get("/rol/{role_id}", response_model=List[AccountResponse])
def get_accounts_by_role(role_id: int, manager: AccountLifecycleManager = Depends(get_manager)):
    return manager.get_by_role(role_id)


@router.get("/username/{username}", response_model=AccountResponse)
def get_account_by_username(username: str, manager: AccountLifecycleManager = Depends(get_manager)):
    return unwrap(manager.get_by_username(username))


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: int,
    manager: AccountLifecycleManager = Depends(get_manager),
    current_user=Depends(get_current_user),
):
    """Callers can read their own account; admins can read any."""
    account = unwrap(manager.get_by_id(account_id))
    if not can_view_account(current_user.id, current_user.role, account_id):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed to view this account")
    return account


@router.post("/", response_model=AccountCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_account(req: AccountCreate, manager: AccountLifecycleManager = Depends(get_manager)):
    """Open registration: anyone may create an account."""
    new_id = unwrap(manager.create(req))
    return AccountCreatedResponse(message="Account created", id=new_id)


@router.put("/{account_id}", response_model=AccountResponse)
def update_account(
    account_id: int,
    req: AccountUpdate,
    manager: AccountLifecycleManager = Depends(get_manager),
    current_user=Depends(get_current_user),
):
    """Callers can edit their own account; only admins may change a role."""
    unwrap(manager.get_by_id(account_id))
    if not can_view_account(current_user.id, current_user.role, account_id):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed to modify this account")
    if req.role is not None and req.role != current_user.role and not is_admin(current_user.role):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Administrator role required to change roles")
    return unwrap(manager.update(account_id, req))


@router.delete("/{account_id}")
def delete_account(
    account_id: int,
    manager: AccountLifecycleManager = Depends(get_manager),
    current_user=Depends(get_current_user),
):
    """Delete the account together with its appointments, doctor profile and history."""
    unwrap(manager.get_by_id(account_id))
    if not can_view_account(current_user.id, current_user.role, account_id):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed to delete this account")
    unwrap(manager.delete(account_id))
    return {"message": f"Account {account_id} deleted"}
