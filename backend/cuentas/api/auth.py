"""Authentication endpoints: login and current account."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..models.base import get_db
from ..core.security import create_access_token, get_current_user
from ..schemas.cuenta import AccountResponse, LoginRequest, TokenResponse
from ..services.account_manager import AccountLifecycleManager
from ._results import unwrap

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
def login(req: LoginRequest, db: Session = Depends(get_db)):
    """Check username and password and receive a JWT access token."""
    account = unwrap(AccountLifecycleManager(db).validate_credentials(req.username, req.password))
    access_token = create_access_token({"sub": str(account.id), "role": account.role})
    return TokenResponse(access_token=access_token, account=AccountResponse.model_validate(account))


@router.get("/me", response_model=AccountResponse)
def get_me(current_user=Depends(get_current_user)):
    """Return the currently authenticated account."""
    return current_user
