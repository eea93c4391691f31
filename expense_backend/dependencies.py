# expense_backend/dependencies.py
# Shared FastAPI dependencies: database session and services

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from .auth import AuthManager
from .services import AccountService, CredentialService, ExpenseService

# ===== DATABASE DEPENDENCY =====
def get_db(request: Request):
    """Database session dependency, one session per request."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()

def get_auth_manager(request: Request) -> AuthManager:
    return request.app.state.auth_manager

# ===== SERVICE DEPENDENCIES =====
def get_account_service(db: Session = Depends(get_db)) -> AccountService:
    return AccountService(db)

def get_credential_service(
    db: Session = Depends(get_db),
    auth_manager: AuthManager = Depends(get_auth_manager),
) -> CredentialService:
    return CredentialService(db, auth_manager)

def get_expense_service(db: Session = Depends(get_db)) -> ExpenseService:
    return ExpenseService(db)
