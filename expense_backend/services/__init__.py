# expense_backend/services/__init__.py
# Service layer: each service works on a SQLAlchemy session passed in by the caller

from .accounts import AccountService
from .credentials import CredentialService
from .expenses import ExpenseService

__all__ = ["AccountService", "CredentialService", "ExpenseService"]
