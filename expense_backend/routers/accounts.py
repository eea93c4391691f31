# expense_backend/routers/accounts.py
# Account lookups and per-account expense listing

from typing import List

from fastapi import APIRouter, Depends

from .. import schemas
from ..dependencies import get_account_service, get_expense_service
from ..services import AccountService, ExpenseService

router = APIRouter()

@router.get("/current/{user_id}", response_model=List[schemas.AccountRead])
def get_current_accounts(
    user_id: int,
    accounts: AccountService = Depends(get_account_service),
):
    """Accounts the user administers."""
    return accounts.get_admin_accounts(user_id)

@router.get("/{account_id}/expenses", response_model=List[schemas.ExpenseRead])
def get_account_expenses(
    account_id: int,
    expenses: ExpenseService = Depends(get_expense_service),
):
    """Every expense recorded against the account, oldest first."""
    return expenses.list_expenses(account_id)
