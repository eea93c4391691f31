# expense_backend/routers/expenses.py
# Expense creation

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from .. import schemas
from ..dependencies import get_expense_service
from ..services import ExpenseService

router = APIRouter()

@router.post("/add-expense", response_class=PlainTextResponse)
def add_expense(
    expense: schemas.ExpenseCreate,
    expenses: ExpenseService = Depends(get_expense_service),
):
    expenses.add_expense(**expense.model_dump())
    return "Expense added successfully"
