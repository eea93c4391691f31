# expense_backend/services/expenses.py
# Expense records scoped to an account

import logging
from datetime import date as date_type
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import models
from ..exceptions import StorageFailure

logger = logging.getLogger(__name__)


class ExpenseService:
    def __init__(self, db: Session):
        self.db = db

    def add_expense(
        self,
        name: Optional[str],
        amount: Optional[Decimal],
        date: Optional[date_type],
        created_by: Optional[int],
        type: Optional[str],
        image_path: Optional[str],
        account_id: Optional[int],
    ) -> int:
        """Insert one expense. Only the database constraints are checked."""
        expense = models.Expense(
            name=name,
            amount=amount,
            date=date,
            created_by=created_by,
            type=type,
            image_path=image_path,
            account_id=account_id,
        )
        try:
            self.db.add(expense)
            self.db.flush()
            expense_id = expense.id
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageFailure("Error inserting expense into database") from exc

        logger.info(f"Expense {expense_id} added to account {account_id}")
        return expense_id

    def list_expenses(self, account_id: int) -> List[models.Expense]:
        """All expenses of an account in insertion order; not paginated."""
        try:
            return (
                self.db.query(models.Expense)
                .filter(models.Expense.account_id == account_id)
                .order_by(models.Expense.id)
                .all()
            )
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageFailure("Error fetching expenses") from exc
