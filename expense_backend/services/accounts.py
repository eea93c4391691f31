# expense_backend/services/accounts.py
# Personal accounts and admin membership

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import models
from ..exceptions import StorageFailure

logger = logging.getLogger(__name__)


class AccountService:
    def __init__(self, db: Session):
        self.db = db

    def create_personal_account(self, user_id: int) -> int:
        """Create an account administered by ``user_id`` and record the admin membership.

        Runs inside the caller's transaction: rows are flushed, not committed,
        so a failure here is rolled back together with the user insert.
        """
        account = models.Account(admin_id=user_id)
        self.db.add(account)
        self.db.flush()

        membership = models.UserAccount(
            user_id=user_id,
            account_id=account.id,
            role=models.ADMIN_ROLE,
        )
        self.db.add(membership)
        self.db.flush()

        logger.info(f"Personal account {account.id} created for user {user_id}")
        return account.id

    def get_admin_accounts(self, user_id: int) -> List[models.Account]:
        """Accounts in which the user holds the admin role."""
        try:
            return (
                self.db.query(models.Account)
                .join(models.UserAccount, models.UserAccount.account_id == models.Account.id)
                .filter(
                    models.UserAccount.user_id == user_id,
                    models.UserAccount.role == models.ADMIN_ROLE,
                )
                .order_by(models.Account.id)
                .all()
            )
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageFailure("Error fetching account details") from exc
