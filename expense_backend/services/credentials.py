# expense_backend/services/credentials.py
# User registration, login and token checks

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import models
from ..auth import AuthManager
from ..exceptions import Conflict, NotFound, StorageFailure, Unauthorized
from .accounts import AccountService

logger = logging.getLogger(__name__)


class CredentialService:
    """Registers users and exchanges email/password for access tokens."""

    def __init__(self, db: Session, auth_manager: AuthManager, accounts: Optional[AccountService] = None):
        self.db = db
        self.auth = auth_manager
        self.accounts = accounts or AccountService(db)

    def _find_by_email(self, email: str):
        return self.db.query(models.User).filter(models.User.email == email).first()

    def register(self, email: str, password: str, name: str) -> int:
        """Create the user, their personal account and admin membership in one transaction.

        The email check and the insert are not serialised: two concurrent
        signups for one email both pass the check, and the loser hits the
        unique constraint, which surfaces as StorageFailure rather than
        Conflict.
        """
        try:
            if self._find_by_email(email) is not None:
                logger.warning(f"Signup rejected, email already registered: {email}")
                raise Conflict("User already exists")

            user = models.User(
                email=email,
                password=self.auth.get_password_hash(password),
                name=name,
            )
            self.db.add(user)
            self.db.flush()
            user_id = user.id

            self.accounts.create_personal_account(user_id)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageFailure("Server error") from exc

        logger.info(f"Registered user {user_id}")
        return user_id

    def authenticate(self, email: str, password: str) -> str:
        """Return a signed access token for valid credentials."""
        try:
            user = self._find_by_email(email)
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageFailure("Server error") from exc

        if user is None:
            raise NotFound("User not found")

        if not self.auth.verify_password(password, user.password):
            logger.warning(f"Invalid password for user {user.id}")
            raise Unauthorized("Invalid password")

        return self.auth.create_access_token(user.id)

    def verify_token(self, token: str) -> int:
        """Return the user id a valid token was issued for."""
        payload = self.auth.verify_token(token)
        return payload["id"]

    def get_user_name(self, user_id: int) -> str:
        try:
            user = self.db.get(models.User, user_id)
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageFailure("Server error") from exc

        if user is None:
            raise NotFound("User not found")
        return user.name
