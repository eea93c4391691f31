# expense_backend/tests/test_credentials.py
# Registration, login and token checks at the service level

from datetime import timedelta

import pytest
from jose import jwt
from sqlalchemy.exc import SQLAlchemyError

from expense_backend import models
from expense_backend.auth import AuthManager
from expense_backend.exceptions import Conflict, NotFound, StorageFailure, Unauthorized
from expense_backend.services import AccountService, CredentialService


@pytest.fixture()
def credentials(db_session, auth_manager):
    return CredentialService(db_session, auth_manager)


def test_register_creates_account_and_admin_membership(credentials, db_session):
    user_id = credentials.register("a@x.com", "pw", "A")

    accounts = db_session.query(models.Account).all()
    memberships = db_session.query(models.UserAccount).all()
    assert len(accounts) == 1
    assert accounts[0].admin_id == user_id
    assert len(memberships) == 1
    assert memberships[0].user_id == user_id
    assert memberships[0].account_id == accounts[0].id
    assert memberships[0].role == "admin"


def test_register_stores_hash_not_plaintext(credentials, db_session, auth_manager):
    user_id = credentials.register("a@x.com", "pw", "A")

    user = db_session.get(models.User, user_id)
    assert user.password != "pw"
    assert user.password.startswith("$2b$")
    assert auth_manager.verify_password("pw", user.password)


def test_register_duplicate_email_conflicts(credentials, db_session):
    credentials.register("a@x.com", "pw", "A")

    with pytest.raises(Conflict):
        credentials.register("a@x.com", "pw2", "B")

    assert db_session.query(models.User).filter(models.User.email == "a@x.com").count() == 1
    assert db_session.query(models.Account).count() == 1


class FailingMembershipAccounts(AccountService):
    def create_personal_account(self, user_id):
        self.db.add(models.Account(admin_id=user_id))
        self.db.flush()
        raise SQLAlchemyError("membership insert failed")


def test_register_rolls_back_when_account_setup_fails(db_session, auth_manager):
    credentials = CredentialService(
        db_session, auth_manager, accounts=FailingMembershipAccounts(db_session)
    )

    with pytest.raises(StorageFailure):
        credentials.register("a@x.com", "pw", "A")

    assert db_session.query(models.User).count() == 0
    assert db_session.query(models.Account).count() == 0
    assert db_session.query(models.UserAccount).count() == 0


class RacingCredentials(CredentialService):
    """Never sees an existing user, as when two signups for one email interleave."""

    def _find_by_email(self, email):
        return None


def test_register_race_is_caught_by_unique_constraint(db_session, auth_manager):
    CredentialService(db_session, auth_manager).register("a@x.com", "pw", "A")

    with pytest.raises(StorageFailure):
        RacingCredentials(db_session, auth_manager).register("a@x.com", "pw2", "B")

    assert db_session.query(models.User).count() == 1
    assert db_session.query(models.Account).count() == 1
    assert db_session.query(models.UserAccount).count() == 1


def test_authenticate_returns_token_for_user(credentials):
    user_id = credentials.register("a@x.com", "pw", "A")

    token = credentials.authenticate("a@x.com", "pw")
    assert credentials.verify_token(token) == user_id


def test_token_expires_after_a_day(credentials):
    credentials.register("a@x.com", "pw", "A")

    claims = jwt.get_unverified_claims(credentials.authenticate("a@x.com", "pw"))
    assert claims["exp"] - claims["iat"] == 86400


def test_authenticate_wrong_password(credentials):
    credentials.register("a@x.com", "pw", "A")

    with pytest.raises(Unauthorized):
        credentials.authenticate("a@x.com", "wrong")


def test_authenticate_unknown_email(credentials):
    with pytest.raises(NotFound):
        credentials.authenticate("nobody@x.com", "pw")


def test_verify_token_rejects_expired(credentials, auth_manager):
    token = auth_manager.create_access_token(1, expires_delta=timedelta(seconds=-10))

    with pytest.raises(Unauthorized, match="expired"):
        credentials.verify_token(token)


def test_verify_token_rejects_foreign_signature(credentials):
    token = AuthManager("some-other-secret").create_access_token(1)

    with pytest.raises(Unauthorized):
        credentials.verify_token(token)


def test_verify_token_rejects_garbage(credentials):
    with pytest.raises(Unauthorized):
        credentials.verify_token("not-a-token")


def test_get_user_name(credentials):
    user_id = credentials.register("a@x.com", "pw", "A")

    assert credentials.get_user_name(user_id) == "A"
    with pytest.raises(NotFound):
        credentials.get_user_name(user_id + 100)
