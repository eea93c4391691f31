# expense_backend/auth.py
# Password hashing and JWT bearer tokens

from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from .exceptions import Unauthorized

ACCESS_TOKEN_TYPE = "access"


class AuthManager:
    """Hashes passwords with bcrypt and signs time-limited access tokens."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        token_expire_seconds: int = 86400,
        bcrypt_rounds: int = 8,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.token_expire_seconds = token_expire_seconds
        self.pwd_context = CryptContext(
            schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=bcrypt_rounds
        )

    @classmethod
    def from_settings(cls, settings) -> "AuthManager":
        return cls(
            secret_key=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            token_expire_seconds=settings.token_expire_seconds,
            bcrypt_rounds=settings.bcrypt_rounds,
        )

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a plaintext password against its hash."""
        return self.pwd_context.verify(plain_password, hashed_password)

    def get_password_hash(self, password: str) -> str:
        """Hash a password for storing."""
        return self.pwd_context.hash(password)

    def create_access_token(self, user_id: int, expires_delta: Optional[timedelta] = None) -> str:
        """Create a JWT access token embedding the user id."""
        now = datetime.now(timezone.utc)
        if expires_delta is None:
            expires_delta = timedelta(seconds=self.token_expire_seconds)

        to_encode = {
            "id": user_id,
            "type": ACCESS_TOKEN_TYPE,
            "iat": now,
            "exp": now + expires_delta,
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> dict:
        """Decode a token, checking signature, expiry and type."""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError as exc:
            raise Unauthorized("Token has expired") from exc
        except JWTError as exc:
            raise Unauthorized("Could not validate credentials") from exc

        if payload.get("type") != ACCESS_TOKEN_TYPE or not isinstance(payload.get("id"), int):
            raise Unauthorized("Invalid token")

        return payload
