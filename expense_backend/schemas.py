# expense_backend/schemas.py
# Data validation schemas (Pydantic) for request bodies and responses

import datetime as dt
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ORMModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

# --- Users & Credentials ---
class SignupRequest(BaseModel):
    """Body of POST /signup."""
    email: str
    password: str
    name: str

class LoginRequest(BaseModel):
    """Body of POST /login."""
    email: str
    password: str

class TokenResponse(BaseModel):
    auth: bool = True
    token: str

class UserName(BaseModel):
    name: str

# --- Accounts ---
class AccountRead(ORMModel):
    id: int
    admin_id: int

# --- Expenses ---
class ExpenseCreate(BaseModel):
    """Body of POST /add-expense.

    Every field is optional here; missing required values are rejected by the
    database NOT NULL constraints, not by the schema.
    """
    name: Optional[str] = None
    amount: Optional[Decimal] = None
    date: Optional[dt.date] = None
    created_by: Optional[int] = None
    type: Optional[str] = None
    image_path: Optional[str] = None
    account_id: Optional[int] = None

class ExpenseRead(ORMModel):
    id: int
    name: str
    amount: Decimal
    date: dt.date
    created_by: int
    type: str
    image_path: Optional[str] = None
    account_id: int
