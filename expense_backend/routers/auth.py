# expense_backend/routers/auth.py
# Signup and login endpoints

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from .. import schemas
from ..dependencies import get_credential_service
from ..exceptions import Conflict, NotFound, Unauthorized
from ..services import CredentialService

router = APIRouter()

@router.post("/signup", response_class=PlainTextResponse)
def signup(
    user_data: schemas.SignupRequest,
    credentials: CredentialService = Depends(get_credential_service),
):
    """Register a user together with their personal account."""
    try:
        credentials.register(user_data.email, user_data.password, user_data.name)
    except Conflict as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message) from exc

    return "User and personal account created successfully"

@router.post("/login", response_model=schemas.TokenResponse)
def login(
    user_data: schemas.LoginRequest,
    credentials: CredentialService = Depends(get_credential_service),
):
    """Exchange email and password for a 24h bearer token."""
    try:
        token = credentials.authenticate(user_data.email, user_data.password)
    except NotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message) from exc
    except Unauthorized as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=exc.message) from exc

    return schemas.TokenResponse(auth=True, token=token)
