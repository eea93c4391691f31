# expense_backend/routers/users.py
# Public user lookup

from fastapi import APIRouter, Depends, HTTPException, status

from .. import schemas
from ..dependencies import get_credential_service
from ..exceptions import NotFound
from ..services import CredentialService

router = APIRouter()

@router.get("/{user_id}", response_model=schemas.UserName)
def get_user(
    user_id: int,
    credentials: CredentialService = Depends(get_credential_service),
):
    try:
        return schemas.UserName(name=credentials.get_user_name(user_id))
    except NotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message) from exc
