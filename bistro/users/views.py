from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, field_validator

from bistro.config import API_PREFIX, DEFAULT_USER_ROLE
from bistro.utils.validators import validate_identity_email
from bistro.auth.guards import ADMIN_SELF, SELF, RequestContext
from . import repository as users_repository
from .service import register_user

router = APIRouter(prefix=API_PREFIX, tags=["Users API"])

class UserIn(BaseModel):
    model_config = ConfigDict(extra="allow")

    email: str

    @field_validator("email")
    @classmethod
    def _check_email(cls, v):
        return validate_identity_email(v)
    name: Optional[str] = None
    photo: Optional[str] = None

@router.post("/users")
def create_user(req: UserIn):
    """Inscription d'un profil (idempotente).
    - Le rôle n'est jamais accepté du client: tout nouveau profil reçoit DEFAULT_USER_ROLE.
    - Retourne le profil inséré, ou {"message": "User already exists"} sans modification.
    """
    record = req.model_dump(exclude_none=True)
    record["role"] = DEFAULT_USER_ROLE
    result = register_user(record)
    if not result["inserted"]:
        return {"message": result["message"]}
    return result["user"]

@router.get("/users")
def list_users(ctx: RequestContext = Depends(ADMIN_SELF)):
    """Tous les utilisateurs sauf l'appelant (admin + self-match)."""
    return users_repository.list_except(ctx.email)

@router.get("/user")
def get_user(ctx: RequestContext = Depends(SELF)):
    """Profil de l'appelant (token + self-match), ou null si absent.
    Le front s'en sert pour lire son propre rôle.
    """
    return users_repository.find_by_email(ctx.email)
