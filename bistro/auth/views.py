from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, field_validator

from bistro.config import API_PREFIX
from bistro.utils.validators import validate_identity_email
from bistro.auth.tokens import issue_token
from bistro.utils.rate_limit import optional_rate_limit

router = APIRouter(prefix=API_PREFIX, tags=["Auth API"])

class TokenRequest(BaseModel):
    # Les revendications supplémentaires (name, photo...) sont signées telles quelles
    model_config = ConfigDict(extra="allow")

    email: str

    @field_validator("email")
    @classmethod
    def _check_email(cls, v):
        return validate_identity_email(v)

@router.post("/token", dependencies=[Depends(optional_rate_limit(times=10, seconds=60))])
def create_token(req: TokenRequest):
    """Émet un token d'accès (TTL 3h) pour la revendication fournie.
    - La confiance repose sur l'étape de connexion externe côté client.
    - 500 si le secret de signature n'est pas configuré.
    """
    return {"token": issue_token(req.model_dump())}
