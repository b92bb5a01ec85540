import logging
from datetime import datetime, timezone
from typing import Any, List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field, field_validator

from bistro.config import API_PREFIX
from bistro.utils.validators import validate_identity_email
from bistro.auth.guards import AUTHENTICATED, SELF, RequestContext, ensure_self
from bistro.utils.rate_limit import optional_rate_limit
from . import repository as payments_repo
from . import service as payments_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix=API_PREFIX, tags=["Payments API"])

class PaymentIntentIn(BaseModel):
    # Validé par stripe_client.to_minor_units pour renvoyer une erreur métier uniforme
    price: Any = None

class PaymentIn(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    email: str
    price: float = Field(gt=0)
    cart_ids: List[str] = Field(alias="cartIds", min_length=1)
    menu_item_ids: Optional[List[str]] = Field(default=None, alias="menuItemIds")
    transaction_id: Optional[str] = Field(default=None, alias="transactionId")
    status: Optional[str] = None
    date: Optional[datetime] = None

    @field_validator("email")
    @classmethod
    def _check_email(cls, v):
        return validate_identity_email(v)

# module bistro.payments.views
@router.post("/payment-intents", dependencies=[Depends(optional_rate_limit(times=10, seconds=60))])
def create_payment_intent(req: PaymentIntentIn):
    """
    Crée un PaymentIntent Stripe (carte uniquement) pour le prix donné.
    - Entrée JSON: {"price": 10.5} -> montant 1050 en sous-unités
    - Sortie: {"clientSecret": "..."} pour confirmation côté client
    - Erreurs: 400 si prix invalide, 502 si Stripe échoue
    """
    return payments_service.create_intent(req.price)

@router.post("/payments")
def create_payment(req: PaymentIn, ctx: RequestContext = Depends(AUTHENTICATED)):
    """
    Règlement après confirmation du paiement côté client.
    - L'email du paiement doit être celui du token (403 sinon)
    - Enregistre le paiement puis supprime les lignes cartIds de l'appelant
    - Sortie: {"paymentResult": {...}, "deleteManyResult": {...}}
    """
    ensure_self(ctx, req.email)
    record = req.model_dump(mode="json", exclude_none=True)
    if not record.get("date"):
        record["date"] = datetime.now(timezone.utc).isoformat()
    result = payments_service.settle_payment(record)
    logger.info(
        "payments.views.create_payment settled email=%s deleted=%s/%s",
        req.email,
        result["deleteManyResult"]["deletedCount"],
        result["deleteManyResult"]["requestedCount"],
    )
    return result

@router.get("/payments")
def list_payments(ctx: RequestContext = Depends(SELF)):
    """Historique des paiements de l'appelant (?email= doit correspondre au token)."""
    return payments_repo.list_by_email(ctx.email)
