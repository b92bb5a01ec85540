"""
Cas d'usage 'payments': création du payment intent et règlement du panier.
"""
import logging
from typing import Any, Dict, List

from bistro.config import PAYMENT_CURRENCY
from bistro.errors import SettlementError
from bistro.carts import repository as carts_repository
from . import repository
from . import stripe_client

logger = logging.getLogger(__name__)

def create_intent(price: Any) -> Dict[str, str]:
    """
    Étape A: demande un PaymentIntent pour `price` et retourne le client secret.
    - ValidationError si le prix est invalide (aucun appel Stripe dans ce cas)
    - GatewayError si Stripe échoue; aucun état local n'est modifié
    """
    amount = stripe_client.to_minor_units(price)
    intent = stripe_client.create_payment_intent(amount=amount, currency=PAYMENT_CURRENCY)
    logger.info("payments.service.create_intent id=%s amount=%s", intent.get("id"), amount)
    return {"clientSecret": intent.get("client_secret")}

def _unique(ids: List[str]) -> List[str]:
    seen = set()
    out = []
    for i in ids:
        if i not in seen:
            seen.add(i)
            out.append(i)
    return out

def settle_payment(record: Dict[str, Any]) -> Dict[str, Any]:
    """
    Étape B: enregistre le paiement puis purge les lignes de panier couvertes.
    Ordre imposé:
      1) insertion du paiement (StoreError => rien d'autre n'est tenté)
      2) suppression inconditionnelle des lignes cart_ids appartenant à record["email"]
    - Échec de l'étape 2: SettlementError portant paymentId et cartIds non purgés
    - Moins de lignes supprimées que demandées: signalé dans deleteManyResult.missingIds
    """
    cart_ids = _unique([str(i) for i in record.get("cart_ids") or []])
    email = record["email"]

    payment = repository.insert_payment(record)
    payment_id = payment.get("id")

    try:
        deleted_ids = carts_repository.delete_many(cart_ids, email)
    except Exception as e:
        logger.exception("payments.service.settle_payment cart purge failed payment_id=%s cart_ids=%s", payment_id, cart_ids)
        raise SettlementError(
            "Payment recorded but cart purge failed",
            details={"paymentId": payment_id, "cartIds": cart_ids},
        ) from e

    deleted = set(deleted_ids)
    missing = [i for i in cart_ids if i not in deleted]
    if missing:
        logger.warning("payments.service.settle_payment drift payment_id=%s missing=%s", payment_id, missing)

    return {
        "paymentResult": {"insertedId": payment_id, "payment": payment},
        "deleteManyResult": {
            "deletedCount": len(deleted_ids),
            "requestedCount": len(cart_ids),
            "missingIds": missing,
        },
    }
