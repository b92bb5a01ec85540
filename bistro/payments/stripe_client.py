"""
Adaptateur Stripe: centralise les appels et la configuration Stripe.
"""
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict

import stripe

from bistro.errors import GatewayError, ValidationError

logger = logging.getLogger(__name__)

# module bistro.payments.stripe_client
def require_stripe() -> stripe:
    """
    Prépare et retourne le module stripe prêt à l'emploi.
    - Configure stripe.api_key via STRIPE_SECRET_KEY si disponible.
    - En absence de clé, les appels Stripe échouent côté SDK (AuthenticationError -> GatewayError).
    """
    from bistro.config import STRIPE_SECRET_KEY
    if STRIPE_SECRET_KEY:
        stripe.api_key = STRIPE_SECRET_KEY
    return stripe

def to_minor_units(price: Any) -> int:
    """
    Convertit un prix (unités majeures) en entier de sous-unités: trunc(price * 100).
    - Passe par Decimal(str(price)) pour que 0.29 donne 29 et non 28.
    - Lève ValidationError si le prix n'est pas numérique, pas fini, <= 0,
      ou inférieur à une sous-unité.
    """
    if isinstance(price, bool):
        raise ValidationError("price must be a number")
    try:
        value = Decimal(str(price))
    except (InvalidOperation, ValueError, TypeError):
        raise ValidationError("price must be a number")
    if not value.is_finite():
        raise ValidationError("price must be a finite number")
    if value <= 0:
        raise ValidationError("price must be positive")
    amount = int(value * 100)
    if amount < 1:
        raise ValidationError("price is below the smallest currency unit")
    return amount

def create_payment_intent(*, amount: int, currency: str) -> Dict[str, Any]:
    """
    Crée un PaymentIntent Stripe restreint aux paiements par carte.
    - amount: montant en sous-unités (ex: 1050 pour 10.50)
    - currency: devise ISO en minuscules (ex: "inr")
    Retour: dict incluant "id" et "client_secret".
    Erreurs: GatewayError pour toute erreur Stripe (réseau, clé, montant refusé).
    """
    require_stripe()
    try:
        intent = stripe.PaymentIntent.create(
            amount=amount,
            currency=currency,
            payment_method_types=["card"],
        )
    except stripe.StripeError as e:
        logger.exception("payments.stripe_client.create_payment_intent failed amount=%s currency=%s", amount, currency)
        raise GatewayError(getattr(e, "user_message", None) or "Payment intent creation failed") from e
    # stripe retourne un objet; on le traite comme dict-compatible
    return dict(intent)
