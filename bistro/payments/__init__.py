"""
Module 'payments' (feature-first): point d'entrée public.
Réunit client Stripe, repository BD et règlement du panier.
"""

from .stripe_client import require_stripe, to_minor_units, create_payment_intent
from .repository import insert_payment, list_by_email, total_revenue
from .service import create_intent, settle_payment

__all__ = [
    # stripe
    "require_stripe",
    "to_minor_units",
    "create_payment_intent",
    # repository
    "insert_payment",
    "list_by_email",
    "total_revenue",
    # services
    "create_intent",
    "settle_payment",
]
