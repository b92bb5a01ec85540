"""
Exceptions métier de l'API Bistro.

Chaque exception porte son code HTTP; les handlers enregistrés par
bistro.app_setup.exceptions les transforment en réponse JSON {"message": ...}.
"""
from typing import Any, Dict, Optional


class BistroError(Exception):
    """Base des erreurs applicatives."""

    status_code = 500
    default_message = "Erreur interne"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, **self.details}


class Unauthenticated(BistroError):
    """Token absent, mal formé, invalide ou expiré - 401."""

    status_code = 401
    default_message = "unauthorized access"


class Forbidden(BistroError):
    """Rôle insuffisant ou identité différente de celle du token - 403."""

    status_code = 403
    default_message = "forbidden access"


class NotFound(BistroError):
    status_code = 404
    default_message = "Not found"


class ValidationError(BistroError):
    """Payload ou paramètre invalide - 400."""

    status_code = 400
    default_message = "Invalid payload"


class SigningError(BistroError):
    """Secret de signature indisponible."""

    status_code = 500
    default_message = "Token signing unavailable"


class StoreError(BistroError):
    """Échec du magasin de documents (Supabase) - 503."""

    status_code = 503
    default_message = "Store unavailable"


class GatewayError(BistroError):
    """Échec de la passerelle de paiement (Stripe) - 502."""

    status_code = 502
    default_message = "Payment gateway error"


class SettlementError(BistroError):
    """Paiement enregistré mais purge du panier en échec."""

    status_code = 500
    default_message = "Settlement incomplete"
