"""
Accès aux données pour la feature 'payments' (table PAYMENTS_TABLE).
Les paiements sont immuables: insertion et lecture uniquement.
"""
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List

from bistro.config import PAYMENTS_TABLE
from bistro.errors import StoreError
import bistro.infra.supabase_client as supabase_client

logger = logging.getLogger(__name__)

# module bistro.payments.repository
def insert_payment(record: Dict[str, Any]) -> dict:
    """Insère le paiement et retourne la ligne stockée (avec son id)."""
    try:
        res = supabase_client.get_service_supabase().table(PAYMENTS_TABLE).insert(record).execute()
    except Exception as e:
        logger.exception("payments.repository.insert_payment failed email=%s", record.get("email"))
        raise StoreError() from e
    rows = res.data or []
    return rows[0] if rows else dict(record)

def list_by_email(email: str) -> List[dict]:
    """Historique des paiements d'un utilisateur, du plus récent au plus ancien."""
    try:
        res = (
            supabase_client.get_supabase()
            .table(PAYMENTS_TABLE)
            .select("*")
            .eq("email", email)
            .order("date", desc=True)
            .execute()
        )
    except Exception as e:
        logger.exception("payments.repository.list_by_email failed email=%s", email)
        raise StoreError() from e
    return res.data or []

def total_revenue() -> float:
    """Somme des prix de tous les paiements (0 si aucun)."""
    try:
        res = supabase_client.get_service_supabase().table(PAYMENTS_TABLE).select("price").execute()
    except Exception as e:
        logger.exception("payments.repository.total_revenue failed")
        raise StoreError() from e
    total = Decimal("0")
    for row in res.data or []:
        try:
            total += Decimal(str(row.get("price") or 0))
        except InvalidOperation:
            logger.warning("payments.repository.total_revenue skipped non numeric price=%r", row.get("price"))
    return float(total)
