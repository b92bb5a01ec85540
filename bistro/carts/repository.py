"""
Accès aux lignes de panier (table CARTS_TABLE).
Chaque ligne appartient à un seul user_email; les suppressions sont conditionnées
par ce propriétaire pour qu'un appelant ne touche jamais le panier d'un autre.
"""
import logging
from typing import Any, Dict, Iterable, List

from bistro.config import CARTS_TABLE
from bistro.errors import StoreError
import bistro.infra.supabase_client as supabase_client

logger = logging.getLogger(__name__)

def list_by_user(email: str) -> List[dict]:
    try:
        res = (
            supabase_client.get_supabase()
            .table(CARTS_TABLE)
            .select("*")
            .eq("user_email", email)
            .execute()
        )
    except Exception as e:
        logger.exception("carts.repository.list_by_user failed email=%s", email)
        raise StoreError() from e
    return res.data or []

def insert(item: Dict[str, Any]) -> dict:
    """Insère une ligne de panier et retourne la ligne stockée (avec son id)."""
    try:
        res = supabase_client.get_service_supabase().table(CARTS_TABLE).insert(item).execute()
    except Exception as e:
        logger.exception("carts.repository.insert failed user_email=%s", item.get("user_email"))
        raise StoreError() from e
    rows = res.data or []
    return rows[0] if rows else dict(item)

def delete_one(item_id: str, user_email: str) -> int:
    try:
        res = (
            supabase_client.get_service_supabase()
            .table(CARTS_TABLE)
            .delete()
            .eq("id", item_id)
            .eq("user_email", user_email)
            .execute()
        )
    except Exception as e:
        logger.exception("carts.repository.delete_one failed id=%s", item_id)
        raise StoreError() from e
    return len(res.data or [])

def delete_many(ids: Iterable[str], user_email: str) -> List[str]:
    """
    Supprime les lignes dont l'id est dans `ids` et appartenant à `user_email`.
    Retourne les ids effectivement supprimés (len() == deletedCount).
    Les exceptions du magasin sont propagées telles quelles: l'appelant décide
    de la sémantique (voir payments.service.settle_payment).
    """
    id_list = [str(i) for i in ids]
    if not id_list:
        return []
    res = (
        supabase_client.get_service_supabase()
        .table(CARTS_TABLE)
        .delete()
        .in_("id", id_list)
        .eq("user_email", user_email)
        .execute()
    )
    return [str(r.get("id")) for r in (res.data or [])]
