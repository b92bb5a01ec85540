"""
Accès aux données pour les articles du menu (table MENU_TABLE).
"""
import logging
from typing import Any, Dict, List, Optional

from bistro.config import MENU_TABLE
from bistro.errors import StoreError
import bistro.infra.supabase_client as supabase_client

logger = logging.getLogger(__name__)

# Colonnes modifiables par PATCH; admin_email n'en fait jamais partie
UPDATABLE_FIELDS = ("name", "recipe", "category", "price", "image")

def list_menu() -> List[dict]:
    try:
        res = supabase_client.get_supabase().table(MENU_TABLE).select("*").execute()
    except Exception as e:
        logger.exception("menu.repository.list_menu failed")
        raise StoreError() from e
    return res.data or []

def list_by_admin(admin_email: str) -> List[dict]:
    """Articles créés par un administrateur donné."""
    try:
        res = (
            supabase_client.get_supabase()
            .table(MENU_TABLE)
            .select("*")
            .eq("admin_email", admin_email)
            .execute()
        )
    except Exception as e:
        logger.exception("menu.repository.list_by_admin failed admin_email=%s", admin_email)
        raise StoreError() from e
    return res.data or []

def get_item(item_id: str) -> Optional[dict]:
    try:
        res = supabase_client.get_supabase().table(MENU_TABLE).select("*").eq("id", item_id).limit(1).execute()
    except Exception as e:
        logger.exception("menu.repository.get_item failed id=%s", item_id)
        raise StoreError() from e
    rows = res.data or []
    return rows[0] if rows else None

def create_item(data: Dict[str, Any]) -> dict:
    try:
        res = supabase_client.get_service_supabase().table(MENU_TABLE).insert(data).execute()
    except Exception as e:
        logger.exception("menu.repository.create_item failed admin_email=%s", data.get("admin_email"))
        raise StoreError() from e
    rows = res.data or []
    return rows[0] if rows else dict(data)

def update_item(item_id: str, data: Dict[str, Any]) -> Optional[dict]:
    """Met à jour les seuls champs UPDATABLE_FIELDS; None si l'article n'existe pas."""
    changes = {k: v for k, v in data.items() if k in UPDATABLE_FIELDS}
    if not changes:
        return get_item(item_id)
    try:
        res = (
            supabase_client.get_service_supabase()
            .table(MENU_TABLE)
            .update(changes)
            .eq("id", item_id)
            .execute()
        )
    except Exception as e:
        logger.exception("menu.repository.update_item failed id=%s", item_id)
        raise StoreError() from e
    rows = res.data or []
    return rows[0] if rows else None

def delete_item(item_id: str) -> int:
    """Supprime l'article et retourne le nombre de lignes supprimées (0 ou 1)."""
    try:
        res = supabase_client.get_service_supabase().table(MENU_TABLE).delete().eq("id", item_id).execute()
    except Exception as e:
        logger.exception("menu.repository.delete_item failed id=%s", item_id)
        raise StoreError() from e
    return len(res.data or [])
