"""Couche d'accès aux données (Supabase) pour l'annuaire des utilisateurs.
Contrat minimal consommé par le contrôle de rôle et l'inscription:
- find_by_email(email) -> dict | None
- insert_if_absent(record) -> (inserted: bool, row)
Les erreurs du magasin sont journalisées puis converties en StoreError.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

from bistro.config import USERS_TABLE
from bistro.errors import StoreError
from bistro.infra.supabase_client import get_supabase, get_service_supabase

logger = logging.getLogger(__name__)

def find_by_email(email: str) -> Optional[dict]:
    """Récupère un utilisateur par email.
    - Retour: dict utilisateur ou None si introuvable
    - limit(1) plutôt que single(): l'absence n'est pas une erreur
    """
    if not email:
        return None
    try:
        res = get_supabase().table(USERS_TABLE).select("*").eq("email", email).limit(1).execute()
    except Exception as e:
        logger.exception("users.repository.find_by_email failed email=%s", email)
        raise StoreError() from e
    rows = res.data or []
    return rows[0] if rows else None

def insert_if_absent(record: Dict[str, Any]) -> Tuple[bool, Optional[dict]]:
    """Insère l'utilisateur seulement si aucun profil n'existe pour cet email.
    - (False, existant) si déjà présent: le rôle stocké n'est jamais réécrit
    - (True, ligne insérée) sinon
    """
    existing = find_by_email(record.get("email") or "")
    if existing:
        return False, existing
    try:
        res = get_service_supabase().table(USERS_TABLE).insert(record).execute()
    except Exception as e:
        logger.exception("users.repository.insert_if_absent failed email=%s", record.get("email"))
        raise StoreError() from e
    rows = res.data or []
    return True, (rows[0] if rows else dict(record))

def list_except(email: str) -> List[dict]:
    """Liste tous les utilisateurs sauf celui dont l'email est fourni."""
    try:
        res = get_service_supabase().table(USERS_TABLE).select("*").neq("email", email).execute()
    except Exception as e:
        logger.exception("users.repository.list_except failed email=%s", email)
        raise StoreError() from e
    return res.data or []
