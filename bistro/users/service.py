"""Couche service du domaine Utilisateurs."""
import logging
from typing import Any, Dict

from . import repository

logger = logging.getLogger(__name__)

def register_user(record: Dict[str, Any]) -> Dict[str, Any]:
    """Inscription idempotente.
    - Premier appel pour un email: insère le profil et le retourne
    - Appels suivants: aucun changement (rôle stocké intact), message "User already exists"
    """
    inserted, row = repository.insert_if_absent(record)
    if not inserted:
        logger.info("users.service.register_user already exists email=%s", record.get("email"))
        return {"message": "User already exists", "inserted": False}
    return {"inserted": True, "user": row}
