import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from bistro.config import USERS_TABLE, MENU_TABLE, CARTS_TABLE, PAYMENTS_TABLE
from bistro.infra.supabase_client import get_supabase

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["Health"])

@router.get("")
def health_root():
    return {"ok": True}

def _check_table(client, name: str):
    try:
        res = client.table(name).select("id").limit(1).execute()
        return {"ok": True, "rows": len(res.data or [])}
    except Exception:
        logger.exception("health.store table check failed table=%s", name)
        return {"ok": False, "error": "unavailable"}

@router.get("/store")
def health_store():
    """Sonde de connectivité au magasin: une lecture limitée par table.
    Les détails d'erreur restent dans les logs, la réponse est publique.
    """
    info = {"connect_ok": False, "error": None, "tables": {}}
    try:
        client = get_supabase()
        for t in [USERS_TABLE, MENU_TABLE, CARTS_TABLE, PAYMENTS_TABLE]:
            info["tables"][t] = _check_table(client, t)
        info["connect_ok"] = all(t["ok"] for t in info["tables"].values())
    except Exception:
        logger.exception("health.store client unavailable")
        info["error"] = "store unavailable"
    return JSONResponse(info, status_code=200 if info["connect_ok"] else 503)
