import logging

from bistro.errors import StoreError
from bistro.infra.supabase_client import get_service_supabase

logger = logging.getLogger(__name__)

# module bistro.admin.repository
def count_table_rows(table_name: str) -> int:
    """
    Compte les lignes d'une table via Supabase.
    count="exact" avec limit(1): seul le total est utile, pas les lignes.
    Sans count renvoyé par le serveur, fallback sur len(data).
    """
    try:
        res = get_service_supabase().table(table_name).select("id", count="exact").limit(1).execute()
    except Exception as e:
        logger.exception("admin.repository.count_table_rows failed table=%s", table_name)
        raise StoreError() from e
    if getattr(res, "count", None) is not None:
        return int(res.count)
    return len(res.data or [])
