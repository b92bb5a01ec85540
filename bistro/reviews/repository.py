import logging
from typing import List

from bistro.config import REVIEWS_TABLE
from bistro.errors import StoreError
from bistro.infra.supabase_client import get_supabase

logger = logging.getLogger(__name__)

def list_reviews() -> List[dict]:
    try:
        res = get_supabase().table(REVIEWS_TABLE).select("*").execute()
    except Exception as e:
        logger.exception("reviews.repository.list_reviews failed")
        raise StoreError() from e
    return res.data or []
