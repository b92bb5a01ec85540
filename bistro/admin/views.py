from fastapi import APIRouter, Depends

from bistro.config import API_PREFIX
from bistro.auth.guards import ADMIN_SELF, RequestContext
from bistro.admin import service as admin_service

router = APIRouter(prefix=API_PREFIX, tags=["Admin"])

# API JSON: stats dashboard (comptes + chiffre d'affaires)
@router.get("/admin-stats")
def admin_stats(ctx: RequestContext = Depends(ADMIN_SELF)):
    return admin_service.get_stats()
