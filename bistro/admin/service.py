# module bistro.admin.service
from typing import Any, Dict

from bistro.config import USERS_TABLE, MENU_TABLE, PAYMENTS_TABLE
from bistro.admin import repository as admin_repository
from bistro.payments import repository as payments_repository

def get_stats() -> Dict[str, Any]:
    """Agrégats du tableau de bord admin (lecture seule)."""
    return {
        "users": admin_repository.count_table_rows(USERS_TABLE),
        "menuItems": admin_repository.count_table_rows(MENU_TABLE),
        "orders": admin_repository.count_table_rows(PAYMENTS_TABLE),
        "totalRevenue": payments_repository.total_revenue(),
    }
