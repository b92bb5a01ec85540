"""
Registre central des routers (API v1, admin, health).
"""
from fastapi import FastAPI
from bistro.auth.views import router as auth_router
from bistro.users.views import router as users_router
from bistro.menu.views import router as menu_router
from bistro.reviews.views import router as reviews_router
from bistro.carts.views import router as carts_router
from bistro.payments.views import router as payments_router
from bistro.admin.views import router as admin_router
from bistro.health.router import router as health_router

def register_routers(app: FastAPI) -> None:
    """
    Agrège tous les routers de l'application.
    L'ordre n'a pas d'impact sauf conflits de chemins (évités par préfixes).
    """
    # API v1
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(menu_router)
    app.include_router(reviews_router)
    app.include_router(carts_router)
    app.include_router(payments_router)
    # Admin
    app.include_router(admin_router)
    # Health & monitoring
    app.include_router(health_router)

def register_routes(app: FastAPI) -> None:
    @app.get("/", include_in_schema=False)
    def root():
        return {"message": "Welcome to bistro boss server"}
