# module bistro.app
from fastapi import FastAPI

from bistro.app_setup.lifespan import lifespan
from bistro.app_setup.middlewares import register_basic_middlewares, register_security_middleware
from bistro.app_setup.exceptions import register_exception_handlers
from bistro.app_setup.routers import register_routers, register_routes

def create_app() -> FastAPI:
    """
    Crée et configure l'instance FastAPI de l'application.
    Étapes et ordre:
      1) register_basic_middlewares: CORS, TrustedHost.
      2) register_security_middleware: en-têtes de sécurité.
      3) register_exception_handlers: toute erreur -> JSON {"message"} + code 4xx/5xx.
      4) register_routes: route racine.
      5) register_routers: auth, users, menu, reviews, cart, payments, admin, health.
    Retourne:
      - FastAPI: l'application prête à être servie (ASGI).
    """
    app = FastAPI(title="Bistro API", lifespan=lifespan)
    register_basic_middlewares(app)
    register_security_middleware(app)
    register_exception_handlers(app)
    register_routes(app)
    register_routers(app)
    return app

# App globale
app = create_app()
