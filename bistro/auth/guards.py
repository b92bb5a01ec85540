"""
Pipeline de contrôle d'accès des routes protégées.

Chaque garde reçoit le RequestContext partagé et retourne None pour continuer,
ou une BistroError pour interrompre la chaîne. GuardPipeline exécute les gardes
dans l'ordre, lève la première erreur retournée et s'utilise comme dépendance
FastAPI:

    @router.get("/users")
    def list_users(ctx: RequestContext = Depends(ADMIN_SELF)): ...

Ordre standard: verify_token -> match_self(...) -> require_admin_role.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from fastapi import Request

from bistro import config
from bistro.auth import tokens
from bistro.errors import BistroError, Forbidden, Unauthenticated
from bistro.users import repository as users_repository

logger = logging.getLogger(__name__)


@dataclass
class RequestContext:
    request: Request
    claim: Optional[Dict[str, Any]] = None
    user: Optional[dict] = None

    @property
    def email(self) -> str:
        if not self.claim:
            raise Unauthenticated()
        return self.claim["email"]


Guard = Callable[[RequestContext], Optional[BistroError]]


def verify_token(ctx: RequestContext) -> Optional[BistroError]:
    """Valide 'Authorization: Bearer <token>' et attache la revendication au contexte."""
    try:
        token = tokens.parse_bearer(ctx.request.headers.get("Authorization"))
        ctx.claim = tokens.decode_token(token)
    except Unauthenticated as e:
        logger.info("auth.guards.verify_token rejected path=%s", ctx.request.url.path)
        return e
    return None


def match_self(param: str = "email") -> Guard:
    """Exige que le paramètre de query `param` soit égal à l'email vérifié."""
    def _guard(ctx: RequestContext) -> Optional[BistroError]:
        if not ctx.claim:
            return Unauthenticated()
        if ctx.request.query_params.get(param) != ctx.claim.get("email"):
            logger.info("auth.guards.match_self mismatch param=%s path=%s", param, ctx.request.url.path)
            return Forbidden()
        return None
    _guard.__name__ = f"match_self_{param}"
    return _guard


def require_admin_role(ctx: RequestContext) -> Optional[BistroError]:
    """
    Consulte l'annuaire à chaque requête (pas de cache): un changement de rôle
    prend effet immédiatement. Utilisateur introuvable => non admin.
    """
    if not ctx.claim:
        return Unauthenticated()
    user = users_repository.find_by_email(ctx.claim.get("email"))
    if not user or user.get("role") != config.ADMIN_ROLE:
        logger.info("auth.guards.require_admin_role denied email=%s", ctx.claim.get("email"))
        return Forbidden()
    ctx.user = user
    return None


class GuardPipeline:
    def __init__(self, *guards: Guard):
        self.guards = guards

    def __call__(self, request: Request) -> RequestContext:
        ctx = RequestContext(request=request)
        for guard in self.guards:
            error = guard(ctx)
            if error is not None:
                raise error
        return ctx

    def __repr__(self) -> str:
        names = ", ".join(getattr(g, "__name__", repr(g)) for g in self.guards)
        return f"GuardPipeline({names})"


def ensure_self(ctx: RequestContext, email: Optional[str]) -> None:
    """Variante de match_self pour un email lu dans le body (après vérification du token)."""
    if email != ctx.email:
        raise Forbidden()


# Compositions utilisées par les routers
AUTHENTICATED = GuardPipeline(verify_token)
SELF = GuardPipeline(verify_token, match_self("email"))
SELF_CART = GuardPipeline(verify_token, match_self("userEmail"))
ADMIN_SELF = GuardPipeline(verify_token, match_self("email"), require_admin_role)
