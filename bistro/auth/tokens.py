"""
Émission et vérification des tokens d'accès (JWT HS256).
- issue_token: signe la revendication d'identité fournie par l'appelant (au minimum email).
- decode_token: valide signature + expiration et retourne la revendication.
Aucune vérification de l'authenticité de la revendication à l'émission: la confiance
repose sur l'étape de connexion externe qui appelle /token.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from bistro import config
from bistro.errors import SigningError, Unauthenticated

logger = logging.getLogger(__name__)

# Revendications gérées par le serveur, jamais reprises du body
_RESERVED_CLAIMS = ("exp", "iat", "nbf")

def _require_secret() -> str:
    secret = config.ACCESS_TOKEN_SECRET
    if not secret:
        raise SigningError("ACCESS_TOKEN_SECRET manquant")
    return secret

def issue_token(claim: Dict[str, Any], now: Optional[datetime] = None) -> str:
    payload = {k: v for k, v in (claim or {}).items() if k not in _RESERVED_CLAIMS}
    issued_at = now or datetime.now(timezone.utc)
    payload["iat"] = issued_at
    payload["exp"] = issued_at + timedelta(seconds=config.ACCESS_TOKEN_TTL_SECONDS)
    secret = _require_secret()
    try:
        return jwt.encode(payload, secret, algorithm=config.JWT_ALGORITHM)
    except (TypeError, ValueError, jwt.PyJWTError) as e:
        logger.exception("auth.tokens.issue_token failed")
        raise SigningError(f"Signature impossible: {e}") from e

def decode_token(token: str) -> Dict[str, Any]:
    """
    Vérifie le token et retourne la revendication décodée.
    - Lève Unauthenticated si signature invalide, token expiré ou email absent.
    - Lève SigningError si le secret n'est pas configuré (erreur serveur, pas client).
    """
    secret = _require_secret()
    try:
        claim = jwt.decode(token, secret, algorithms=[config.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.info("auth.tokens.decode_token expired token")
        raise Unauthenticated()
    except jwt.InvalidTokenError:
        logger.info("auth.tokens.decode_token invalid token")
        raise Unauthenticated()
    email = claim.get("email")
    if not isinstance(email, str) or not email:
        raise Unauthenticated()
    return claim

def parse_bearer(authorization: Optional[str]) -> str:
    """Extrait <token> d'un en-tête 'Bearer <token>'; Unauthenticated sinon."""
    parts = (authorization or "").split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise Unauthenticated()
    return parts[1]
