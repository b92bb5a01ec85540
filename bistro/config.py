# bistro.config
from pathlib import Path
import os
from dotenv import load_dotenv

# Calculer le chemin du projet puis charger .env (l'environnement réel reste prioritaire)
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH, override=False)

"""
Configuration centrale de l'API Bistro.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env)
- Normalise et expose les secrets/URLs (signature des tokens, Supabase, Stripe)
- Expose les noms de tables, le rôle administrateur, CORS/hosts
Les valeurs sont lues une seule fois au démarrage et ne sont jamais modifiées ensuite.
"""

def _clean_env(v: str) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")

# Tokens d'accès: secret partagé, durée de vie (3h par défaut) et algorithme
ACCESS_TOKEN_SECRET = _clean_env(os.getenv("ACCESS_TOKEN_SECRET") or "")
ACCESS_TOKEN_TTL_SECONDS = int(os.getenv("ACCESS_TOKEN_TTL_SECONDS", str(3 * 60 * 60)))
JWT_ALGORITHM = _clean_env(os.getenv("JWT_ALGORITHM") or "HS256")

# Valeur du champ users.role donnant accès aux routes d'administration
ADMIN_ROLE = _clean_env(os.getenv("ADMIN_ROLE") or "Admin")
DEFAULT_USER_ROLE = _clean_env(os.getenv("DEFAULT_USER_ROLE") or "Customer")

# Supabase: URL et clés (anon/service)
SUPABASE_URL = _clean_env(os.getenv("SUPABASE_URL") or "")
SUPABASE_KEY = _clean_env(os.getenv("SUPABASE_KEY") or os.getenv("SUPABASE_ANON_KEY") or "")
SUPABASE_SERVICE_KEY = _clean_env(os.getenv("SUPABASE_SERVICE_KEY") or "")

if SUPABASE_URL and not SUPABASE_URL.startswith("http"):
    SUPABASE_URL = "https://" + SUPABASE_URL
if SUPABASE_URL.endswith("/"):
    SUPABASE_URL = SUPABASE_URL.rstrip("/")

# Tables (collections) du magasin de documents
USERS_TABLE = os.getenv("USERS_TABLE", "users")
MENU_TABLE = os.getenv("MENU_TABLE", "menu")
REVIEWS_TABLE = os.getenv("REVIEWS_TABLE", "reviews")
CARTS_TABLE = os.getenv("CARTS_TABLE", "carts")
PAYMENTS_TABLE = os.getenv("PAYMENTS_TABLE", "payments")

# Stripe: clé secrète et devise fixe des payment intents
STRIPE_SECRET_KEY = _clean_env(os.getenv("STRIPE_SECRET_KEY") or "")
PAYMENT_CURRENCY = _clean_env(os.getenv("PAYMENT_CURRENCY") or "inr").lower()

# Sécurité HTTP: HSTS uniquement derrière TLS
HSTS_ENABLED = (os.getenv("HSTS_ENABLED", "false").lower() == "true")

# Rate limiting (fastapi-limiter sur Redis)
RATE_LIMIT_REDIS_URL = _clean_env(os.getenv("RATE_LIMIT_REDIS_URL") or "redis://127.0.0.1:6379/0")

# CORS (dev)
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
ALLOWED_HOSTS = [h.strip() for h in os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",") if h.strip()]

API_PREFIX = "/api/v1"
