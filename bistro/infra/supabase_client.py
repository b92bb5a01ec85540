"""
Clients Supabase partagés (magasin de documents de l'API).
Les repositories passent par get_supabase()/get_service_supabase() à chaque appel:
les tests remplacent _supabase/_service_supabase par un faux client.
"""
from typing import Optional
from supabase import create_client, Client

from bistro.config import SUPABASE_URL, SUPABASE_KEY, SUPABASE_SERVICE_KEY
from bistro.errors import StoreError

_supabase: Optional[Client] = None
_service_supabase: Optional[Client] = None

def get_supabase() -> Client:
    global _supabase
    if _supabase is None:
        if not (SUPABASE_URL and SUPABASE_KEY):
            raise StoreError("Store not configured")
        _supabase = create_client(SUPABASE_URL, SUPABASE_KEY)
    return _supabase

def get_service_supabase() -> Client:
    """
    Client 'service-role' (bypass RLS) pour les écritures serveur.
    Retombe sur le client anon si SUPABASE_SERVICE_KEY n'est pas configurée.
    """
    global _service_supabase
    if _service_supabase is None:
        if not SUPABASE_SERVICE_KEY:
            return get_supabase()
        _service_supabase = create_client(SUPABASE_URL, SUPABASE_SERVICE_KEY)
    return _service_supabase
