"""
ASGI entrypoint: expose `app` pour les process managers.

- En production: `uvicorn bistro.asgi:app` (ou gunicorn + uvicorn workers).
- En local: `python -m bistro` (voir bistro/__main__.py).
"""

from bistro.app import app

__all__ = ["app"]
