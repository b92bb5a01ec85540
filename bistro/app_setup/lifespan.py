"""
Lifespan FastAPI de l'API Bistro.
- Signale au démarrage les secrets manquants (signature des tokens, Stripe, Supabase).
- Initialise FastAPILimiter sur Redis (fakeredis en test) pour /token et /payment-intents.
Variables d'environnement:
  - DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS=1: aucun rate limiting
  - USE_FAKE_REDIS_FOR_TESTS=1: Redis en mémoire (fakeredis)
  - LOCAL_RATE_LIMIT_FALLBACK=1: compteur local si Redis est indisponible
"""
import os
import logging
from contextlib import asynccontextmanager

import redis.asyncio as redis
from fastapi import FastAPI
from fastapi_limiter import FastAPILimiter

from bistro import config

logger = logging.getLogger("uvicorn.error")

def _warn_missing_settings() -> None:
    if not config.ACCESS_TOKEN_SECRET:
        logger.warning("ACCESS_TOKEN_SECRET absent: /token et les routes protégées répondront 500")
    if not config.STRIPE_SECRET_KEY:
        logger.warning("STRIPE_SECRET_KEY absent: /payment-intents répondra 502")
    if not (config.SUPABASE_URL and config.SUPABASE_KEY):
        logger.warning("SUPABASE_URL/SUPABASE_KEY absents: les accès au magasin répondront 503")

async def _init_rate_limiter(app: FastAPI) -> None:
    if os.getenv("USE_FAKE_REDIS_FOR_TESTS") == "1":
        from fakeredis.aioredis import FakeRedis
        r = FakeRedis(decode_responses=True)
    else:
        r = redis.from_url(config.RATE_LIMIT_REDIS_URL, encoding="utf-8", decode_responses=True)
    await FastAPILimiter.init(r)
    app.state.rate_limit_enabled = True

@asynccontextmanager
async def lifespan(app: FastAPI):
    _warn_missing_settings()
    app.state.rate_limit_enabled = False

    if os.getenv("DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS") == "1":
        logger.info("Rate limiting disabled by DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS")
    else:
        try:
            await _init_rate_limiter(app)
            logger.info("Rate limiting enabled")
        except Exception as e:
            fallback = os.getenv("LOCAL_RATE_LIMIT_FALLBACK") == "1"
            logger.warning("Rate limiting %s (redis init error: %s)", "local fallback" if fallback else "disabled", e)

    yield

    if app.state.rate_limit_enabled:
        await FastAPILimiter.close()
