import logging
import time

import httpx
from fastapi import HTTPException, Request
from jose import jwt
from jose.exceptions import JOSEError

from expense_tracker.core.config import settings

logger = logging.getLogger(__name__)

_jwks_cache = None
_jwks_last_fetch = 0


async def get_jwks():
    """
    Safe JWKS fetcher with:
    - timeout
    - cache
    - fallback
    """
    global _jwks_cache, _jwks_last_fetch

    # Use cached keys if still fresh
    if _jwks_cache and time.time() - _jwks_last_fetch < settings.JWKS_TTL:
        return _jwks_cache

    if settings.IGNORE_TLS:
        logger.warning("TLS has been disabled! Please enable for production use!")

    try:
        async with httpx.AsyncClient(
            timeout=settings.JWKS_TIMEOUT, verify=not settings.IGNORE_TLS
        ) as client:
            res = await client.get(settings.jwks_url)
            res.raise_for_status()
            _jwks_cache = res.json()
            _jwks_last_fetch = time.time()
            return _jwks_cache

    except httpx.HTTPError as e:
        logger.error("Failed to fetch JWKS from %s: %s", settings.jwks_url, e)

        # Fallback to old cache if network fails
        if _jwks_cache:
            return _jwks_cache

        raise HTTPException(
            status_code=503, detail="Auth service unavailable. Try again later."
        )


def get_bearer_token(request: Request) -> str:
    auth = request.headers.get("Authorization")
    if not auth or not auth.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Unauthorized, no Bearer token present")
    return auth.split(" ", 1)[1].strip()


async def verify_token(token: str) -> dict:
    try:
        unverified_header = jwt.get_unverified_header(token)
        jwks = await get_jwks()

        key = next(k for k in jwks["keys"] if k["kid"] == unverified_header["kid"])

        payload = jwt.decode(
            token,
            key,
            algorithms=settings.JWT_ALGORITHMS,
            audience=settings.OIDC_AUDIENCE,
            issuer=settings.OIDC_ISSUER_URL,
        )

        logger.debug("Token validated successfully")
        return payload

    except (StopIteration, KeyError):
        logger.error("Key not found in JWKS")
        raise HTTPException(401, "Unauthorized, invalid token key")
    except jwt.ExpiredSignatureError:
        raise HTTPException(401, "Unauthorized, token expired")
    except JOSEError as e:
        logger.error("Failed to decode token: %s", e)
        raise HTTPException(401, "Unauthorized, invalid token")


async def verify_bearer_token(request: Request) -> dict:
    token = get_bearer_token(request)
    return await verify_token(token)
