import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import ExpiredSignatureError, JWTError, jwt

from career_ai.core.config import settings

logger = logging.getLogger(__name__)


def create_access_token(subject: str, expires_delta: Optional[timedelta] = None, **claims: Any) -> str:
    """Issue a signed bearer token whose `sub` claim is the principal id."""
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode = {"sub": subject, "exp": expire, "type": "access", **claims}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Decode a bearer token.

    Returns the claims, {"error": "TOKEN_EXPIRED"} for an expired token,
    or None when the token is malformed or the signature does not match.
    """
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError:
        return {"error": "TOKEN_EXPIRED"}
    except JWTError as e:
        logger.info(f"Rejected bearer token: {e}")
        return None
