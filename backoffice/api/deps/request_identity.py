from __future__ import annotations

from functools import lru_cache
import logging

from fastapi import HTTPException, Request

from backoffice.core.config import settings
from backoffice.core.security.jwt_verifier import AuthTokenValidationError, JWTVerifier
from backoffice.schemas.request_identity import RequestIdentity

logger = logging.getLogger(__name__)

SYSTEM_EMAIL = "system@local"


def _normalized_auth_mode() -> str:
    raw = (settings.AUTH_MODE or "legacy_header").strip().lower()
    if raw in {"legacy_header", "dual", "jwt_only"}:
        return raw
    return "legacy_header"


@lru_cache(maxsize=1)
def _get_verifier() -> JWTVerifier:
    algorithms = [
        token.strip().upper()
        for token in (settings.AUTH_JWT_ALGORITHMS or "HS256").split(",")
        if token.strip()
    ]
    return JWTVerifier(
        secret=settings.JWT_SECRET,
        algorithms=algorithms or ["HS256"],
        leeway_sec=settings.AUTH_JWT_CLOCK_SKEW_SEC,
    )


def _extract_bearer_token(request: Request) -> str | None:
    header = request.headers.get("Authorization") or ""
    prefix = "Bearer "
    if not header.startswith(prefix):
        return None
    token = header[len(prefix) :].strip()
    return token or None


def _identity_from_legacy_header(request: Request) -> RequestIdentity:
    email = (
        request.headers.get("X-User-Email")
        or request.headers.get("X-User")
        or SYSTEM_EMAIL
    )
    return RequestIdentity(
        subject=None,
        email=(email or "").strip().lower() or None,
        auth_source="legacy_header",
        claims={},
    )


def _extract_email_from_claims(claims: dict) -> str | None:
    for key in ("email", "username", "preferred_username"):
        value = claims.get(key)
        if value is None:
            continue
        text = str(value).strip().lower()
        if text:
            return text
    return None


def _identity_from_token(token: str) -> RequestIdentity:
    try:
        claims = _get_verifier().verify(token)
    except AuthTokenValidationError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc

    subject = claims.get("sub", claims.get("id"))
    subject_text = str(subject).strip() if subject is not None else None
    email = _extract_email_from_claims(claims)
    if not email:
        logger.warning(
            "jwt_identity_email_missing subject=%s claim_keys=%s",
            subject_text or "-",
            sorted(str(k) for k in claims.keys()),
        )
    return RequestIdentity(
        subject=subject_text or None,
        email=email,
        auth_source="jwt",
        claims=claims,
    )


def resolve_request_identity(request: Request) -> RequestIdentity:
    """
    Authorization gate used as a router-level dependency.
    Rejects with 401 only in jwt_only mode (or dual mode with a bad token).
    """
    token = _extract_bearer_token(request)
    mode = _normalized_auth_mode()
    if mode == "legacy_header":
        identity = _identity_from_legacy_header(request)
    elif mode == "jwt_only":
        if not token:
            raise HTTPException(status_code=401, detail="Not authorized, no token")
        identity = _identity_from_token(token)
    # dual mode: prefer JWT when present, otherwise fallback to legacy header.
    elif token:
        identity = _identity_from_token(token)
    else:
        identity = _identity_from_legacy_header(request)

    request.state.identity = identity
    return identity


def get_request_email(request: Request) -> str:
    identity = getattr(request.state, "identity", None)
    if identity is None:
        identity = resolve_request_identity(request)
    return identity.email or SYSTEM_EMAIL
