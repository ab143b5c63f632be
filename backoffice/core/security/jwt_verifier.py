from __future__ import annotations

from typing import Any

import jwt


class AuthTokenValidationError(Exception):
    """Raised when a bearer token cannot be verified."""


class JWTVerifier:
    """Verifies shared-secret signed bearer tokens."""

    def __init__(
        self,
        *,
        secret: str,
        algorithms: list[str],
        leeway_sec: int = 0,
    ) -> None:
        self._secret = secret
        self._algorithms = algorithms or ["HS256"]
        self._leeway_sec = leeway_sec

    def verify(self, token: str) -> dict[str, Any]:
        if not token:
            raise AuthTokenValidationError("Not authorized, no token")
        if not self._secret:
            raise AuthTokenValidationError("JWT secret is not configured.")
        try:
            claims = jwt.decode(
                token,
                key=self._secret,
                algorithms=self._algorithms,
                leeway=self._leeway_sec,
                options={"verify_aud": False},
            )
        except jwt.ExpiredSignatureError as exc:
            raise AuthTokenValidationError("Not authorized, token expired") from exc
        except jwt.InvalidTokenError as exc:
            raise AuthTokenValidationError("Not authorized, token failed") from exc
        if not isinstance(claims, dict):
            raise AuthTokenValidationError("Not authorized, token failed")
        return claims
