"""Bearer-token identity: turns an ``Authorization`` header into a user id.

Tokens are issued elsewhere.  This module only verifies the signature
and reads the user id from the ``id`` claim (``sub`` is accepted too).
"""

from __future__ import annotations

from fastapi import Header, Request
from jose import JWTError, jwt

from storefront.domain.exceptions import DomainException


class AuthenticationError(DomainException):
    """The request carries no usable bearer token."""

    kind = "Unauthenticated"


def decode_token(token: str, secret: str, algorithm: str) -> dict:
    try:
        return jwt.decode(token, secret, algorithms=[algorithm])
    except JWTError as exc:
        raise AuthenticationError("Invalid or expired token") from exc


def current_user_id(
    request: Request,
    authorization: str | None = Header(default=None),
) -> str:
    if not authorization or not authorization.startswith("Bearer "):
        raise AuthenticationError("Not authenticated")
    token = authorization.split(" ", 1)[1]

    settings = request.app.state.settings
    payload = decode_token(token, settings.jwt_secret, settings.jwt_algorithm)
    user_id = payload.get("id") or payload.get("sub")
    if not user_id:
        raise AuthenticationError("Invalid token")
    return str(user_id)
