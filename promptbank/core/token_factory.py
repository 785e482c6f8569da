"""Session tokens: compact HS256 JWTs, built and checked with the stdlib.

A token carries ``sub`` (user id), ``sid`` (auth session row id) and
``email``. Decoding only proves the token is well-formed, correctly
signed and unexpired; whether the session still exists is checked by
``core.auth``.
"""

import base64
import hashlib
import hmac
import json
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

ISSUER = "promptbank"
_HEADER = {"alg": "HS256", "typ": "JWT"}


@dataclass(frozen=True)
class TokenPayload:
    sub: str
    sid: str
    email: str
    exp: datetime


def _b64url(raw: bytes) -> bytes:
    return base64.urlsafe_b64encode(raw).rstrip(b"=")


def _unb64url(segment: bytes) -> bytes:
    return base64.urlsafe_b64decode(segment + b"=" * (-len(segment) % 4))


def _sign(signing_input: bytes, secret: str) -> bytes:
    return hmac.new(secret.encode(), signing_input, hashlib.sha256).digest()


def create_token(
    subject: str,
    session_id: str,
    secret: str,
    email: str = "",
    algorithm: str = "HS256",
    expires_hours: int = 168,
) -> str:
    """Encode and sign a token for ``subject`` backed by session ``session_id``."""
    if algorithm != "HS256":
        raise ValueError(f"Unsupported algorithm: {algorithm}")

    issued = int(time.time())
    claims = {
        "iss": ISSUER,
        "sub": subject,
        "sid": session_id,
        "email": email,
        "iat": issued,
        "exp": issued + int(expires_hours * 3600),
    }
    head = _b64url(json.dumps(_HEADER, separators=(",", ":")).encode())
    body = _b64url(json.dumps(claims, separators=(",", ":")).encode())
    signing_input = head + b"." + body
    return (signing_input + b"." + _b64url(_sign(signing_input, secret))).decode()


def decode_token(token: str, secret: str, algorithm: str = "HS256") -> Optional[TokenPayload]:
    """Return the payload of a valid token, or None for anything else."""
    if algorithm != "HS256":
        return None
    try:
        head, body, signature = token.encode().split(b".")
        if not hmac.compare_digest(_sign(head + b"." + body, secret), _unb64url(signature)):
            return None
        claims = json.loads(_unb64url(body))
        exp = claims["exp"]
        if exp < time.time() or not claims.get("sub") or not claims.get("sid"):
            return None
        return TokenPayload(
            sub=claims["sub"],
            sid=claims["sid"],
            email=claims.get("email", ""),
            exp=datetime.fromtimestamp(exp, tz=timezone.utc),
        )
    except (ValueError, KeyError, TypeError, AttributeError):
        # ValueError covers bad base64, bad JSON and the wrong segment count.
        return None
