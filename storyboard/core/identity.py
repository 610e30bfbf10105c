"""
Identity token handling.

The sign-in button hands back a signed JWT. Only its payload is decoded here
to fill the user banner; the signature is NOT verified, so the result must
not be used for authorization decisions. Deployments that need that must
verify the token against the identity provider's keys first.
"""

import base64
import binascii
import json
import logging
from typing import Optional

from pydantic import ValidationError

from storyboard.schemas.User import User

logger = logging.getLogger(__name__)

DEMO_USER = User(
    name="Demo User",
    email="demo@example.com",
    picture=(
        "data:image/svg+xml,%3Csvg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 100 100'%3E"
        "%3Crect width='100' height='100' fill='%23ddd'/%3E%3Ctext x='50' y='55' "
        "font-family='Arial' font-size='40' fill='%23555' text-anchor='middle' "
        "dominant-baseline='middle'%3EDU%3C/text%3E%3C/svg%3E"
    ),
)

_warned = False


def decode_identity_token(token: str) -> Optional[User]:
    """Read name, email and picture from a JWT payload; None if malformed"""
    global _warned
    if not _warned:
        logger.warning("Identity tokens are decoded without signature verification")
        _warned = True

    try:
        payload = token.split(".")[1]
        padded = payload + "=" * (-len(payload) % 4)
        claims = json.loads(base64.urlsafe_b64decode(padded).decode("utf-8"))
        return User(
            name=claims["name"],
            email=claims["email"],
            picture=claims["picture"],
        )
    except (IndexError, KeyError, TypeError, ValueError, binascii.Error, ValidationError) as e:
        logger.error(f"Invalid token: {e}")
        return None
