"""
Caller identity from the auth cookie

The cookie holds URL-encoded JSON such as {"username": "u1", "role": "user"}.
Its signature is checked upstream of this service.
"""

import json
import logging
from typing import Optional
from urllib.parse import unquote

from fastapi import Depends, Request
from pydantic import ValidationError

from category_api.core.config import settings
from category_api.core.errors import Unauthenticated
from category_api.schemas.category import Identity

logger = logging.getLogger(__name__)


def parse_auth_cookie(value: Optional[str]) -> Optional[Identity]:
    """
    Decode an auth cookie value

    Returns:
        Identity, or None when the cookie is absent or undecodable
    """
    if not value:
        return None

    try:
        data = json.loads(unquote(value))
    except ValueError:
        logger.debug("Auth cookie is not valid JSON")
        return None

    if not isinstance(data, dict) or not data.get("username"):
        return None

    try:
        return Identity(username=str(data["username"]), role=data.get("role"))
    except ValidationError:
        return None


def get_identity(request: Request) -> Optional[Identity]:
    """FastAPI dependency: identity of the caller, or None when unauthenticated"""
    return parse_auth_cookie(request.cookies.get(settings.AUTH_COOKIE_NAME))


def require_identity(identity: Optional[Identity] = Depends(get_identity)) -> Identity:
    """
    FastAPI dependency: identity of the caller, or Unauthenticated

    Declared ahead of other endpoint dependencies so a missing identity
    is rejected before any configuration or network work happens.
    """
    if identity is None or not identity.username:
        raise Unauthenticated()
    return identity
