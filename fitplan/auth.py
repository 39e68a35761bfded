"""Optional API-key guard for planner endpoints."""

import secrets

from fastapi import HTTPException, Header

from fitplan.config import settings


def _presented_key(x_api_key: str | None, authorization: str | None) -> str | None:
    if x_api_key is not None:
        return x_api_key
    if authorization and authorization.startswith("Bearer "):
        return authorization[len("Bearer "):].strip()
    return None


async def verify_api_key(
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
    authorization: str | None = Header(default=None),
) -> str:
    """Accept X-API-Key or Authorization: Bearer.

    With no API_KEY configured every request passes.
    """
    expected = settings.api_key
    if expected is None:
        return ""

    key = _presented_key(x_api_key, authorization)
    if key is None or not secrets.compare_digest(key, expected):
        raise HTTPException(status_code=401, detail="Invalid or missing API key")
    return key
