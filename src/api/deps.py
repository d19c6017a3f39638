from typing import Optional

from fastapi import Header, Request, Response

from config import settings
from services.identity import generate_user_id, is_valid_user_id

USER_ID_COOKIE_MAX_AGE = 60 * 60 * 24 * 365


async def get_user_id(
    request: Request,
    response: Response,
    x_user_id: Optional[str] = Header(default=None),
) -> str:
    """
    Resolve the anonymous user for this request.

    An ``X-User-Id`` header wins over the cookie. When neither carries a usable
    value a new identifier is generated and set as a cookie.
    """
    if is_valid_user_id(x_user_id):
        return x_user_id

    cookie_value = request.cookies.get(settings.user_id_cookie)
    if is_valid_user_id(cookie_value):
        return cookie_value

    new_id = generate_user_id()
    response.set_cookie(
        key=settings.user_id_cookie,
        value=new_id,
        max_age=USER_ID_COOKIE_MAX_AGE,
        httponly=True,
        samesite="lax",
    )
    return new_id
