"""
Refresh token cookie

The refresh token travels only in an HTTP-only, SameSite=Strict cookie
named "jwt"; Secure is switched on in production.
"""

from fastapi import Response

REFRESH_COOKIE_NAME = "jwt"


class RefreshCookie:
    def __init__(self, secure: bool, max_age: int):
        self.secure = secure
        self.max_age = max_age

    def set(self, response: Response, refresh_token: str) -> None:
        response.set_cookie(
            key=REFRESH_COOKIE_NAME,
            value=refresh_token,
            max_age=self.max_age,
            httponly=True,
            secure=self.secure,
            samesite="strict",
        )

    def clear(self, response: Response) -> None:
        response.delete_cookie(
            key=REFRESH_COOKIE_NAME,
            httponly=True,
            secure=self.secure,
            samesite="strict",
        )
