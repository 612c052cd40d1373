"""
Role Authorization

Route-level role gate layered on top of access token authentication.
"""

from typing import Iterable, Union

from fastapi import Depends, status
from libs.result import Error
from src.api.error import ClientError
from src.app.services.token_issuer import AccessClaims
from src.depends import get_current_user
from src.domain.entities import Role


def authorize_roles(allowed_roles: Iterable[Union[Role, str]]):
    """
    Build a dependency admitting only callers whose role is in allowed_roles.

    Every protected route declares its own allow-set; there is no role
    hierarchy, so admin must be listed wherever admins may act.

    Usage:
        current_user: AccessClaims = Depends(authorize_roles([Role.admin]))

    Raises:
        ClientError: 401 from authentication, 403 if the role is not allowed
    """
    allowed = frozenset(Role(role) for role in allowed_roles)

    async def role_checker(
        current_user: AccessClaims = Depends(get_current_user),
    ) -> AccessClaims:
        if current_user.role not in allowed:
            raise ClientError(
                Error("FORBIDDEN", "You do not have permission to perform this action"),
                status_code=status.HTTP_403_FORBIDDEN,
            )
        return current_user

    return role_checker
