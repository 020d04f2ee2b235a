from typing import Optional

from fastapi import Depends, Header

from hospital_assets.errors import _auth_401, _forbidden_403
from hospital_assets.schemas import UserRole


def require_user(x_user_role: Optional[str] = Header(None)) -> UserRole:
    """
    Caller role as asserted by the gateway in front of this service.

    The services never see the role; routes pick require_user or
    require_admin and that is the whole capability check.
    """
    if not x_user_role:
        raise _auth_401("NOT_AUTHENTICATED", "Missing X-User-Role header")

    try:
        return UserRole(x_user_role.strip().lower())
    except ValueError:
        raise _auth_401("INVALID_ROLE", f"Unknown role: {x_user_role}")


def require_admin(role: UserRole = Depends(require_user)) -> UserRole:
    if role != UserRole.admin:
        raise _forbidden_403("FORBIDDEN", "Admin role required")
    return role
