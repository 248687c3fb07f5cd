"""
HTTP Basic authentication and role checks.

Two accounts are configured through the environment (see ``config``): a
regular user with the ``USER`` role and an administrator with the ``ADMIN``
role. Read endpoints accept any authenticated caller; mutating endpoints
require ``ADMIN``.
"""

import logging
import secrets
from typing import Callable, Dict

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from movie_api.api.config import get_admin_credentials, get_user_credentials

logger = logging.getLogger(__name__)

ROLE_USER = "USER"
ROLE_ADMIN = "ADMIN"

security = HTTPBasic(auto_error=False)


def _accounts() -> Dict[str, tuple[str, str]]:
    user_name, user_password = get_user_credentials()
    admin_name, admin_password = get_admin_credentials()
    return {
        user_name: (user_password, ROLE_USER),
        admin_name: (admin_password, ROLE_ADMIN),
    }


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Basic"},
    )


def get_current_user(credentials: HTTPBasicCredentials | None = Depends(security)) -> Dict[str, str]:
    """
    Authenticate the caller from the ``Authorization: Basic`` header.

    Returns:
        Dict with ``username`` and ``role``

    Raises:
        HTTPException: 401 if credentials are missing or wrong
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    account = _accounts().get(credentials.username)
    # Constant-time comparison, also for unknown names
    expected_password, role = account if account else ("", "")
    password_ok = secrets.compare_digest(
        credentials.password.encode("utf-8"), expected_password.encode("utf-8")
    )
    if account is None or not password_ok:
        logger.warning("Failed login for %r", credentials.username)
        raise _unauthorized("Invalid credentials")

    return {"username": credentials.username, "role": role}


def require_roles(*roles: str) -> Callable[[Dict[str, str]], Dict[str, str]]:
    """
    Dependency factory allowing only callers with one of ``roles``.

    Usage:
        @router.post("", dependencies=[Depends(require_roles(ROLE_ADMIN))])

    Raises:
        HTTPException: 403 if the authenticated caller lacks the role
    """

    def _role_dependency(current_user: Dict[str, str] = Depends(get_current_user)) -> Dict[str, str]:
        if current_user["role"] not in roles:
            logger.warning("User %r denied, needs one of %s", current_user["username"], roles)
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return current_user

    return _role_dependency


require_admin = require_roles(ROLE_ADMIN)
