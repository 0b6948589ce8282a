"""
Community Garden Backend — Static Administrator Access Control
===============================================================

What:  HTTP Basic guard for the plot pages.
How:   FastAPI's HTTPBasic extracts the credentials; they are compared with
       ADMIN_USERNAME / ADMIN_PASSWORD from the application settings.
Who:   Attached to the /plots router as a router-level dependency.

Security Note:
    There is exactly one credential pair and it is configured and compared
    in plain text. The `users` table is not consulted. Replace this module
    before exposing the service beyond a trusted network.
"""

import logging
import secrets

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from garden.config import Settings

logger = logging.getLogger(__name__)

# auto_error=True: a request without an Authorization header gets 401 + WWW-Authenticate
basic_auth = HTTPBasic(realm="Community Garden")


def require_admin(
    request: Request,
    credentials: HTTPBasicCredentials = Depends(basic_auth),
) -> str:
    """
    Accept the request only when the Basic credentials match the admin pair.

    Returns:
        The authenticated username

    Raises:
        HTTPException(401): Wrong username or password
    """
    settings: Settings = request.app.state.settings

    # compare_digest on the plain values: constant time, still plain text
    username_ok = secrets.compare_digest(
        credentials.username.encode("utf-8"), settings.admin_username.encode("utf-8")
    )
    password_ok = secrets.compare_digest(
        credentials.password.encode("utf-8"), settings.admin_password.encode("utf-8")
    )
    if not (username_ok and password_ok):
        logger.warning("Rejected credentials for user %r", credentials.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": 'Basic realm="Community Garden"'},
        )
    return credentials.username
