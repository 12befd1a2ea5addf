"""
Authentication service.

Sign-in is simulated: there is no user store yet. Any non-empty email with a
password of at least MIN_PASSWORD_LENGTH characters is accepted and mapped to
the account manager profile.
"""

import logging
from typing import Any, Dict

from meliads.core.models import User
from meliads.core.team import MIN_PASSWORD_LENGTH

logger = logging.getLogger(__name__)

DEFAULT_DISPLAY_NAME = "Gestor da Conta"
INVALID_CREDENTIALS = "Credenciais inválidas. Tente novamente."


class AuthService:
    """Handles sign-in for the dashboard."""

    def sign_in(self, email: str, password: str) -> Dict[str, Any]:
        """
        Authenticate a user by email and password.

        Args:
            email: User's email address
            password: User's password

        Returns:
            dict with 'success' boolean and either 'user' or 'error'
        """
        email = (email or '').strip().lower()
        password = password or ''

        if not email or len(password) < MIN_PASSWORD_LENGTH:
            return {"success": False, "error": INVALID_CREDENTIALS}

        logger.info("User signed in: %s", email)
        return {"success": True, "user": User(email=email, name=DEFAULT_DISPLAY_NAME)}
