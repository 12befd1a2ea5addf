"""
Authentication module for MeliAds.

Usage:
    from meliads.auth import AuthService

    result = AuthService().sign_in(email, password)
"""
from meliads.auth.service import AuthService

__all__ = [
    "AuthService",
]
