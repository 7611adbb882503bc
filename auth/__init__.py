"""Authentication and account data backends."""

from auth.base import AuthError, AuthManager
from auth.factory import get_auth_manager

__all__ = ["AuthError", "AuthManager", "get_auth_manager"]
