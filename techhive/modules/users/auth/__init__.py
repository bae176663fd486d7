"""
Authentication Module

Provides the token-authentication pipeline stage and its helpers.
"""

from .middleware import token_authentication, extract_token, is_authorized, is_documentation_path

__all__ = [
    "token_authentication",
    "extract_token",
    "is_authorized",
    "is_documentation_path",
]
