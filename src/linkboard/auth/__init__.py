"""Auth module public exports."""

from linkboard.auth.base import TokenResolver
from linkboard.auth.factory import create_token_resolver

__all__ = ["TokenResolver", "create_token_resolver"]
