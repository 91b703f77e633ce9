"""Concrete token resolvers."""

from linkboard.auth.resolvers.env import EnvTokenResolver
from linkboard.auth.resolvers.static import StaticTokenResolver

__all__ = ["EnvTokenResolver", "StaticTokenResolver"]
