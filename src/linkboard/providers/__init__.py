"""Record store implementations."""

from linkboard.providers.factory import create_store

__all__ = ["create_store"]
