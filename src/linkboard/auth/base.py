"""Auth resolver interfaces."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from linkboard.contracts.exceptions import AuthenticationError

_LOG = logging.getLogger(__name__)

# Internal integration tokens: "secret_" before Sep 2024, "ntn_" after.
NOTION_TOKEN_PREFIXES = ("secret_", "ntn_")
_BEARER = "bearer "


def normalize_token(raw: str | None, *, source: str) -> str:
    """Clean a Notion integration token read from *source*.

    Surrounding whitespace and a pasted ``Bearer`` prefix are dropped. An
    unrecognised prefix only warns, so newer token formats keep working.
    """
    token = (raw or "").strip()
    if token.lower().startswith(_BEARER):
        token = token[len(_BEARER) :].strip()
    if not token:
        raise AuthenticationError(f"{source} is not set or empty")
    if any(char.isspace() for char in token):
        raise AuthenticationError(f"{source} contains whitespace; expected a single Notion token")
    if not token.startswith(NOTION_TOKEN_PREFIXES):
        _LOG.warning("%s does not look like a Notion integration token", source)
    return token


class TokenResolver(ABC):
    @abstractmethod
    async def resolve(self) -> str:
        """Resolve and return a Notion integration token."""
