"""Token taken from the ``token`` field of the config file."""

from __future__ import annotations

from dataclasses import dataclass, field

from linkboard.auth.base import TokenResolver, normalize_token


@dataclass(frozen=True)
class StaticTokenResolver(TokenResolver):
    token: str = field(repr=False)

    async def resolve(self) -> str:
        return normalize_token(self.token, source="config token")
