"""Token read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from linkboard.auth.base import TokenResolver, normalize_token

TOKEN_ENV_VAR = "NOTION_TOKEN"


@dataclass(frozen=True)
class EnvTokenResolver(TokenResolver):
    variable: str = TOKEN_ENV_VAR

    async def resolve(self) -> str:
        return normalize_token(os.getenv(self.variable), source=self.variable)
