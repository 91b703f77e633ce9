"""Token resolver factory."""

from __future__ import annotations

from linkboard.auth.base import TokenResolver
from linkboard.auth.resolvers.env import EnvTokenResolver
from linkboard.auth.resolvers.static import StaticTokenResolver
from linkboard.contracts.config import LinkboardConfig
from linkboard.contracts.exceptions import ConfigError

RESOLVERS: dict[str, type[TokenResolver]] = {
    "env": EnvTokenResolver,
    "token": StaticTokenResolver,
}


def create_token_resolver(config: LinkboardConfig) -> TokenResolver:
    if config.auth not in RESOLVERS:
        raise ConfigError(f"Unknown auth mode: {config.auth}")
    if config.auth == "env":
        return EnvTokenResolver()
    return StaticTokenResolver(token=config.token or "")
