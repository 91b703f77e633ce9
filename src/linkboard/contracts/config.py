"""Configuration contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

KNOWN_COLLECTIONS = frozenset({"socials", "links", "tracks"})


class LinkboardConfig(BaseModel):
    auth: str = "env"
    token: str | None = None
    containers: dict[str, str] = Field(default_factory=dict)
    profile_page_id: str | None = None
    max_concurrent: int = Field(default=4, ge=1, le=16)
    deadline_seconds: float | None = Field(default=None, gt=0)
    chunk_limit: int = Field(default=2000, ge=1, le=2000)
    split_parts: int = Field(default=3, ge=1, le=10)
    api_base: str = "https://api.notion.com/v1"
    notion_version: str = "2022-06-28"
    max_retries: int = Field(default=3, ge=0, le=10)

    model_config = {"frozen": True}

    @field_validator("containers")
    @classmethod
    def validate_containers(cls, value: dict[str, str]) -> dict[str, str]:
        unknown = sorted(set(value) - KNOWN_COLLECTIONS)
        if unknown:
            raise ValueError(f"unknown collections: {', '.join(unknown)}")
        empty = sorted(name for name, container_id in value.items() if not container_id.strip())
        if empty:
            raise ValueError(f"empty container id for: {', '.join(empty)}")
        return value

    @model_validator(mode="after")
    def validate_auth_token(self) -> LinkboardConfig:
        token = (self.token or "").strip()
        if self.auth == "token":
            if not token:
                raise ValueError("token auth requires a non-empty token")
            return self
        if token:
            raise ValueError("token must be unset when auth is not 'token'")
        if self.auth != "env":
            raise ValueError("auth must be one of: env, token")
        return self
