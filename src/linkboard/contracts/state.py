"""Desired-state payload contracts."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_PAYLOAD_MODEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SocialItem(BaseModel):
    model_config = _PAYLOAD_MODEL_CONFIG

    id: int
    network: str = "website"
    url: str | None = None


class LinkItem(BaseModel):
    model_config = _PAYLOAD_MODEL_CONFIG

    id: int
    title: str = ""
    type: str = "link"
    url: str | None = None
    thumbnail_url: str | None = None


class TrackItem(BaseModel):
    model_config = _PAYLOAD_MODEL_CONFIG

    track_id: str
    title: str = ""
    artist: str = ""
    album_art_url: str | None = None
    source_url: str | None = None


class Profile(BaseModel):
    model_config = _PAYLOAD_MODEL_CONFIG

    title: str = ""
    description: str = ""
    picture_url: str | None = None


class Background(BaseModel):
    model_config = _PAYLOAD_MODEL_CONFIG

    type: str = "solid"
    value: str = "#FFFFFF"


class ButtonStyle(BaseModel):
    model_config = _PAYLOAD_MODEL_CONFIG

    background_color: str = "#FFFFFF"
    text_color: str = "#000000"


class Appearance(BaseModel):
    model_config = _PAYLOAD_MODEL_CONFIG

    font_family: str = ""
    text_color: str = "#000000"
    background: Background = Field(default_factory=Background)
    button: ButtonStyle = Field(default_factory=ButtonStyle)


class Seo(BaseModel):
    model_config = _PAYLOAD_MODEL_CONFIG

    title: str = ""
    description: str = ""
    favicon_url: str | None = None


class ProfileConfig(BaseModel):
    """Global profile, appearance, SEO and section-ordering settings."""

    model_config = _PAYLOAD_MODEL_CONFIG

    profile: Profile = Field(default_factory=Profile)
    appearance: Appearance = Field(default_factory=Appearance)
    seo: Seo = Field(default_factory=Seo)
    section_order: list[str] = Field(default_factory=list)


class DesiredState(ProfileConfig):
    """One synchronization payload.

    A collection left as ``None`` is not touched; an empty list archives every
    record of that collection.
    """

    profile_page_id: str | None = None
    socials: list[SocialItem] | None = None
    links: list[LinkItem] | None = None
    tracks: list[TrackItem] | None = None

    def collections(self) -> dict[str, list[BaseModel]]:
        provided: dict[str, list[BaseModel]] = {}
        for name in ("socials", "links", "tracks"):
            items = getattr(self, name)
            if items is not None:
                provided[name] = list(items)
        return provided
