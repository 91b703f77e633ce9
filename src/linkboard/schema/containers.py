"""Property tables for every container the engine writes to."""

from __future__ import annotations

from linkboard.contracts.state import LinkItem, ProfileConfig, SocialItem, TrackItem
from linkboard.schema.fields import ContainerSchema, FieldKind, FieldSpec


def _encode_section_order(sections: list[str]) -> str:
    return ",".join(section.strip() for section in sections if section.strip())


def _decode_section_order(raw: str) -> list[str]:
    return [section.strip() for section in raw.split(",") if section.strip()]


def _has_image_background(profile: ProfileConfig) -> bool:
    return profile.appearance.background.type == "image"


SOCIALS = ContainerSchema(
    collection="socials",
    model=SocialItem,
    key_path="id",
    fields=(
        FieldSpec("id", "id", FieldKind.NUMBER),
        FieldSpec("network", "Network", FieldKind.TITLE, default="website", fallback="website", decode=str.lower),
        FieldSpec("url", "URL", FieldKind.URL),
    ),
)

LINKS = ContainerSchema(
    collection="links",
    model=LinkItem,
    key_path="id",
    fields=(
        FieldSpec("id", "id", FieldKind.NUMBER),
        FieldSpec("title", "Title", FieldKind.TITLE),
        FieldSpec("type", "Type", FieldKind.CHOICE, default="link", fallback="link"),
        FieldSpec("url", "URL", FieldKind.URL),
        FieldSpec("thumbnail_url", "Thumbnail URL", FieldKind.TEXT, split=True, image=True),
    ),
)

TRACKS = ContainerSchema(
    collection="tracks",
    model=TrackItem,
    key_path="track_id",
    fields=(
        FieldSpec("track_id", "Track ID", FieldKind.TEXT),
        FieldSpec("title", "Title", FieldKind.TITLE),
        FieldSpec("artist", "Artist", FieldKind.TEXT),
        FieldSpec("album_art_url", "Album Art URL", FieldKind.URL, image=True),
        FieldSpec("source_url", "Source URL", FieldKind.URL),
    ),
)

PROFILE = ContainerSchema(
    collection="profile",
    model=ProfileConfig,
    ordered=False,
    fields=(
        FieldSpec("profile.title", "profile_title", FieldKind.TEXT),
        FieldSpec("profile.description", "profile_description", FieldKind.TEXT),
        FieldSpec("profile.picture_url", "picture_url", FieldKind.TEXT, split=True, image=True),
        FieldSpec("appearance.font_family", "font_family", FieldKind.TEXT),
        FieldSpec("appearance.text_color", "text_color", FieldKind.TEXT, fallback="#000000"),
        FieldSpec("appearance.background.type", "background_type", FieldKind.CHOICE, default="solid", fallback="solid"),
        FieldSpec(
            "appearance.background.value",
            "background_value",
            FieldKind.TEXT,
            fallback="#FFFFFF",
            split=True,
            image=_has_image_background,
        ),
        FieldSpec("appearance.button.background_color", "button_bg_color", FieldKind.TEXT, fallback="#FFFFFF"),
        FieldSpec("appearance.button.text_color", "button_text_color", FieldKind.TEXT, fallback="#000000"),
        FieldSpec("seo.title", "seo_title", FieldKind.TEXT),
        FieldSpec("seo.description", "seo_description", FieldKind.TEXT),
        FieldSpec("seo.favicon_url", "favicon_url", FieldKind.TEXT, split=True, image=True),
        FieldSpec(
            "section_order",
            "section_order",
            FieldKind.TEXT,
            encode=_encode_section_order,
            decode=_decode_section_order,
        ),
    ),
)

COLLECTION_SCHEMAS: dict[str, ContainerSchema] = {schema.collection: schema for schema in (SOCIALS, LINKS, TRACKS)}
