from linkboard.contracts.state import DesiredState, LinkItem, ProfileConfig, TrackItem


def test_payload_accepts_camel_case_keys() -> None:
    state = DesiredState.model_validate(
        {
            "profilePageId": "page-1",
            "profile": {"title": "Me", "pictureUrl": "https://img"},
            "appearance": {
                "fontFamily": "Inter",
                "background": {"type": "image", "value": "https://bg"},
                "button": {"backgroundColor": "#111111"},
            },
            "seo": {"faviconUrl": "https://fav"},
            "sectionOrder": ["links", "socials"],
            "links": [{"id": "3", "title": "Blog", "thumbnailUrl": "data:image/png;base64,AA"}],
            "tracks": [{"trackId": "t-1", "albumArtUrl": "https://art"}],
        }
    )

    assert state.profile_page_id == "page-1"
    assert state.profile.picture_url == "https://img"
    assert state.appearance.font_family == "Inter"
    assert state.appearance.background.type == "image"
    assert state.appearance.button.background_color == "#111111"
    assert state.appearance.button.text_color == "#000000"
    assert state.seo.favicon_url == "https://fav"
    assert state.section_order == ["links", "socials"]
    assert state.links == [LinkItem(id=3, title="Blog", thumbnail_url="data:image/png;base64,AA")]
    assert state.tracks == [TrackItem(track_id="t-1", album_art_url="https://art")]


def test_snake_case_keys_are_accepted_too() -> None:
    item = LinkItem.model_validate({"id": 1, "thumbnail_url": "https://x"})

    assert item.thumbnail_url == "https://x"


def test_defaults_follow_stored_defaults() -> None:
    config = ProfileConfig()

    assert config.appearance.text_color == "#000000"
    assert config.appearance.background.type == "solid"
    assert config.appearance.background.value == "#FFFFFF"
    assert LinkItem(id=1).type == "link"


def test_collections_only_lists_provided_collections() -> None:
    state = DesiredState(links=[], tracks=[TrackItem(track_id="t")])

    collections = state.collections()

    assert list(collections) == ["links", "tracks"]
    assert collections["links"] == []


def test_dump_by_alias_uses_camel_case() -> None:
    dumped = ProfileConfig().model_dump(by_alias=True)

    assert "sectionOrder" in dumped
    assert "pictureUrl" in dumped["profile"]
