"""Shared test fixtures for linkboard tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from linkboard.contracts.config import LinkboardConfig
from linkboard.contracts.state import DesiredState, LinkItem, SocialItem, TrackItem
from tests.fakes.store import FakeStore

CONTAINERS = {"socials": "db-socials", "links": "db-links", "tracks": "db-tracks"}


@pytest.fixture
def config() -> LinkboardConfig:
    return LinkboardConfig(
        auth="token",
        token="secret_abc",
        containers=CONTAINERS,
        profile_page_id="page-profile",
    )


@pytest.fixture
def store() -> FakeStore:
    fake = FakeStore()
    fake.seed("db-profile", {}, record_id="page-profile")
    return fake


@pytest.fixture
def sample_state() -> DesiredState:
    return DesiredState(
        profile_page_id="page-profile",
        socials=[SocialItem(id=1, network="github", url="https://github.com/someone")],
        links=[
            LinkItem(id=1, title="A", url="http://a"),
            LinkItem(id=2, title="B", url="http://b"),
        ],
        tracks=[TrackItem(track_id="4uLU6hMCjMI75M1A2tKUQC", title="Song", artist="Band")],
    )


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "linkboard.json"
    path.write_text(
        json.dumps({"auth": "token", "token": "secret_abc", "containers": CONTAINERS}),
        encoding="utf-8",
    )
    return path
