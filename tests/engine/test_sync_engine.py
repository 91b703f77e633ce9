from __future__ import annotations

import pytest

from linkboard.contracts.config import LinkboardConfig
from linkboard.contracts.exceptions import PayloadError, StoreError, SyncError, SyncTimeoutError
from linkboard.contracts.operations import OperationKind
from linkboard.contracts.record import Record
from linkboard.contracts.record import NumberValue, TextValue, TitleValue, UrlValue
from linkboard.contracts.state import DesiredState, LinkItem, Profile, SocialItem
from linkboard.engine.engine import SyncEngine
from linkboard.engine.progress import NullSyncProgress
from linkboard.schema.extractor import get_number, get_text, get_url
from tests.fakes.store import FakeStore


def _links_state(*links: LinkItem) -> DesiredState:
    return DesiredState(profile_page_id="page-profile", links=list(links))


def _live_links(store: FakeStore) -> dict[int, int]:
    return {
        get_number(record.properties, "id"): get_number(record.properties, "Order")
        for record in store.live("db-links")
    }


@pytest.mark.asyncio
async def test_sync_end_to_end_scenario(store: FakeStore, config: LinkboardConfig) -> None:
    kept = store.seed("db-links", {"id": NumberValue(1), "Title": TitleValue(("old",))})
    dropped = store.seed("db-links", {"id": NumberValue(3), "Title": TitleValue(("C",))})

    result = await SyncEngine(store, config).sync(
        _links_state(LinkItem(id=1, title="A", url="http://a"), LinkItem(id=2, title="B", url="http://b"))
    )

    counts = result.plan.counts()["links"]
    assert counts == {OperationKind.CREATE: 1, OperationKind.UPDATE: 1, OperationKind.ARCHIVE: 1}
    assert store.records[kept.id].properties["Title"] == TitleValue(("A",))
    assert store.records[kept.id].properties["Order"] == NumberValue(0)
    assert store.records[dropped.id].archived is True
    assert _live_links(store) == {1: 0, 2: 1}
    assert result.report is not None and result.report.ok


@pytest.mark.asyncio
async def test_second_run_is_idempotent(store: FakeStore, config: LinkboardConfig, sample_state: DesiredState) -> None:
    engine = SyncEngine(store, config)
    await engine.sync(sample_state)
    store.create_calls.clear()

    second = await engine.sync(sample_state)

    assert second.plan.of_kind(OperationKind.CREATE) == []
    assert second.plan.of_kind(OperationKind.ARCHIVE) == []
    assert store.create_calls == []
    assert len(store.live("db-links")) == 2


@pytest.mark.asyncio
async def test_reorder_then_drop(store: FakeStore, config: LinkboardConfig) -> None:
    engine = SyncEngine(store, config)
    a, b, c = LinkItem(id=1, title="A"), LinkItem(id=2, title="B"), LinkItem(id=3, title="C")
    await engine.sync(_links_state(a, b, c))
    record_ids = {get_number(r.properties, "id"): r.id for r in store.live("db-links")}

    await engine.sync(_links_state(c, a))

    assert _live_links(store) == {3: 0, 1: 1}
    assert store.records[record_ids[2]].archived is True
    assert {r.id for r in store.live("db-links")} == {record_ids[1], record_ids[3]}


@pytest.mark.asyncio
async def test_url_change_updates_in_place(store: FakeStore, config: LinkboardConfig) -> None:
    engine = SyncEngine(store, config)
    await engine.sync(_links_state(LinkItem(id=1, title="A", url="http://old")))
    (record,) = store.live("db-links")

    result = await engine.sync(_links_state(LinkItem(id=1, title="A", url="http://new")))

    link_ops = result.plan.for_collection("links")
    assert [(op.kind, op.target) for op in link_ops] == [(OperationKind.UPDATE, record.id)]
    assert get_url(store.records[record.id].properties, "URL") == "http://new"


@pytest.mark.asyncio
async def test_profile_update_is_part_of_the_batch(store: FakeStore, config: LinkboardConfig) -> None:
    state = DesiredState(profile_page_id="page-profile", profile=Profile(title="Me", description="x" * 4500))

    result = await SyncEngine(store, config).sync(state)

    assert [op.collection for op in result.plan.operations] == ["profile"]
    profile = store.records["page-profile"].properties
    assert get_text(profile, "profile_title") == "Me"
    assert profile["profile_description"] == TextValue(("x" * 2000, "x" * 2000, "x" * 500))


@pytest.mark.asyncio
async def test_profile_page_id_falls_back_to_config(store: FakeStore, config: LinkboardConfig) -> None:
    result = await SyncEngine(store, config).sync(DesiredState(), dry_run=True)

    assert result.plan.operations[0].target == "page-profile"


@pytest.mark.asyncio
async def test_missing_profile_page_id_fails_before_store_calls(store: FakeStore) -> None:
    config = LinkboardConfig(auth="token", token="t", containers={"links": "db-links"})

    with pytest.raises(PayloadError):
        await SyncEngine(store, config).sync(DesiredState(links=[LinkItem(id=1)]))

    assert store.query_calls == []
    assert store.update_calls == []


@pytest.mark.asyncio
async def test_unconfigured_collection_is_rejected(store: FakeStore) -> None:
    config = LinkboardConfig(auth="token", token="t", containers={"links": "db-links"}, profile_page_id="page-profile")

    with pytest.raises(PayloadError, match="socials"):
        await SyncEngine(store, config).sync(DesiredState(socials=[SocialItem(id=1)]))

    assert store.query_calls == []


@pytest.mark.asyncio
async def test_omitted_collections_are_left_untouched(store: FakeStore, config: LinkboardConfig) -> None:
    store.seed("db-socials", {"id": NumberValue(1)})

    await SyncEngine(store, config).sync(_links_state(LinkItem(id=1)))

    assert store.query_calls == ["db-links"]
    assert len(store.live("db-socials")) == 1


@pytest.mark.asyncio
async def test_dry_run_plans_without_writing(store: FakeStore, config: LinkboardConfig, sample_state: DesiredState) -> None:
    result = await SyncEngine(store, config).sync(sample_state, dry_run=True)

    assert result.dry_run is True
    assert result.report is None
    assert len(result.plan.of_kind(OperationKind.CREATE)) == 4
    assert store.create_calls == []
    assert store.update_calls == []


@pytest.mark.asyncio
async def test_store_failure_surfaces_first_failed_operation(store: FakeStore, config: LinkboardConfig) -> None:
    store.fail_on["page-profile"] = StoreError("validation_error: background_type is not a property", status_code=400)

    with pytest.raises(SyncError) as exc_info:
        await SyncEngine(store, config).sync(_links_state(LinkItem(id=1)))

    error = exc_info.value
    assert error.operation is not None
    assert error.operation.collection == "profile"
    assert isinstance(error.__cause__, StoreError)
    assert len(store.live("db-links")) == 1


@pytest.mark.asyncio
async def test_partial_failure_keeps_succeeded_operations(store: FakeStore, config: LinkboardConfig) -> None:
    store.seed("db-links", {"id": NumberValue(1)})
    doomed = store.seed("db-links", {"id": NumberValue(2)})
    engine = SyncEngine(store, config)
    store.fail_on[doomed.id] = StoreError("conflict", status_code=409)

    with pytest.raises(SyncError) as exc_info:
        await engine.sync(_links_state(LinkItem(id=1, title="kept")))

    report = exc_info.value.report
    assert report is not None
    assert [op.target for op, _ in report.failed] == [doomed.id]
    assert {op.collection for op, _ in report.succeeded} == {"profile", "links"}
    assert store.records[doomed.id].archived is False


@pytest.mark.asyncio
async def test_query_failure_is_wrapped(config: LinkboardConfig) -> None:
    failing = FakeStore()
    failing.fail_on["db-links"] = StoreError("unauthorized", status_code=401)

    with pytest.raises(SyncError, match="query links"):
        await SyncEngine(failing, config).sync(_links_state(LinkItem(id=1)))

    assert failing.update_calls == []


@pytest.mark.asyncio
async def test_deadline_raises_timeout_with_pending(store: FakeStore) -> None:
    config = LinkboardConfig(
        auth="token",
        token="t",
        containers={"links": "db-links"},
        profile_page_id="page-profile",
        deadline_seconds=0.05,
    )
    store.delay = 5.0

    with pytest.raises(SyncTimeoutError) as exc_info:
        await SyncEngine(store, config).sync(DesiredState(profile_page_id="page-profile"))

    assert [op.target for op in exc_info.value.pending] == ["page-profile"]


@pytest.mark.asyncio
async def test_invalid_image_urls_are_stored_empty(store: FakeStore, config: LinkboardConfig) -> None:
    state = DesiredState(
        profile_page_id="page-profile",
        profile=Profile(picture_url="avatar.png"),
        links=[LinkItem(id=1, thumbnail_url="javascript:alert(1)")],
    )

    await SyncEngine(store, config).sync(state)

    assert store.records["page-profile"].properties["picture_url"] == TextValue(())
    (link,) = store.live("db-links")
    assert link.properties["Thumbnail URL"] == TextValue(())
    assert link.properties["URL"] == UrlValue(None)


class _BrokenQueryStore(FakeStore):
    async def query(self, container_id: str) -> list[Record]:
        raise ValueError(f"unexpected payload from {container_id}")


class _PhaseRecorder(NullSyncProgress):
    def __init__(self) -> None:
        self.errors: list[tuple[str, BaseException]] = []

    def phase_error(self, phase: str, error: BaseException) -> None:
        self.errors.append((phase, error))


@pytest.mark.asyncio
async def test_unexpected_query_error_is_wrapped(config: LinkboardConfig) -> None:
    failing = _BrokenQueryStore()
    progress = _PhaseRecorder()

    with pytest.raises(SyncError, match="query links") as exc_info:
        await SyncEngine(failing, config, progress=progress).sync(_links_state(LinkItem(id=1)))

    assert isinstance(exc_info.value.__cause__, ValueError)
    assert [phase for phase, _ in progress.errors] == ["Discover"]
    assert failing.create_calls == []
    assert failing.update_calls == []


@pytest.mark.asyncio
async def test_failure_takes_precedence_over_expired_deadline(store: FakeStore) -> None:
    config = LinkboardConfig(
        auth="token",
        token="t",
        containers={"links": "db-links"},
        profile_page_id="page-profile",
        deadline_seconds=0.2,
    )
    slow = store.seed("db-links", {"id": NumberValue(1)})
    store.delays[slow.id] = 5.0
    store.fail_on["page-profile"] = StoreError("conflict", status_code=409)

    with pytest.raises(SyncError) as exc_info:
        await SyncEngine(store, config).sync(_links_state(LinkItem(id=1, title="A")))

    error = exc_info.value
    assert not isinstance(error, SyncTimeoutError)
    assert error.operation is not None
    assert error.operation.target == "page-profile"
    assert error.report is not None
    assert [op.target for op in error.report.pending] == [slow.id]


@pytest.mark.asyncio
async def test_text_over_fragment_cap_fails_before_any_write(store: FakeStore) -> None:
    config = LinkboardConfig(
        auth="token",
        token="t",
        containers={"links": "db-links"},
        profile_page_id="page-profile",
        chunk_limit=1,
    )
    state = _links_state(LinkItem(id=1, title="x" * 101))

    with pytest.raises(PayloadError, match="links.Title needs 101 text fragments"):
        await SyncEngine(store, config).sync(state)

    assert store.create_calls == []
    assert store.update_calls == []
    assert store.archive_calls == []
