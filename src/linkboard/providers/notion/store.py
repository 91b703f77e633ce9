"""Notion database adapter for the record store contract."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from linkboard.contracts.exceptions import AuthenticationError, StoreError
from linkboard.contracts.record import Properties, Record
from linkboard.contracts.store import RecordStore
from linkboard.providers.notion._retrying_transport import RetryingTransport
from linkboard.providers.notion.mapper import record_from_page, to_notion_properties

_LOG = logging.getLogger(__name__)

NOTION_API_BASE = "https://api.notion.com/v1"
NOTION_VERSION = "2022-06-28"
_PAGE_SIZE = 100
_MAX_ERROR_DETAIL = 1000


class NotionStore(RecordStore):
    def __init__(
        self,
        *,
        token: str,
        api_base: str = NOTION_API_BASE,
        notion_version: str = NOTION_VERSION,
        max_retries: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._token = token
        self._api_base = api_base.rstrip("/")
        self._notion_version = notion_version
        self._max_retries = max_retries
        self._inner_transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> NotionStore:
        self._client = httpx.AsyncClient(
            base_url=self._api_base,
            headers={
                "Authorization": f"Bearer {self._token}",
                "Notion-Version": self._notion_version,
                "Content-Type": "application/json",
            },
            transport=RetryingTransport(transport=self._inner_transport, max_retries=self._max_retries),
            timeout=httpx.Timeout(30.0),
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def query(self, container_id: str) -> list[Record]:
        records: list[Record] = []
        cursor: str | None = None
        while True:
            payload: dict[str, Any] = {"page_size": _PAGE_SIZE}
            if cursor:
                payload["start_cursor"] = cursor
            data = await self._request("POST", f"/databases/{container_id}/query", json=payload)

            for page in data.get("results", []):
                if not isinstance(page, dict) or page.get("object", "page") != "page":
                    continue
                record = self._record(page)
                if not record.archived:
                    records.append(record)

            cursor = data.get("next_cursor")
            if not data.get("has_more") or not cursor:
                break
        _LOG.debug("Queried %d records from %s", len(records), container_id)
        return records

    async def create(self, container_id: str, properties: Properties) -> Record:
        data = await self._request(
            "POST",
            "/pages",
            json={"parent": {"database_id": container_id}, "properties": to_notion_properties(properties)},
        )
        return self._record(data)

    async def update(self, record_id: str, properties: Properties) -> Record:
        data = await self._request(
            "PATCH",
            f"/pages/{record_id}",
            json={"properties": to_notion_properties(properties)},
        )
        return self._record(data)

    async def archive(self, record_id: str) -> None:
        await self._request("PATCH", f"/pages/{record_id}", json={"archived": True})

    async def get(self, record_id: str) -> Record:
        return self._record(await self._request("GET", f"/pages/{record_id}"))

    async def _request(self, method: str, path: str, *, json: dict[str, Any] | None = None) -> dict[str, Any]:
        if self._client is None:
            raise StoreError("Notion store is not open; use it as an async context manager")

        try:
            response = await self._client.request(method, path, json=json)
        except httpx.HTTPError as exc:
            raise StoreError(f"Notion request {method} {path} failed: {exc}") from exc

        if response.is_error:
            raise self._error_from_response(method, path, response)

        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError as exc:
            raise StoreError(f"Notion returned invalid JSON for {method} {path}") from exc
        if not isinstance(data, dict):
            raise StoreError(f"Notion returned unexpected payload for {method} {path}")
        return data

    @staticmethod
    def _error_from_response(method: str, path: str, response: httpx.Response) -> StoreError:
        code: str | None = None
        detail = response.text.strip()
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            code = body.get("code") if isinstance(body.get("code"), str) else None
            if isinstance(body.get("message"), str):
                detail = body["message"]
        if len(detail) > _MAX_ERROR_DETAIL:
            detail = detail[:_MAX_ERROR_DETAIL] + "...(truncated)"

        message = f"Notion API error {response.status_code} on {method} {path}: {detail}"
        error_type = AuthenticationError if response.status_code in (401, 403) else StoreError
        return error_type(message, status_code=response.status_code, code=code)

    @staticmethod
    def _record(page: dict[str, Any]) -> Record:
        try:
            return record_from_page(page)
        except ValueError as exc:
            raise StoreError(str(exc)) from exc
