from __future__ import annotations

import json as _json
from typing import Any, Callable, List

import httpx
import pytest

from company_lens.base import ToolResult, ToolSuccess
from company_lens.remote import RemoteMCPClient

ENDPOINT = "http://mock-remote/mcp"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    def sent_bodies(self) -> List[Any]:
        return [_json.loads(r.content.decode("utf-8")) for r in self.requests]


class FakeRemote:
    """Stands in for RemoteMCPClient and counts calls."""

    def __init__(self, outcome: ToolResult | None = None) -> None:
        self.outcome = outcome if outcome is not None else ToolSuccess({"content": []})
        self.queries: List[Any] = []

    @property
    def call_count(self) -> int:
        return len(self.queries)

    async def execute_query(self, query: Any) -> ToolResult:
        self.queries.append(query)
        return self.outcome


@pytest.fixture
def make_remote():
    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> tuple[RemoteMCPClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        client = httpx.AsyncClient(transport=transport, follow_redirects=True)
        return RemoteMCPClient(ENDPOINT, client=client), transport

    return _make


@pytest.fixture
def fake_remote() -> FakeRemote:
    return FakeRemote()
