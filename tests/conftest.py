"""Shared fixtures: a transport that records statements instead of sending them."""

from typing import Any

import pytest

from rdf_service.config import ServiceConfig
from rdf_service.result import Fail, Ok, Result
from rdf_service.service import RdfService


class RecordingTransport:
    """Stands in for HttpTransport. Replies are queued per call type."""

    def __init__(self):
        self.queries: list[str] = []
        self.updates: list[tuple[str, str]] = []
        self.query_replies: list[Result[dict[str, Any]]] = []
        self.update_replies: list[Result[str]] = []

    def query(self, query: str) -> Result[dict[str, Any]]:
        self.queries.append(query)
        if self.query_replies:
            return self.query_replies.pop(0)
        return Ok(data={"head": {"vars": []}, "results": {"bindings": []}})

    def update(self, update: str, security_label: str = "") -> Result[str]:
        self.updates.append((update, security_label))
        if self.update_replies:
            return self.update_replies.pop(0)
        return Ok(data="")

    @property
    def calls(self) -> int:
        return len(self.queries) + len(self.updates)


def _results(var: str, *values: str) -> dict[str, Any]:
    """Build a SPARQL JSON results object with one variable."""
    return {
        "head": {"vars": [var]},
        "results": {"bindings": [{var: {"type": "uri", "value": v}} for v in values]},
    }


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def config():
    return ServiceConfig(
        triplestore_uri="http://store.test/",
        dataset="kb",
        default_uri_stub="http://example.org/data/",
        default_security_label="OFFICIAL",
    )


@pytest.fixture
def service(config, transport):
    return RdfService(config, transport=transport, new_id=lambda: "fixed-id")


@pytest.fixture
def failing_update():
    return Fail(error="SPARQL HTTP 500: Server Error", context="boom")


@pytest.fixture
def make_results():
    return _results
