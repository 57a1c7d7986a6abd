"""Shared fixtures for unit tests.

FakeTransport stands in for RESTTransport: it answers each request path with
XML produced by a handler and records every path it was asked for.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from cicsplex.cmci.core import cmci_xml_to_tree
from cicsplex.cmci.runtime.rest import raise_for_summary


class FakeTransport:
    def __init__(self, handler: Callable[[str], str]) -> None:
        self.handler = handler
        self.paths: list[str] = []
        self.headers: list[dict[str, str] | None] = []
        self.closed = False

    async def get(self, path: str, headers: dict[str, str] | None = None) -> dict:
        self.paths.append(path)
        self.headers.append(headers)
        tree = cmci_xml_to_tree(self.handler(path))
        raise_for_summary(tree, status_code=200)
        return tree

    async def close(self) -> None:
        self.closed = True


def _records_xml(resource: str, rows: list[dict[str, str]], **summary: str) -> str:
    """Render a CMCI response document holding ``rows`` of ``resource``."""
    attrs = {
        "api_response1": "1024",
        "api_response2": "0",
        "api_response1_alt": "OK",
        "recordcount": str(len(rows)),
        "displayed_recordcount": str(len(rows)),
        **summary,
    }
    summary_attrs = " ".join(f'{k}="{v}"' for k, v in attrs.items())
    body = "".join(
        f"<{resource.lower()} " + " ".join(f'{k}="{v}"' for k, v in row.items()) + "/>"
        for row in rows
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<response xmlns="http://www.ibm.com/xmlns/prod/CICS/smw2int" version="3.0">'
        f"<resultsummary {summary_attrs}/>"
        f"<records>{body}</records>"
        "</response>"
    )


def _summary_xml(**summary: str) -> str:
    """Render a SUMMONLY response carrying only a result summary."""
    attrs = {"api_response1": "1024", "api_response2": "0", "api_response1_alt": "OK", **summary}
    summary_attrs = " ".join(f'{k}="{v}"' for k, v in attrs.items())
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<response xmlns="http://www.ibm.com/xmlns/prod/CICS/smw2int" version="3.0">'
        f"<resultsummary {summary_attrs}/>"
        "</response>"
    )


@pytest.fixture
def fake_transport_factory() -> Callable[[Callable[[str], str]], FakeTransport]:
    return FakeTransport


@pytest.fixture
def records_xml() -> Callable[..., str]:
    return _records_xml


@pytest.fixture
def summary_xml() -> Callable[..., str]:
    return _summary_xml
