"""Pieces shared by every CMCI endpoint."""

from __future__ import annotations

from typing import Any

ACCEPT_XML = "application/xml"


def xml_headers(params: dict[str, Any]) -> dict[str, str]:
    """CMCI answers in XML; ask for it explicitly."""
    return {"Accept": ACCEPT_XML}
