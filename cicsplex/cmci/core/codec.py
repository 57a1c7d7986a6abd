"""CMCI XML codec.

CMCI answers with XML. Responses are parsed with xmltodict and re-shaped into
a compact tree: every element becomes a mapping whose XML attributes sit under
``_attributes`` and whose text sits under ``_text``. Repeated child elements
become lists; a child that occurs once stays a bare mapping, which is why
record extraction always goes through the normalizer.
"""

from __future__ import annotations

from typing import Any
from xml.parsers.expat import ExpatError

import xmltodict

from .exceptions import RemoteError

ATTRIBUTES_KEY = "_attributes"
TEXT_KEY = "_text"


def _compact(node: Any) -> Any:
    if isinstance(node, list):
        return [_compact(item) for item in node]
    if node is None:
        return {}
    if isinstance(node, str):
        return {TEXT_KEY: node}

    out: dict[str, Any] = {}
    attributes: dict[str, str] = {}
    for key, value in node.items():
        if key.startswith("@"):
            attributes[key[1:]] = "" if value is None else str(value)
        elif key == "#text":
            out[TEXT_KEY] = value
        else:
            out[key] = _compact(value)
    if attributes:
        out[ATTRIBUTES_KEY] = attributes
    return out


def cmci_xml_to_tree(text: str | bytes) -> dict[str, Any]:
    """Parse a CMCI XML document into the compact attribute-bearing tree.

    Args:
        text: Raw response body

    Returns:
        Mapping keyed by the root element name (normally ``response``)

    Raises:
        RemoteError: If the body is not well-formed XML
    """
    try:
        parsed = xmltodict.parse(text)
    except ExpatError as e:
        raise RemoteError(f"Malformed CMCI response: {e}") from e
    return _compact(parsed)
