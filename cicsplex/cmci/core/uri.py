"""Canonical CMCI resource URI construction.

Paths have the shape::

    /CICSSystemManagement/<name>[/<cicsPlex>[/<regionName>]]
        ?CRITERIA=(<enc>)&PARAMETER=<enc>&SUMMONLY&NODISCARD&OVERRIDEWARNINGCOUNT

Query terms are always emitted in that order, whichever subset is present,
so the output for a given query is deterministic.
"""

from __future__ import annotations

import re
from urllib.parse import quote

from ..models.query import ResourceQuery
from ..config import (
    CICS_RESULT_CACHE,
    CICS_SYSTEM_MANAGEMENT,
    CRITERIA,
    NODISCARD,
    OVERRIDE_WARNING_COUNT,
    PARAMETER,
    SEPARATOR,
    SUMMONLY,
)
from .exceptions import ValidationError

# Characters encodeURIComponent leaves alone beyond quote()'s defaults
_COMPONENT_SAFE = "!*'()"

_WHITESPACE = re.compile(r"\s+")


def encode_component(value: str) -> str:
    """Percent-encode a value as a URI component (``=`` becomes ``%3D``)."""
    return quote(value, safe=_COMPONENT_SAFE)


def enforce_parentheses(criteria: str) -> str:
    """Wrap criteria in parentheses, repairing a missing opening or closing one.

    Only the outermost characters are inspected; this is not a balancing pass.
    Applying it twice gives the same result as applying it once.
    """
    opens = criteria.startswith("(")
    closes = criteria.endswith(")")
    if not opens and not closes:
        return f"({criteria})"
    if opens and not closes:
        return f"{criteria})"
    if closes and not opens:
        return f"({criteria}"
    return criteria


def require_non_blank(value: str | None, label: str, missing_message: str) -> str:
    """Return value if it is a non-blank string.

    Raises:
        ValidationError: ``missing_message`` when value is None, a
            "must not be blank" message when it is empty or whitespace
    """
    if value is None:
        raise ValidationError(f"Expect Error: {missing_message}")
    if not value.strip():
        raise ValidationError(f"Expect Error: Required parameter '{label}' must not be blank")
    return value


def get_resource_uri(query: ResourceQuery) -> str:
    """Build the request path and query string for a resource query.

    Args:
        query: Resource name plus optional plex, region, criteria, parameter
            and valueless query terms

    Returns:
        Path such as ``/CICSSystemManagement/CICSProgram/PLEX1/REG1?CRITERIA=(PROGRAM%3DABC)``

    Raises:
        ValidationError: If the resource name is absent or blank
    """
    name = require_non_blank(query.name, "CICS Resource name", "CICS resource name is required")

    segments = [CICS_SYSTEM_MANAGEMENT, name]
    if query.cics_plex:
        segments.append(query.cics_plex)
    # region is accepted without a plex
    if query.region_name:
        segments.append(query.region_name)
    uri = SEPARATOR + SEPARATOR.join(segments)

    terms: list[str] = []
    if query.criteria:
        terms.append(f"{CRITERIA}={enforce_parentheses(encode_component(query.criteria))}")
    if query.parameter:
        terms.append(f"{PARAMETER}={encode_component(query.parameter)}")
    if query.query_params.summonly:
        terms.append(SUMMONLY)
    if query.query_params.nodiscard:
        terms.append(NODISCARD)
    if query.query_params.override_warning_count:
        terms.append(OVERRIDE_WARNING_COUNT)

    if terms:
        uri += "?" + "&".join(terms)
    return uri


def get_result_cache_uri(cache_token: str, start: int, increment: int) -> str:
    """Build the path for one window of a cached result set.

    Raises:
        ValidationError: If the token is blank or the window bounds are invalid
    """
    token = require_non_blank(cache_token, "Cache token", "Cache token is required")
    if start < 1:
        raise ValidationError(f"Expect Error: Window start must be >= 1, got {start}")
    if increment < 1:
        raise ValidationError(f"Expect Error: Window increment must be >= 1, got {increment}")
    return SEPARATOR + SEPARATOR.join(
        [CICS_SYSTEM_MANAGEMENT, CICS_RESULT_CACHE, encode_component(token), str(start), str(increment)]
    )


def to_escaped_criteria(filter_text: str, attribute: str) -> str:
    """Turn comma separated filter text into an OR'd criteria expression.

    ``to_escaped_criteria("PROG1, PROG2", "PROGRAM")`` gives
    ``(PROGRAM=PROG1 OR PROGRAM=PROG2)``. Whitespace inside the filter is dropped.

    Raises:
        ValidationError: If the filter holds no values
    """
    values = [v for v in _WHITESPACE.sub("", filter_text or "").split(",") if v]
    if not values:
        raise ValidationError("Expect Error: Filter must contain at least one value")
    return "(" + " OR ".join(f"{attribute}={value}" for value in values) + ")"
