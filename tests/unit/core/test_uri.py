"""Unit tests for CMCI resource URI construction."""

from __future__ import annotations

import pytest

from cicsplex.cmci.core import (
    ValidationError,
    encode_component,
    enforce_parentheses,
    get_resource_uri,
    get_result_cache_uri,
    to_escaped_criteria,
)
from cicsplex.cmci.models import QueryParams, ResourceQuery


class TestResourceUriValidation:
    """Resource name must be present and non-blank."""

    def test_blank_name(self):
        with pytest.raises(ValidationError) as exc_info:
            get_resource_uri(ResourceQuery(name=""))
        assert str(exc_info.value) == (
            "Expect Error: Required parameter 'CICS Resource name' must not be blank"
        )

    def test_whitespace_name_is_blank(self):
        with pytest.raises(ValidationError, match="must not be blank"):
            get_resource_uri(ResourceQuery(name="   "))

    def test_missing_name(self):
        with pytest.raises(ValidationError) as exc_info:
            get_resource_uri(ResourceQuery())
        assert str(exc_info.value) == "Expect Error: CICS resource name is required"

    def test_explicit_none_name(self):
        with pytest.raises(ValidationError, match="CICS resource name is required"):
            get_resource_uri(ResourceQuery(name=None))


class TestResourceUriPath:
    """Path segment placement."""

    def test_name_only(self):
        assert get_resource_uri(ResourceQuery(name="resource1")) == "/CICSSystemManagement/resource1"

    def test_name_and_plex(self):
        query = ResourceQuery(name="resource1", cics_plex="cicsplex1")
        assert get_resource_uri(query) == "/CICSSystemManagement/resource1/cicsplex1"

    def test_region_without_plex(self):
        query = ResourceQuery(name="resource1", region_name="region1")
        assert get_resource_uri(query) == "/CICSSystemManagement/resource1/region1"

    def test_plex_and_region(self):
        query = ResourceQuery(name="resource1", cics_plex="cicsplex1", region_name="region1")
        assert get_resource_uri(query) == "/CICSSystemManagement/resource1/cicsplex1/region1"

    def test_empty_criteria_and_parameter_are_omitted(self):
        query = ResourceQuery(
            name="resource1",
            cics_plex="cicsplex1",
            region_name="region1",
            criteria="",
            parameter="",
        )
        assert get_resource_uri(query) == "/CICSSystemManagement/resource1/cicsplex1/region1"


class TestResourceUriQuery:
    """Query term encoding and order."""

    def test_criteria_is_encoded_and_wrapped(self):
        query = ResourceQuery(
            name="resource1", cics_plex="cicsplex1", region_name="region1", criteria="NAME=test"
        )
        assert get_resource_uri(query) == (
            "/CICSSystemManagement/resource1/cicsplex1/region1?CRITERIA=(NAME%3Dtest)"
        )

    def test_parameter_is_encoded(self):
        query = ResourceQuery(name="resource1", parameter="PARAM=TEST")
        assert get_resource_uri(query) == "/CICSSystemManagement/resource1?PARAMETER=PARAM%3DTEST"

    def test_full_query(self):
        query = ResourceQuery(
            name="resource1",
            cics_plex="plex1",
            region_name="reg1",
            criteria="PROGRAM=ABC",
            parameter="PARAM=TEST",
            query_params=QueryParams(nodiscard=True),
        )
        assert get_resource_uri(query) == (
            "/CICSSystemManagement/resource1/plex1/reg1"
            "?CRITERIA=(PROGRAM%3DABC)&PARAMETER=PARAM%3DTEST&NODISCARD"
        )

    def test_summonly_precedes_nodiscard(self):
        query = ResourceQuery(
            name="resource1", query_params=QueryParams(nodiscard=True, summonly=True)
        )
        assert get_resource_uri(query) == "/CICSSystemManagement/resource1?SUMMONLY&NODISCARD"

    def test_all_valueless_terms(self):
        query = ResourceQuery(
            name="resource1",
            criteria="PROGRAM=*",
            query_params=QueryParams(override_warning_count=True, nodiscard=True, summonly=True),
        )
        assert get_resource_uri(query) == (
            "/CICSSystemManagement/resource1"
            "?CRITERIA=(PROGRAM%3D*)&SUMMONLY&NODISCARD&OVERRIDEWARNINGCOUNT"
        )

    def test_pre_wrapped_criteria_not_rewrapped(self):
        query = ResourceQuery(name="resource1", criteria="(FILE=A* OR FILE=B*)")
        assert get_resource_uri(query) == (
            "/CICSSystemManagement/resource1?CRITERIA=(FILE%3DA*%20OR%20FILE%3DB*)"
        )

    def test_false_query_params_emit_nothing(self):
        query = ResourceQuery(name="resource1", query_params=QueryParams())
        assert get_resource_uri(query) == "/CICSSystemManagement/resource1"


class TestEnforceParentheses:
    """Outer parenthesis repair."""

    @pytest.mark.parametrize(
        ("criteria", "expected"),
        [
            ("NAME=A", "(NAME=A)"),
            ("(NAME=A", "(NAME=A)"),
            ("NAME=A)", "(NAME=A)"),
            ("(NAME=A)", "(NAME=A)"),
            ("(A=1) AND (B=2)", "(A=1) AND (B=2)"),
        ],
    )
    def test_repair(self, criteria, expected):
        assert enforce_parentheses(criteria) == expected

    @pytest.mark.parametrize("criteria", ["NAME=A", "(NAME=A", "NAME=A)", "(NAME=A)", "x"])
    def test_idempotent(self, criteria):
        once = enforce_parentheses(criteria)
        assert enforce_parentheses(once) == once


class TestEncodeComponent:
    def test_matches_uri_component_encoding(self):
        assert encode_component("A=B C&D/E") == "A%3DB%20C%26D%2FE"
        assert encode_component("(x*)!'") == "(x*)!'"


class TestResultCacheUri:
    def test_window_path(self):
        assert get_result_cache_uri("E0B0C1D2", 801, 800) == (
            "/CICSSystemManagement/CICSResultCache/E0B0C1D2/801/800"
        )

    def test_blank_token(self):
        with pytest.raises(ValidationError, match="must not be blank"):
            get_result_cache_uri("", 1, 800)

    def test_invalid_bounds(self):
        with pytest.raises(ValidationError, match="start must be >= 1"):
            get_result_cache_uri("TOKEN", 0, 800)
        with pytest.raises(ValidationError, match="increment must be >= 1"):
            get_result_cache_uri("TOKEN", 1, 0)


class TestEscapedCriteria:
    def test_single_value(self):
        assert to_escaped_criteria("PROG1", "PROGRAM") == "(PROGRAM=PROG1)"

    def test_multiple_values_with_spaces(self):
        assert to_escaped_criteria("PROG1, PROG2 ,P*", "PROGRAM") == (
            "(PROGRAM=PROG1 OR PROGRAM=PROG2 OR PROGRAM=P*)"
        )

    def test_empty_filter(self):
        with pytest.raises(ValidationError):
            to_escaped_criteria(" , ", "PROGRAM")
