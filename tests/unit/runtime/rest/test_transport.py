"""Precise unit tests for RESTTransport.

Tests focus on HTTPClient delegation, XML decoding and summary checks.
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import aiohttp
import pytest

from cicsplex.cmci.core import NotFoundError, RemoteError, ResourceLimitExceeded
from cicsplex.cmci.models import CMCIConnection
from cicsplex.cmci.runtime.rest import RESTTransport, raise_for_summary


class TestRESTTransport:
    """Test RESTTransport wrapper."""

    def test_from_connection(self):
        connection = CMCIConnection(
            host="host",
            port=1490,
            protocol="http",
            user="ibmuser",
            password="pw",
            reject_unauthorized=False,
            timeout=5.0,
        )
        transport = RESTTransport.from_connection(connection)

        assert transport._http.base_url == "http://host:1490"
        assert transport._http.auth == aiohttp.BasicAuth("ibmuser", "pw")
        assert transport._http.verify_ssl is False
        assert transport._http.timeout.total == 5.0

    def test_from_connection_without_user(self):
        transport = RESTTransport.from_connection(CMCIConnection(host="host", port=443))
        assert transport._http.auth is None

    @pytest.mark.asyncio
    async def test_get_returns_tree(self):
        transport = RESTTransport(base_url="https://host:1490")
        transport._http.request = AsyncMock(
            return_value=(
                200,
                '<response><resultsummary api_response1="1024" recordcount="1"/>'
                '<records><cicsprogram program="P1"/></records></response>',
            )
        )

        tree = await transport.get("/CICSSystemManagement/CICSProgram")

        assert tree["response"]["records"]["cicsprogram"]["_attributes"] == {"program": "P1"}
        transport._http.request.assert_called_once_with(
            "/CICSSystemManagement/CICSProgram", headers=None
        )

    @pytest.mark.asyncio
    async def test_failed_summary_keeps_http_status(self):
        transport = RESTTransport(base_url="https://host:1490")
        transport._http.request = AsyncMock(
            return_value=(
                200,
                '<response><resultsummary api_response1="1038" api_response1_alt="TABLEERROR"/>'
                '<errors><feedback action="GET" errorcode="42"/></errors></response>',
            )
        )

        with pytest.raises(RemoteError) as exc_info:
            await transport.get("/CICSSystemManagement/CICSProgram")

        assert exc_info.value.status_code == 200
        assert exc_info.value.api_response1 == 1038
        assert str(exc_info.value) == (
            "CMCI request failed with TABLEERROR: action=GET errorcode=42"
        )

    @pytest.mark.asyncio
    async def test_close_delegates_to_http_client(self):
        transport = RESTTransport(base_url="https://host:1490")
        transport._http.close = AsyncMock()

        await transport.close()

        transport._http.close.assert_called_once()


class TestRaiseForSummary:
    def test_ok_summary_passes(self):
        raise_for_summary({"response": {"resultsummary": {"_attributes": {"api_response1": "1024"}}}})

    def test_missing_summary_passes(self):
        raise_for_summary({"response": {"records": {}}})

    def test_nodata_raises_not_found(self):
        tree = {
            "response": {
                "resultsummary": {
                    "_attributes": {"api_response1": "1027", "api_response1_alt": "NODATA"}
                }
            }
        }
        with pytest.raises(NotFoundError, match="NODATA"):
            raise_for_summary(tree)

    def test_other_code_raises_remote_error(self):
        tree = {"response": {"resultsummary": {"_attributes": {"api_response1": "1038"}}}}
        with pytest.raises(RemoteError) as exc_info:
            raise_for_summary(tree)
        assert type(exc_info.value) is RemoteError
        assert exc_info.value.api_response1 == 1038

    def test_status_code_passed_through(self):
        tree = {"response": {"resultsummary": {"_attributes": {"api_response1": "1027"}}}}
        with pytest.raises(NotFoundError) as exc_info:
            raise_for_summary(tree, status_code=200)
        assert exc_info.value.status_code == 200

    def test_resource_limit_feedback_classified(self):
        tree = {
            "response": {
                "resultsummary": {
                    "_attributes": {"api_response1": "1041", "api_response1_alt": "NOTPERMIT"}
                },
                "errors": {
                    "feedback": [
                        {"_text": "The request exceeded a resource limit"},
                        {"_attributes": {"errorcode": "7"}},
                    ]
                },
            }
        }
        with pytest.raises(ResourceLimitExceeded) as exc_info:
            raise_for_summary(tree, status_code=200)
        assert exc_info.value.api_response1 == 1041
        assert "errorcode=7" in str(exc_info.value)
