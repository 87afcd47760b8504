"""Company Handlers tests: listing, reads and search against a fake Attio client.

Tests cover:
    - Recent listing sends the fixed page size and sort, maps records to resources
    - Resource read returns the serialized record
    - Search with zero matches yields "Found 0 companies:\\n"
    - Remote failures become diagnostic envelopes with the real method
    - Reads are idempotent
"""

import json

import pytest

from attio_mcp.core.domain_types import ResourceRef
from attio_mcp.schemas.tool_arguments import CompanyUriArguments, SearchCompaniesArguments
from attio_mcp.services.handle_companies import COMPANIES_QUERY_PATH, CompanyHandlers
from tests.services.fake_attio import FakeAttioClient, company_record, remote_failure


@pytest.mark.asyncio
async def test_list_recent_companies_maps_resources():
    client = FakeAttioClient(default={"data": [
        company_record("c1", "Acme"),
        company_record("c2", None),
    ]})
    envelope = await CompanyHandlers(client).list_recent_companies()

    method, path, body = client.calls[0]
    assert (method, path) == ("POST", COMPANIES_QUERY_PATH)
    assert body["limit"] == 20
    assert body["sorts"] == [
        {"attribute": "last_interaction", "field": "interacted_at", "direction": "desc"},
    ]
    assert envelope.is_error is False
    assert envelope.data == [
        {"uri": "attio://companies/c1", "name": "Acme", "mimeType": "application/json"},
        {"uri": "attio://companies/c2", "name": "Unknown Company", "mimeType": "application/json"},
    ]
    assert "Found 2 companies" in envelope.text


@pytest.mark.asyncio
async def test_read_company_resource_returns_record():
    record = {"data": company_record("c1", "Acme")}
    client = FakeAttioClient(responses={("GET", "/objects/companies/records/c1"): record})
    envelope = await CompanyHandlers(client).read_company_resource(ResourceRef.company("c1"))

    assert envelope.is_error is False
    assert json.loads(envelope.text) == record
    assert envelope.data[0]["uri"] == "attio://companies/c1"


@pytest.mark.asyncio
async def test_search_with_no_matches():
    client = FakeAttioClient(default={"data": []})
    envelope = await CompanyHandlers(client).search_companies(
        SearchCompaniesArguments(query="Acme"),
    )
    assert envelope.is_error is False
    assert envelope.content[0].text == "Found 0 companies:\n"
    assert client.calls[0][2] == {"filter": {"name": {"$contains": "Acme"}}}


@pytest.mark.asyncio
async def test_search_lists_name_and_reference():
    client = FakeAttioClient(default={"data": [
        company_record("c1", "Acme"),
        {"values": {}},
    ]})
    envelope = await CompanyHandlers(client).search_companies(
        SearchCompaniesArguments(query="Ac"),
    )
    assert envelope.content[0].text == (
        "Found 2 companies:\n"
        "Acme: attio://companies/c1\n"
        "Unknown Company: attio://companies/Record ID not found"
    )


@pytest.mark.asyncio
async def test_search_failure_reports_post():
    client = FakeAttioClient(default=remote_failure(500))
    envelope = await CompanyHandlers(client).search_companies(
        SearchCompaniesArguments(query="Acme"),
    )
    assert envelope.is_error is True
    assert "- Method: POST" in envelope.text
    assert f"- URL: {COMPANIES_QUERY_PATH}" in envelope.text


@pytest.mark.asyncio
async def test_read_company_details_accepts_uri():
    client = FakeAttioClient(default={"data": {"id": {"record_id": "c1"}}})
    envelope = await CompanyHandlers(client).read_company_details(
        CompanyUriArguments(uri="attio://companies/c1"),
    )
    assert client.calls == [("GET", "/objects/companies/records/c1", None)]
    assert envelope.text.startswith("Company details for c1:\n")
    assert '"record_id": "c1"' in envelope.text


@pytest.mark.asyncio
async def test_read_company_details_is_idempotent():
    client = FakeAttioClient(default={"data": company_record("c1", "Acme")})
    handlers = CompanyHandlers(client)
    args = CompanyUriArguments(uri="attio://companies/c1")
    first = await handlers.read_company_details(args)
    second = await handlers.read_company_details(args)
    assert first.content == second.content


@pytest.mark.asyncio
async def test_read_company_details_not_found():
    client = FakeAttioClient(default=remote_failure(404, {"error": "not found"}))
    envelope = await CompanyHandlers(client).read_company_details(
        CompanyUriArguments(uri="c404"),
    )
    assert envelope.is_error is True
    assert envelope.error.code == 404
    assert envelope.error.details == "not found"
