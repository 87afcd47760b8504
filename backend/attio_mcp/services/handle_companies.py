"""Company Handlers: list_recent_companies, read_company_resource, search_companies, read_company_details.

Invariants:
    - Exactly one Attio call per method, issued after arguments are validated
    - RemoteServiceError is converted to a diagnostic envelope, never re-raised
    - List results always report their count; unnamed companies show "Unknown Company"

Design Decisions:
    - Resource kinds (list/read) live here with the company tools: both hit the
      same endpoint family (ADR: locality over protocol grouping)
    - No caching: reads are idempotent because nothing is retained between calls
"""

from typing import Any

from attio_mcp.core.domain_types import ResourceRef, company_id_from_uri
from attio_mcp.core.envelope import build_error, build_success, to_json
from attio_mcp.core.errors import RemoteServiceError
from attio_mcp.infrastructure.attio_client import AttioClient
from attio_mcp.schemas.envelope import Envelope
from attio_mcp.schemas.tool_arguments import (
    CompanyUriArguments, SearchCompaniesArguments,
)

COMPANIES_QUERY_PATH = "/objects/companies/records/query"
RECENT_COMPANIES_LIMIT = 20
JSON_MIME_TYPE = "application/json"


def company_name(record: dict) -> str:
    try:
        return record["values"]["name"][0]["value"] or "Unknown Company"
    except (KeyError, IndexError, TypeError):
        return "Unknown Company"


def company_record_id(record: dict) -> str | None:
    record_id = record.get("id")
    if isinstance(record_id, dict):
        return record_id.get("record_id")
    return None


def records_of(payload: Any) -> list[dict]:
    """Attio wraps list results in {"data": [...]}."""
    if isinstance(payload, dict):
        return payload.get("data") or []
    return []


class CompanyHandlers:
    """Company record handlers: recent listing, single read, name search."""

    def __init__(self, client: AttioClient):
        self.client = client

    async def list_recent_companies(self) -> Envelope:
        """Resource listing: 20 most recently interacted-with companies."""
        body = {
            "limit": RECENT_COMPANIES_LIMIT,
            "sorts": [
                {"attribute": "last_interaction", "field": "interacted_at", "direction": "desc"},
            ],
        }
        try:
            payload = await self.client.post(COMPANIES_QUERY_PATH, body)
        except RemoteServiceError as e:
            return build_error(e, COMPANIES_QUERY_PATH, "POST")

        companies = records_of(payload)
        resources = [
            {
                "uri": ResourceRef.company(company_record_id(c) or "").uri,
                "name": company_name(c),
                "mimeType": JSON_MIME_TYPE,
            }
            for c in companies
        ]
        return build_success(
            f"Found {len(companies)} companies that you have interacted with most recently",
            data=resources,
        )

    async def read_company_resource(self, ref: ResourceRef) -> Envelope:
        """Resource read: full company record as JSON."""
        path = f"/objects/companies/records/{ref.record_id}"
        try:
            payload = await self.client.get(path)
        except RemoteServiceError as e:
            return build_error(e, path, "GET")

        text = to_json(payload)
        return build_success(
            text, data=[{"uri": ref.uri, "mimeType": JSON_MIME_TYPE, "text": text}],
        )

    async def search_companies(self, args: SearchCompaniesArguments) -> Envelope:
        body = {"filter": {"name": {"$contains": args.query}}}
        try:
            payload = await self.client.post(COMPANIES_QUERY_PATH, body)
        except RemoteServiceError as e:
            return build_error(e, COMPANIES_QUERY_PATH, "POST")

        results = records_of(payload)
        lines = "\n".join(
            f"{company_name(c)}: attio://companies/"
            f"{company_record_id(c) or 'Record ID not found'}"
            for c in results
        )
        return build_success(f"Found {len(results)} companies:\n{lines}")

    async def read_company_details(self, args: CompanyUriArguments) -> Envelope:
        company_id = company_id_from_uri(args.uri)
        path = f"/objects/companies/records/{company_id}"
        try:
            payload = await self.client.get(path)
        except RemoteServiceError as e:
            return build_error(e, path, "GET")
        return build_success(f"Company details for {company_id}:\n{to_json(payload)}")
