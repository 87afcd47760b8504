"""Deal Handlers: get_deal_details, query_deals.

Invariants:
    - query_deals forwards the filter object untouched; Attio rejects malformed ones
    - limit defaults to 100 when absent or falsy (applied by the schema)
"""

from attio_mcp.core.envelope import build_error, build_success, to_json
from attio_mcp.core.errors import RemoteServiceError
from attio_mcp.infrastructure.attio_client import AttioClient
from attio_mcp.schemas.envelope import Envelope
from attio_mcp.schemas.tool_arguments import DealIdArguments, QueryDealsArguments

DEALS_QUERY_PATH = "/objects/deals/records/query"


class DealHandlers:
    """Deal record reads and filtered queries."""

    def __init__(self, client: AttioClient):
        self.client = client

    async def get_deal_details(self, args: DealIdArguments) -> Envelope:
        path = f"/objects/deals/records/{args.deal_id}"
        try:
            payload = await self.client.get(path)
        except RemoteServiceError as e:
            return build_error(e, path, "GET")
        return build_success(f"Deal details for {args.deal_id}:\n{to_json(payload)}")

    async def query_deals(self, args: QueryDealsArguments) -> Envelope:
        body = {"filter": args.filter, "limit": args.limit}
        try:
            payload = await self.client.post(DEALS_QUERY_PATH, body)
        except RemoteServiceError as e:
            return build_error(e, DEALS_QUERY_PATH, "POST")
        return build_success(f"Deals found:\n{to_json(payload)}")
