"""Workspace Member Handlers: list_workspace_members, get_workspace_member."""

from attio_mcp.core.envelope import build_error, build_success, to_json
from attio_mcp.core.errors import RemoteServiceError
from attio_mcp.infrastructure.attio_client import AttioClient
from attio_mcp.schemas.envelope import Envelope
from attio_mcp.schemas.tool_arguments import NoArguments, WorkspaceMemberArguments

WORKSPACE_MEMBERS_PATH = "/workspace_members"


class MemberHandlers:

    def __init__(self, client: AttioClient):
        self.client = client

    async def list_workspace_members(self, args: NoArguments) -> Envelope:
        try:
            payload = await self.client.get(WORKSPACE_MEMBERS_PATH)
        except RemoteServiceError as e:
            return build_error(e, WORKSPACE_MEMBERS_PATH, "GET")
        return build_success(f"Workspace members:\n{to_json(payload)}")

    async def get_workspace_member(self, args: WorkspaceMemberArguments) -> Envelope:
        path = f"{WORKSPACE_MEMBERS_PATH}/{args.workspace_member_id}"
        try:
            payload = await self.client.get(path)
        except RemoteServiceError as e:
            return build_error(e, path, "GET")
        return build_success(f"Workspace member details:\n{to_json(payload)}")
