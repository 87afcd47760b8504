"""Note Handlers: read_company_notes, create_company_note, create_deal_note.

Invariants:
    - read_company_notes pages with limit/offset (defaults 10/0, applied by the schema)
    - Create confirmations name the parent id; create_deal_note also returns the
      new note's reference
    - RemoteServiceError is converted to a diagnostic envelope, never re-raised
"""

import json
from typing import Any

from attio_mcp.core.domain_types import NOTES, RESOURCE_SCHEME, company_id_from_uri
from attio_mcp.core.envelope import build_error, build_success
from attio_mcp.core.errors import RemoteServiceError
from attio_mcp.infrastructure.attio_client import AttioClient
from attio_mcp.schemas.envelope import Envelope
from attio_mcp.schemas.tool_arguments import (
    CreateCompanyNoteArguments, CreateDealNoteArguments, ReadCompanyNotesArguments,
)
from attio_mcp.services.handle_companies import records_of

NOTE_SEPARATOR = "----------\n"


def created_note_id(payload: Any) -> str | None:
    """Attio returns the note under "data"; older responses put "id" at top level."""
    if not isinstance(payload, dict):
        return None
    note = payload.get("data") if isinstance(payload.get("data"), dict) else payload
    note_id = note.get("id")
    if isinstance(note_id, dict):
        return note_id.get("note_id")
    return None


class NoteHandlers:
    """Notes scoped to a parent record (company or deal)."""

    def __init__(self, client: AttioClient):
        self.client = client

    async def read_company_notes(self, args: ReadCompanyNotesArguments) -> Envelope:
        company_id = company_id_from_uri(args.uri)
        path = (
            f"/notes?limit={args.limit}&offset={args.offset}"
            f"&parent_object=companies&parent_record_id={company_id}"
        )
        try:
            payload = await self.client.get(path)
        except RemoteServiceError as e:
            return build_error(e, path, "GET")

        notes = records_of(payload)
        joined = NOTE_SEPARATOR.join(
            json.dumps(note, ensure_ascii=False) for note in notes
        )
        return build_success(
            f"Found {len(notes)} notes for company {company_id}:\n{joined}",
        )

    async def create_company_note(self, args: CreateCompanyNoteArguments) -> Envelope:
        path = f"/objects/companies/records/{args.company_id}/notes"
        body = {"title": args.note_title, "text": args.note_text}
        try:
            await self.client.post(path, body)
        except RemoteServiceError as e:
            return build_error(e, path, "POST")
        return build_success(f"Note created successfully for company {args.company_id}")

    async def create_deal_note(self, args: CreateDealNoteArguments) -> Envelope:
        path = f"/objects/deals/records/{args.deal_id}/notes"
        body = {
            "data": {
                "values": {
                    "title": args.note_title,
                    "text": args.note_text,
                    "format": "plaintext",
                    "parent_object": "deals",
                    "parent_record_id": args.deal_id,
                },
            },
        }
        try:
            payload = await self.client.post(path, body)
        except RemoteServiceError as e:
            return build_error(e, path, "POST")
        note_uri = f"{RESOURCE_SCHEME}://{NOTES}/{created_note_id(payload)}"
        return build_success(
            f"Note created successfully for deal {args.deal_id}: {note_uri}",
        )
