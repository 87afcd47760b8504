"""Domain Types: request kinds, lifecycle phases and resource references.

Invariants:
    - All valid request kinds and lifecycle phases encoded as Enums, no raw string matching
    - ResourceRef record ids are passed through unescaped
    - Only attio://companies/<id> is resolvable by resource-read

Design Decisions:
    - str Enums: serialize to JSON without custom encoders (log extras, envelopes)
    - ResourceRef as frozen dataclass: parsing lives next to the type it produces
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType

from attio_mcp.core.errors import InvalidResourceUriError


RecordId = NewType("RecordId", str)

RESOURCE_SCHEME = "attio"
COMPANIES = "companies"
NOTES = "notes"
COMPANY_URI_PREFIX = f"{RESOURCE_SCHEME}://{COMPANIES}/"


class OperationKind(str, Enum):
    """The four inbound request kinds."""
    RESOURCE_LIST = "resource_list"
    RESOURCE_READ = "resource_read"
    TOOL_LIST = "tool_list"
    TOOL_CALL = "tool_call"


class LifecyclePhase(str, Enum):
    """Process lifecycle. Single shot, forward only."""
    UNINITIALIZED = "uninitialized"
    CREDENTIAL_CHECKED = "credential_checked"
    TRANSPORT_CONNECTED = "transport_connected"
    SERVING = "serving"


@dataclass(frozen=True)
class ResourceRef:
    """attio://<collection>/<record-id>"""
    collection: str
    record_id: RecordId

    @property
    def uri(self) -> str:
        return f"{RESOURCE_SCHEME}://{self.collection}/{self.record_id}"

    @classmethod
    def company(cls, record_id: str) -> "ResourceRef":
        return cls(COMPANIES, RecordId(record_id))

    @classmethod
    def parse_company(cls, uri: str) -> "ResourceRef":
        """Strict parse used by resource-read. Raises InvalidResourceUriError."""
        if not uri.startswith(COMPANY_URI_PREFIX):
            raise InvalidResourceUriError(uri)
        record_id = uri[len(COMPANY_URI_PREFIX):]
        if not record_id:
            raise InvalidResourceUriError(uri)
        return cls.company(record_id)


def company_id_from_uri(uri: str) -> RecordId:
    """Lenient form used by tools: strips the company prefix when present."""
    if uri.startswith(COMPANY_URI_PREFIX):
        return RecordId(uri[len(COMPANY_URI_PREFIX):])
    return RecordId(uri)
