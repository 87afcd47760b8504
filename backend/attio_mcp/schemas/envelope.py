"""Envelope Schemas: Pydantic models for inbound requests and the uniform result.

Invariants:
    - Exactly one Envelope per OperationRequest
    - is_error=True implies error is populated and content carries a diagnostic text block
    - Serialized with by_alias=True, the wire field is `isError`

Design Decisions:
    - Transport-agnostic: the MCP adapter maps Envelope to protocol results,
      so router and handlers are testable without the SDK (ADR: responsibility separation)
    - data field carries structured payloads (resources, tools, read contents)
      for request kinds that need more than text
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from attio_mcp.core.domain_types import OperationKind


class OperationRequest(BaseModel):
    """Inbound request, already stripped of its transport framing."""
    kind: OperationKind
    name: str | None = None
    arguments: dict[str, Any] = Field(default_factory=dict)
    uri: str | None = None


class TextBlock(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ErrorInfo(BaseModel):
    code: int
    message: str
    details: Any = None


class Envelope(BaseModel):
    """Uniform success/error result returned for every request."""

    model_config = ConfigDict(populate_by_name=True)

    content: list[TextBlock]
    is_error: bool = Field(default=False, alias="isError")
    error: ErrorInfo | None = None
    data: Any = None

    @property
    def text(self) -> str:
        """All text blocks joined; convenient for logs and assertions."""
        return "\n".join(block.text for block in self.content)
