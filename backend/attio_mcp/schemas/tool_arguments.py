"""Tool Argument Schemas: one Pydantic model per tool argument bag.

Invariants:
    - Field aliases match the wire names declared in define_*_tools.py
    - Strings are presence-checked only, no format validation
    - A company uri must resolve to a non-empty record id once its prefix is stripped
    - limit/offset fall back to their default when absent or falsy (0 counts as absent)
    - Unknown keys are ignored

Design Decisions:
    - Pydantic over hand-written checks: one declaration gives presence + type
      checks, and services/extract_arguments.py maps errors to domain errors
    - filter kept as a raw dict: Attio validates it, its rejection is the error path
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from attio_mcp.core.domain_types import company_id_from_uri

DEFAULT_NOTES_LIMIT = 10
DEFAULT_NOTES_OFFSET = 0
DEFAULT_QUERY_LIMIT = 100


class ToolArguments(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class NoArguments(ToolArguments):
    pass


class SearchCompaniesArguments(ToolArguments):
    query: str


class CompanyUriArguments(ToolArguments):
    uri: str

    @field_validator("uri")
    @classmethod
    def require_record_id(cls, v: str) -> str:
        # "missing" so extract_arguments reports MissingArgumentError
        if not company_id_from_uri(v).strip():
            raise PydanticCustomError("missing", "Field required")
        return v


class ReadCompanyNotesArguments(CompanyUriArguments):
    limit: int = DEFAULT_NOTES_LIMIT
    offset: int = DEFAULT_NOTES_OFFSET

    @field_validator("limit", mode="before")
    @classmethod
    def default_limit(cls, v: Any) -> Any:
        return v or DEFAULT_NOTES_LIMIT

    @field_validator("offset", mode="before")
    @classmethod
    def default_offset(cls, v: Any) -> Any:
        return v or DEFAULT_NOTES_OFFSET


class CreateCompanyNoteArguments(ToolArguments):
    company_id: str = Field(alias="companyId")
    note_title: str = Field(alias="noteTitle")
    note_text: str = Field(alias="noteText")


class DealIdArguments(ToolArguments):
    deal_id: str = Field(alias="dealId")


class CreateDealNoteArguments(ToolArguments):
    deal_id: str = Field(alias="dealId")
    note_title: str = Field(alias="noteTitle")
    note_text: str = Field(alias="noteText")


class WorkspaceMemberArguments(ToolArguments):
    workspace_member_id: str = Field(alias="workspaceMemberId")


class QueryDealsArguments(ToolArguments):
    filter: dict[str, Any]
    limit: int = DEFAULT_QUERY_LIMIT

    @field_validator("limit", mode="before")
    @classmethod
    def default_limit(cls, v: Any) -> Any:
        return v or DEFAULT_QUERY_LIMIT
