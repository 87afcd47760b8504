"""Argument Extraction tests: presence, type checks and numeric defaults.

Tests cover:
    - Missing and empty strings raise MissingArgumentError naming the wire field
    - Wrong types raise ToolValidationError
    - limit/offset default when absent, None or 0
"""

import pytest

from attio_mcp.core.errors import MissingArgumentError, ToolValidationError
from attio_mcp.schemas.tool_arguments import (
    CreateCompanyNoteArguments,
    QueryDealsArguments,
    ReadCompanyNotesArguments,
    SearchCompaniesArguments,
)
from attio_mcp.services.extract_arguments import extract_arguments


def test_extracts_aliased_fields():
    args = extract_arguments(
        CreateCompanyNoteArguments,
        {"companyId": "c1", "noteTitle": "T", "noteText": "Body"},
    )
    assert args.company_id == "c1"
    assert args.note_title == "T"
    assert args.note_text == "Body"


def test_missing_field_reports_wire_name():
    with pytest.raises(MissingArgumentError) as exc_info:
        extract_arguments(
            CreateCompanyNoteArguments, {"companyId": "c1", "noteTitle": "T"},
        )
    assert exc_info.value.field == "noteText"


@pytest.mark.parametrize("arguments", [
    None, {}, {"query": ""}, {"query": None}, {"query": "   "},
])
def test_absent_or_empty_query_is_missing(arguments):
    with pytest.raises(MissingArgumentError):
        extract_arguments(SearchCompaniesArguments, arguments, "search-companies")


def test_wrong_type_is_validation_error():
    with pytest.raises(ToolValidationError) as exc_info:
        extract_arguments(QueryDealsArguments, {"filter": "not-an-object"})
    assert exc_info.value.field == "filter"


def test_unknown_keys_ignored():
    args = extract_arguments(SearchCompaniesArguments, {"query": "Acme", "extra": 1})
    assert args.query == "Acme"


@pytest.mark.parametrize("arguments", [
    {"uri": "attio://companies/c1"},
    {"uri": "attio://companies/c1", "limit": 0, "offset": 0},
    {"uri": "attio://companies/c1", "limit": None, "offset": None},
    {"uri": "attio://companies/c1", "limit": 10, "offset": 0},
])
def test_notes_paging_defaults(arguments):
    args = extract_arguments(ReadCompanyNotesArguments, arguments)
    assert (args.limit, args.offset) == (10, 0)


def test_query_deals_limit_defaults_to_100():
    args = extract_arguments(QueryDealsArguments, {"filter": {}, "limit": 0})
    assert args.limit == 100
