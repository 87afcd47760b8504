"""Argument Extraction: validate a raw argument bag against a tool's schema.

Invariants:
    - Runs before any network I/O: a bad call costs zero round-trips
    - None and blank strings count as absent, so they raise MissingArgumentError
    - Only the first validation error is reported (one field per message)
"""

from typing import Any, TypeVar

from pydantic import ValidationError

from attio_mcp.core.errors import ErrorContext, MissingArgumentError, ToolValidationError
from attio_mcp.schemas.tool_arguments import ToolArguments

ArgsT = TypeVar("ArgsT", bound=ToolArguments)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def extract_arguments(
    model: type[ArgsT], arguments: dict[str, Any] | None, tool_name: str | None = None,
) -> ArgsT:
    present = {
        key: value for key, value in (arguments or {}).items()
        if not _is_blank(value)
    }
    try:
        return model.model_validate(present)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "arguments"
        context = ErrorContext(tool_name=tool_name)
        if first["type"] == "missing":
            raise MissingArgumentError(field, context) from e
        raise ToolValidationError(
            f"Invalid argument '{field}': {first['msg']}", field, context,
        ) from e
