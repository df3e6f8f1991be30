"""Tool routing and dispatch for MCP server."""

from __future__ import annotations

from typing import Any, Dict

from mcp.shared.exceptions import McpError
from mcp.types import METHOD_NOT_FOUND, ErrorData
from pydantic import ValidationError as PydanticValidationError

from slidedeck.exceptions import ResourceNotFoundError, SlideDeckError

from slidedeck.mcp_server.components import ServerComponents
from slidedeck.mcp_server.responses import _error, _handle_validation_error
from slidedeck.mcp_server.tool_types import ToolHandler, ToolResponse

from slidedeck.mcp_server.tools.elements import (
    _tool_add_chart,
    _tool_add_shape,
    _tool_add_table,
    _tool_add_text,
)
from slidedeck.mcp_server.tools.presentations import (
    _tool_add_slide,
    _tool_create_presentation,
    _tool_get_file_url,
    _tool_save_presentation,
)


HANDLERS: Dict[str, ToolHandler] = {
    "create-presentation": _tool_create_presentation,
    "add-slide": _tool_add_slide,
    "add-text": _tool_add_text,
    "add-table": _tool_add_table,
    "add-shape": _tool_add_shape,
    "add-chart": _tool_add_chart,
    "get-file-url": _tool_get_file_url,
    "save-presentation": _tool_save_presentation,
}


async def dispatch_tool_call(
    *,
    name: str,
    arguments: Dict[str, Any],
    components: ServerComponents,
) -> ToolResponse:
    """Run one tool call and return its result envelope.

    Raises:
        McpError: INVALID_PARAMS when the arguments fail validation,
            METHOD_NOT_FOUND when ``name`` is not a known tool
    """
    logger = components.logger
    logger.info("Tool invocation started", tool=name, args_keys=list(arguments.keys()))

    handler = HANDLERS.get(name)
    if handler is None:
        logger.error("Unknown tool requested", tool=name, available_tools=list(HANDLERS.keys()))
        raise McpError(
            ErrorData(
                code=METHOD_NOT_FOUND,
                message=f"Tool '{name}' does not exist. Available tools: {', '.join(HANDLERS)}",
            )
        )

    try:
        result = await handler(arguments, components)
    except PydanticValidationError as exc:
        logger.error(
            "Validation error",
            tool=name,
            error_count=len(exc.errors()),
            errors=[{"loc": e["loc"], "msg": e["msg"], "type": e["type"]} for e in exc.errors()],
        )
        raise _handle_validation_error(name, exc) from exc
    except ResourceNotFoundError as exc:
        logger.warning("Resource not found", tool=name, error_code=exc.code, error_message=str(exc))
        return _error(exc.message)
    except SlideDeckError as exc:
        logger.error(
            "Domain error",
            tool=name,
            error_code=exc.code,
            error_type=type(exc).__name__,
            error_message=str(exc),
        )
        return _error(exc.message)
    except Exception as exc:  # pragma: no cover - defensive guard
        logger.error(
            "Unexpected tool failure",
            tool=name,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return _error(f"Unexpected error: {exc}")

    if result.isError:
        logger.info("Tool completed with error", tool=name, **components.registry.stats())
    else:
        logger.info("Tool completed successfully", tool=name, **components.registry.stats())
    return result
