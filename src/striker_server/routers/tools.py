"""Tools router for tool discovery and tool calls.

This module provides REST API endpoints for:
- Listing the declarations of all tools
- Getting a single tool declaration
- Calling a tool by name

Tool call results are returned exactly as a tool-invoking caller expects
them: a text content envelope on success, or an unwrapped error dictionary
for validation errors.
"""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, status

from striker_server.dependencies import (
    get_tool_execution_service,
    get_tool_schema_service,
)
from striker_server.models.tools import (
    ToolCallRequest,
    ToolDefinition,
    ToolListResponse,
)
from striker_server.services import MissingFieldError
from striker_server.tools import (
    ToolExecutionService,
    ToolNotFoundError,
    ToolSchemaService,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/tools", tags=["tools"])


@router.get(
    "",
    response_model=ToolListResponse,
    summary="List all tools",
)
async def list_tools(
    service: Annotated[ToolSchemaService, Depends(get_tool_schema_service)],
) -> ToolListResponse:
    """List the declarations of all tools.

    Args:
        service: Injected ToolSchemaService

    Returns:
        Tool declarations with name, description and input schema
    """
    return ToolListResponse.model_validate({"tools": service.get_tool_definitions()})


@router.get(
    "/{name}",
    response_model=ToolDefinition,
    summary="Get a tool declaration",
)
async def get_tool(
    name: str,
    service: Annotated[ToolSchemaService, Depends(get_tool_schema_service)],
) -> ToolDefinition:
    """Get the declaration of a single tool.

    Args:
        name: Tool name (e.g., 'get_player_list')
        service: Injected ToolSchemaService

    Returns:
        The tool declaration

    Raises:
        HTTPException: 404 if no tool has this name
    """
    try:
        return ToolDefinition.model_validate(service.get_tool_definition(name))
    except KeyError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Tool '{name}' not found",
        )


@router.post(
    "/{name}",
    summary="Call a tool",
)
async def call_tool(
    name: str,
    service: Annotated[ToolExecutionService, Depends(get_tool_execution_service)],
    request: ToolCallRequest | None = None,
) -> dict[str, Any]:
    """Execute a tool call.

    Args:
        name: Tool name
        service: Injected ToolExecutionService
        request: Tool arguments (optional for tools without required arguments)

    Returns:
        The text content envelope, or an error dictionary for validation errors

    Raises:
        HTTPException: 404 if no tool has this name
        HTTPException: 400 if a required argument is missing
        HTTPException: 500 if the tool fails unexpectedly
    """
    arguments = request.arguments if request is not None else {}
    try:
        return service.execute(name, arguments)
    except ToolNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except MissingFieldError as e:
        logger.warning(f"Tool '{name}' called without {e.field}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    except Exception as e:
        logger.error(f"Failed to execute tool '{name}': {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to execute tool: {str(e)}",
        )
