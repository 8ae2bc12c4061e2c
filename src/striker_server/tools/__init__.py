"""Tool declaration and execution layer.

This package describes the striker-server operations as tools for an
AI tool-invoking caller and executes tool calls against the services.
"""

from striker_server.tools.execution import (
    ToolExecutionService,
    ToolNotFoundError,
    text_content,
)
from striker_server.tools.schemas import (
    ADD_BUNDLE_TOOL,
    PLAYER_LIST_TOOL,
    SEARCH_JERSEYS_TOOL,
    ToolSchemaService,
)

__all__ = [
    "ADD_BUNDLE_TOOL",
    "PLAYER_LIST_TOOL",
    "SEARCH_JERSEYS_TOOL",
    "ToolExecutionService",
    "ToolNotFoundError",
    "ToolSchemaService",
    "text_content",
]
