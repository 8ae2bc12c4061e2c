"""Tool execution layer.

This module provides the ToolExecutionService class, which dispatches a
tool call to the catalog or bundle service and wraps the result for a
tool-invoking caller:

- Success: {"content": [{"type": "text", "text": "<JSON payload>"}]}
- Validation error: {"error": {"type": "validation_error", "data": "..."}}

Validation errors are not wrapped in the content envelope, so callers check
for the "error" key first. MissingFieldError propagates to the caller.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

from striker_server.services.bundles import (
    BundleAssemblyService,
    BundleRequest,
    BundleValidationError,
)
from striker_server.services.catalog import CatalogQueryService
from striker_server.tools.schemas import (
    ADD_BUNDLE_TOOL,
    PLAYER_LIST_TOOL,
    SEARCH_JERSEYS_TOOL,
)

logger = logging.getLogger(__name__)


class ToolNotFoundError(KeyError):
    """Raised when a tool call names an unknown tool."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Tool '{self.name}' not found"


def text_content(payload: Any) -> dict[str, Any]:
    """Wrap a payload in the text content envelope.

    The payload is serialized as compact JSON.

    Args:
        payload: JSON-serializable payload

    Returns:
        Envelope with a single text content item
    """
    text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return {"content": [{"type": "text", "text": text}]}


class ToolExecutionService:
    """Service that executes tool calls."""

    def __init__(
        self,
        catalog_service: CatalogQueryService,
        bundle_service: BundleAssemblyService,
    ):
        """Initialize the ToolExecutionService.

        Args:
            catalog_service: Service answering jersey and player queries
            bundle_service: Service composing Hat-Trick bundles
        """
        self.catalog_service = catalog_service
        self.bundle_service = bundle_service

    def execute(
        self, name: str, arguments: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        """Execute a tool call.

        Args:
            name: Tool name
            arguments: Tool arguments (default: none)

        Returns:
            The content envelope, or an error dictionary for validation errors

        Raises:
            ToolNotFoundError: If no tool has this name
            MissingFieldError: If a required add-to-cart argument is absent
        """
        arguments = arguments or {}
        logger.debug(f"Executing tool '{name}' with arguments: {dict(arguments)}")

        if name == ADD_BUNDLE_TOOL:
            return self.add_customized_jersey_to_cart(arguments)
        if name == SEARCH_JERSEYS_TOOL:
            return self.search_jerseys(arguments)
        if name == PLAYER_LIST_TOOL:
            return self.get_player_list(arguments)

        logger.warning(f"Unknown tool requested: {name}")
        raise ToolNotFoundError(name)

    def add_customized_jersey_to_cart(
        self, arguments: Mapping[str, Any]
    ) -> dict[str, Any]:
        result = self.bundle_service.compose_bundle(
            BundleRequest.from_arguments(arguments)
        )
        if isinstance(result, BundleValidationError):
            return result.to_dict()
        return text_content(result.to_payload())

    def search_jerseys(self, arguments: Mapping[str, Any]) -> dict[str, Any]:
        products = self.catalog_service.search_jerseys(arguments.get("query"))
        return text_content({"products": products})

    def get_player_list(self, arguments: Mapping[str, Any]) -> dict[str, Any]:
        players = self.catalog_service.list_players(arguments.get("team"))
        return text_content({"players": players})
