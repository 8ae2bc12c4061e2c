"""Tool declarations for AI tool-invoking callers.

This module provides the ToolSchemaService class, which describes the
operations striker-server exposes as tools (name, description and a JSON
Schema for the input). The competition enum is generated from the bundle
configuration, so adding a badge also adds it to the declaration.
"""

from typing import Any

from striker_server.catalog import BundleConfig

ADD_BUNDLE_TOOL = "add_customized_jersey_to_cart"
SEARCH_JERSEYS_TOOL = "search_mock_jerseys"
PLAYER_LIST_TOOL = "get_player_list"


class ToolSchemaService:
    """Service that builds tool declarations."""

    def __init__(self, bundle_config: BundleConfig):
        self.bundle_config = bundle_config

    @property
    def tool_names(self) -> list[str]:
        return [ADD_BUNDLE_TOOL, SEARCH_JERSEYS_TOOL, PLAYER_LIST_TOOL]

    def get_tool_definitions(self) -> list[dict[str, Any]]:
        """Get the declarations of all tools.

        Returns:
            List of tool declarations with keys: name, description, input_schema
        """
        return [
            self._add_bundle_definition(),
            self._search_jerseys_definition(),
            self._player_list_definition(),
        ]

    def get_tool_definition(self, name: str = ADD_BUNDLE_TOOL) -> dict[str, Any]:
        """Get the declaration of a single tool.

        Args:
            name: Tool name (defaults to the add-to-cart tool)

        Returns:
            The tool declaration

        Raises:
            KeyError: If no tool has this name
        """
        for definition in self.get_tool_definitions():
            if definition["name"] == name:
                return definition
        raise KeyError(name)

    def _add_bundle_definition(self) -> dict[str, Any]:
        competitions = self.bundle_config.supported_competitions
        examples = ", ".join(f"'{code}'" for code in competitions)
        return {
            "name": ADD_BUNDLE_TOOL,
            "description": (
                "Adds a customized football jersey to the cart using the "
                "'Hat-Trick' pattern. This includes the jersey itself, a "
                "competition badge, and the name/number customization service."
            ),
            "input_schema": {
                "type": "object",
                "properties": {
                    "jerseyVariantId": {
                        "type": "string",
                        "description": "The Variant ID of the base jersey product",
                    },
                    "competition": {
                        "type": "string",
                        "enum": competitions,
                        "description": (
                            f"The competition badge to apply (e.g., {examples})"
                        ),
                    },
                    "customName": {
                        "type": "string",
                        "description": "The player name to print on the jersey",
                    },
                    "customNumber": {
                        "type": "number",
                        "description": "The player number to print on the jersey",
                    },
                },
                "required": [
                    "jerseyVariantId",
                    "competition",
                    "customName",
                    "customNumber",
                ],
            },
        }

    def _search_jerseys_definition(self) -> dict[str, Any]:
        return {
            "name": SEARCH_JERSEYS_TOOL,
            "description": (
                "Searches for football jerseys in the mock catalog. Use this to "
                "find available jerseys for customization."
            ),
            "input_schema": {
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": (
                            "Search term for the jersey (e.g., 'Real Madrid')"
                        ),
                    },
                },
            },
        }

    def _player_list_definition(self) -> dict[str, Any]:
        return {
            "name": PLAYER_LIST_TOOL,
            "description": (
                "Retrieves a list of famous players (Name and Number) to choose "
                "from for customization. Can filter by team."
            ),
            "input_schema": {
                "type": "object",
                "properties": {
                    "team": {
                        "type": "string",
                        "description": (
                            "Optional team name to filter players "
                            "(e.g., 'Real Madrid')"
                        ),
                    },
                },
            },
        }
