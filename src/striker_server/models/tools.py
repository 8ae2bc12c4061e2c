"""Pydantic models for tool discovery and tool calls."""

from typing import Any

from pydantic import BaseModel, Field


class ToolDefinition(BaseModel):
    """Declaration of a tool for an AI tool-invoking caller."""

    name: str = Field(..., description="Tool name")
    description: str = Field(..., description="What the tool does")
    input_schema: dict[str, Any] = Field(
        ..., description="JSON Schema of the tool arguments"
    )


class ToolListResponse(BaseModel):
    """Response model for GET /api/v1/tools."""

    tools: list[ToolDefinition] = Field(default_factory=list)


class ToolCallRequest(BaseModel):
    """Request body for POST /api/v1/tools/{name}."""

    arguments: dict[str, Any] = Field(
        default_factory=dict,
        description="Tool arguments",
    )
