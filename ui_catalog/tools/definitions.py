"""
Catalog Tool Definitions
Read-only tools for browsing, fetching and checking component specifications.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


LIST_COMPONENTS = "list_components"
GET_COMPONENT = "get_component"
VALIDATE_COMPONENT_RESPONSE = "validate_component_response"
GET_DESIGN_SPECIFICATIONS = "get_design_specifications"


class ToolAnnotations(BaseModel):
    """Behavioural hints advertised alongside a tool."""
    title: str = Field(..., description="Title shown by the calling agent")
    read_only: bool = Field(default=True, description="Never mutates the catalog")
    destructive: bool = Field(default=False, description="May destroy data")
    idempotent: bool = Field(default=True, description="Same arguments, same answer")


class ToolDefinition(BaseModel):
    """One callable catalog tool as advertised to the agent."""
    id: str = Field(..., description="Wire identifier")
    name: str = Field(..., description="Display name")
    description: str = Field(..., description="Summary for the agent")
    parameters: Dict[str, Any] = Field(default_factory=dict, description="Argument name to hint")
    category: str = Field(default="catalog")
    annotations: Optional[ToolAnnotations] = None


CATALOG_TOOLS = (
    ToolDefinition(
        id=LIST_COMPONENTS,
        name="List Components",
        description="List available components from the catalog with optional filtering",
        parameters={
            "query": "string (optional) - filter by name or description",
            "tags": "string[] (optional) - keep components sharing any tag",
            "packageFilter": "string (optional) - filter by package name",
        },
        annotations=ToolAnnotations(title="List Components"),
    ),
    ToolDefinition(
        id=GET_COMPONENT,
        name="Get Component",
        description=(
            "Get detailed information about a specific component including props, "
            "variants, code, helper components and required dependencies"
        ),
        parameters={
            "name": "string - component name",
            "variant": "string (optional) - variant name, 'base' for the default",
        },
        annotations=ToolAnnotations(title="Get Component"),
    ),
    ToolDefinition(
        id=VALIDATE_COMPONENT_RESPONSE,
        name="Validate Component Response",
        description=(
            "Validates a component response to ensure all dependencies and helper "
            "components are properly included"
        ),
        parameters={"response": "object - component response to validate"},
        annotations=ToolAnnotations(title="Validate Component Response"),
    ),
    ToolDefinition(
        id=GET_DESIGN_SPECIFICATIONS,
        name="Get Design Specifications",
        description=(
            "Foundational rules and implementation guidelines for generating interfaces "
            "with the design system, including dependencies, helper components and "
            "code generation practices"
        ),
        parameters={"versions": "object (optional) - package versions, e.g. {'andes': '9.0.0'}"},
        category="guidelines",
        annotations=ToolAnnotations(title="Get Design System Implementation Specifications"),
    ),
)
