"""Catalog tools - definitions, registry and operations."""

from .definitions import (
    CATALOG_TOOLS,
    GET_COMPONENT,
    GET_DESIGN_SPECIFICATIONS,
    LIST_COMPONENTS,
    VALIDATE_COMPONENT_RESPONSE,
    ToolAnnotations,
    ToolDefinition,
)
from .registry import ToolRegistry
from .guidelines import render_guidelines
from .operations import CatalogTools, RECOMMENDATIONS, collapse_variants, describe_error

__all__ = [
    "CATALOG_TOOLS",
    "GET_COMPONENT",
    "GET_DESIGN_SPECIFICATIONS",
    "LIST_COMPONENTS",
    "VALIDATE_COMPONENT_RESPONSE",
    "ToolAnnotations",
    "ToolDefinition",
    "ToolRegistry",
    "render_guidelines",
    "CatalogTools",
    "RECOMMENDATIONS",
    "collapse_variants",
    "describe_error",
]
