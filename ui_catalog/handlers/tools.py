"""
Tool Handler
Routes tool calls to the catalog operations and wraps results as text content.
"""

import re
from typing import Any, Callable

from ..core import CatalogLoadError, LogContext, get_logger, safe_json_dumps
from ..monitoring import MetricsCollector, metrics_collector, trace_operation
from ..tools import (
    GET_COMPONENT,
    GET_DESIGN_SPECIFICATIONS,
    LIST_COMPONENTS,
    VALIDATE_COMPONENT_RESPONSE,
    CatalogTools,
    ToolDefinition,
    ToolRegistry,
    describe_error,
)

logger = get_logger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def snake_case_arguments(arguments: dict[str, Any] | None) -> dict[str, Any]:
    """Top-level argument names to snake_case; nested payloads are left as sent."""
    return {_CAMEL_BOUNDARY.sub("_", key).lower(): value for key, value in (arguments or {}).items()}


def text_content(payload: dict[str, Any] | str) -> dict[str, Any]:
    """Wrap a result as a single text content block."""
    text = payload if isinstance(payload, str) else safe_json_dumps(payload, indent=2)
    return {"content": [{"type": "text", "text": text}]}


class ToolHandler:
    """Handles tool calls from the transport."""

    def __init__(
        self,
        tools: CatalogTools,
        registry: ToolRegistry,
        metrics: MetricsCollector | None = None,
    ) -> None:
        self.tools = tools
        self.registry = registry
        self.metrics = metrics or metrics_collector
        self._handlers: dict[str, Callable[..., dict[str, Any] | str]] = {
            LIST_COMPONENTS: self.tools.list_components,
            GET_COMPONENT: self.tools.get_component,
            VALIDATE_COMPONENT_RESPONSE: self.tools.validate_component_response,
            GET_DESIGN_SPECIFICATIONS: self.tools.get_design_specifications,
        }

    def list_tools(self) -> list[ToolDefinition]:
        """Tools this handler answers."""
        return [t for t in self.registry.list_tools() if t.id in self._handlers]

    def handle(self, tool_id: str, arguments: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Run one tool call.

        Args:
            tool_id: Registered tool identifier
            arguments: Call arguments, snake_case or camelCase names

        Returns:
            ``{"content": [{"type": "text", "text": ...}]}``

        Raises:
            CatalogLoadError: If the catalog cannot be loaded
        """
        handler = self._handlers.get(tool_id)
        if handler is None:
            logger.warning("unknown_tool", tool=tool_id)
            return text_content({"error": f"Unknown tool: {tool_id}"})

        outcome = {"status": "success"}

        def record(duration: float) -> None:
            self.metrics.record_tool_request(tool_id, outcome["status"], duration)
            logger.info("tool_call", status=outcome["status"], duration_ms=round(duration * 1000, 3))

        with (
            LogContext(tool=tool_id),
            trace_operation("tool_call", tool=tool_id),
            self.metrics.measure_duration(record),
        ):
            try:
                result = handler(**snake_case_arguments(arguments))
            except CatalogLoadError:
                outcome["status"] = "catalog_error"
                self.metrics.record_error("catalog_load_error", "tool_handler")
                raise
            except TypeError as e:
                # Unexpected or missing argument names
                outcome["status"] = "invalid_arguments"
                logger.warning("invalid_arguments", error=str(e))
                return text_content({"error": f"Invalid arguments for {tool_id}: {e}"})
            except ValueError as e:
                outcome["status"] = "invalid_arguments"
                logger.warning("invalid_arguments", error=str(e))
                return text_content({"error": describe_error(e)})

            if isinstance(result, dict) and "error" in result:
                outcome["status"] = "error"
            return text_content(result)
