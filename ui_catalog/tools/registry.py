"""
Tool Registry
Holds the tool definitions the handler advertises, keyed by wire identifier.
"""

from typing import Dict, Iterable, List, Optional

from ..core.logging_config import get_logger
from .definitions import CATALOG_TOOLS, ToolDefinition

logger = get_logger(__name__)


class ToolRegistry:
    """
    Tool definitions grouped by category.
    The first registration of an identifier wins; later ones are logged and dropped.
    """

    def __init__(self, definitions: Iterable[ToolDefinition] = CATALOG_TOOLS):
        self.tools: Dict[str, ToolDefinition] = {}
        for definition in definitions:
            self.register_tool(definition)
        logger.debug("tool_registry_ready", tools=len(self.tools), categories=self.get_categories())

    def __contains__(self, tool_id: str) -> bool:
        return tool_id in self.tools

    def __len__(self) -> int:
        return len(self.tools)

    def register_tool(self, tool: ToolDefinition) -> None:
        if tool.id in self.tools:
            logger.warning("duplicate_tool_ignored", tool=tool.id)
            return
        self.tools[tool.id] = tool

    def get_tool(self, tool_id: str) -> Optional[ToolDefinition]:
        return self.tools.get(tool_id)

    def get_categories(self) -> List[str]:
        """Distinct categories in alphabetical order."""
        return sorted({tool.category for tool in self.tools.values()})

    def list_tools(self, category: Optional[str] = None) -> List[ToolDefinition]:
        """Tools in registration order, narrowed to one category when given."""
        return [
            tool for tool in self.tools.values()
            if category is None or tool.category == category
        ]

    def get_tools_description(self) -> str:
        """Plain-text tool listing for an agent's system prompt."""
        sections = []
        for category in self.get_categories():
            entries = []
            for tool in self.list_tools(category):
                hints = "; ".join(f"{name}: {hint}" for name, hint in tool.parameters.items())
                entries.append(f"  - {tool.id}({hints or 'no arguments'}): {tool.description}")
            sections.append(f"{category.upper()}:\n" + "\n".join(entries))
        return "UI component catalog tools\n\n" + "\n\n".join(sections)


__all__ = ["ToolRegistry"]
