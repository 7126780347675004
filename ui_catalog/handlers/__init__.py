"""Handlers for tool calls."""

from .tools import ToolHandler, snake_case_arguments, text_content

__all__ = ["ToolHandler", "snake_case_arguments", "text_content"]
