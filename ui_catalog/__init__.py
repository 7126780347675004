"""UI component catalog service."""

__version__ = "0.1.0"

from .app import create_handler
from .core import CatalogLoadError, Settings
from .handlers import ToolHandler
from .tools import CatalogTools

__all__ = [
    "__version__",
    "create_handler",
    "CatalogLoadError",
    "Settings",
    "ToolHandler",
    "CatalogTools",
]
