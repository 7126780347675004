"""Core utilities and infrastructure."""

from .config import Settings, get_settings, DEFAULT_CATALOG_PATH
from .errors import CatalogLoadError, ComponentNotFound, VariantNotFound, LookupFailure
from .validate import (
    ValidationError,
    ListComponentsRequest,
    GetComponentRequest,
    DesignSpecificationsRequest,
    ValidateResponseRequest,
    validate_json_size,
    validate_json_depth,
)
from .logging_config import configure_logging, get_logger, LogContext
from .json import decode_document, safe_json_dumps, JSONParseError
from .scanner import ScanResult, scan, relative_imports, module_specifiers, token_used
from .tracing import trace_operation, trace_function


def create_container(settings: Settings | None = None, metrics=None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings, metrics)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    "DEFAULT_CATALOG_PATH",
    # Errors
    "CatalogLoadError",
    "ComponentNotFound",
    "VariantNotFound",
    "LookupFailure",
    # Validation
    "ValidationError",
    "ListComponentsRequest",
    "GetComponentRequest",
    "DesignSpecificationsRequest",
    "ValidateResponseRequest",
    "validate_json_size",
    "validate_json_depth",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # JSON
    "decode_document",
    "safe_json_dumps",
    "JSONParseError",
    # Scanning
    "ScanResult",
    "scan",
    "relative_imports",
    "module_specifiers",
    "token_used",
    # Tracing
    "trace_operation",
    "trace_function",
    # DI
    "create_container",
]
