"""
Catalog Service Bootstrap
Builds a ready-to-serve ToolHandler; the transport that feeds it lives elsewhere.
"""

from .core import CatalogLoadError, Settings, configure_logging, create_container, get_logger, get_settings
from .catalog import CatalogStore
from .handlers import ToolHandler
from .monitoring import MetricsCollector

logger = get_logger(__name__)


def create_handler(
    settings: Settings | None = None,
    eager: bool = True,
    metrics: MetricsCollector | None = None,
) -> ToolHandler:
    """
    Configure logging, wire the container and return the tool handler.

    Args:
        settings: Settings to use; defaults to the environment
        eager: Load the catalog now so a broken catalog fails startup
        metrics: Metrics collector; defaults to the process-wide one

    Raises:
        CatalogLoadError: If ``eager`` and the catalog cannot be loaded
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.json_logs)

    container = create_container(settings, metrics)
    handler = container.get(ToolHandler)

    if eager:
        try:
            catalog = container.get(CatalogStore).load()
        except CatalogLoadError as e:
            logger.critical("catalog_unavailable", source=e.source, error=str(e))
            raise
        logger.info(
            "catalog_service_ready",
            design_system=settings.design_system_name,
            catalog_version=catalog.version,
            components=len(catalog),
            tools=len(handler.list_tools()),
        )

    return handler
