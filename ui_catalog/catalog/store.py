"""
Catalog Store
Owns the process-lifetime catalog and hands out read-only views of it.
"""

from pathlib import Path
from typing import Any, Callable

from ..core.errors import CatalogLoadError
from ..core.logging_config import get_logger
from ..monitoring.metrics import MetricsCollector, metrics_collector
from .loader import parse_catalog, read_catalog_document
from .models import Catalog

logger = get_logger(__name__)

DocumentSource = Callable[[], dict[str, Any]]


class CatalogStore:
    """
    Parses the catalog source once and caches it for the process lifetime.

    The catalog is built completely before it is published, so readers never
    see a partial catalog. Two racing first loads both parse the same
    deterministic source and produce structurally identical catalogs.
    """

    def __init__(
        self,
        source: DocumentSource,
        name: str = "catalog",
        metrics: MetricsCollector | None = None,
    ) -> None:
        self._source = source
        self._name = name
        self._metrics = metrics or metrics_collector
        self._catalog: Catalog | None = None

    @classmethod
    def from_path(cls, path: Path, metrics: MetricsCollector | None = None) -> "CatalogStore":
        """Store backed by a catalog JSON file."""
        return cls(lambda: read_catalog_document(path), name=str(path), metrics=metrics)

    @classmethod
    def from_document(
        cls, document: dict[str, Any], metrics: MetricsCollector | None = None
    ) -> "CatalogStore":
        """Store backed by an already-decoded document."""
        return cls(lambda: document, name="<document>", metrics=metrics)

    @property
    def is_loaded(self) -> bool:
        return self._catalog is not None

    def load(self) -> Catalog:
        """
        Return the catalog, parsing the source on first use.

        Raises:
            CatalogLoadError: If the source cannot be read, parsed or validated
        """
        catalog = self._catalog
        if catalog is not None:
            return catalog

        try:
            document = self._source()
            if not isinstance(document, dict):
                raise CatalogLoadError(
                    f"Expected catalog object, got {type(document).__name__}", source=self._name
                )
            catalog = parse_catalog(document)
        except CatalogLoadError as e:
            self._metrics.record_catalog_load("error")
            logger.error("catalog_load_failed", source=self._name, error=str(e))
            raise

        self._catalog = catalog
        self._metrics.record_catalog_load("success", len(catalog))
        logger.info(
            "catalog_loaded",
            source=self._name,
            version=catalog.version,
            components=len(catalog),
        )
        return catalog
