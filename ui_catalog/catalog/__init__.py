"""Component catalog - load, validate and query the component specifications."""

from .models import (
    Catalog,
    CatalogMetadata,
    ComponentExample,
    ComponentProp,
    ComponentSpec,
    ComponentStyle,
)
from .loader import parse_catalog, read_catalog_document, is_legacy_record
from .store import CatalogStore
from .query import QueryEngine
from .variants import VariantResolver, BASE_VARIANT

__all__ = [
    # Models
    "Catalog",
    "CatalogMetadata",
    "ComponentExample",
    "ComponentProp",
    "ComponentSpec",
    "ComponentStyle",
    # Loading
    "parse_catalog",
    "read_catalog_document",
    "is_legacy_record",
    "CatalogStore",
    # Queries
    "QueryEngine",
    "VariantResolver",
    "BASE_VARIANT",
]
