"""Catalog loader: reads the catalog document, maps both schema shapes, validates."""

from pathlib import Path
from typing import Any, Iterator

from pydantic import ValidationError as PydanticValidationError

from ..core.errors import CatalogLoadError
from ..core.json import JSONParseError, decode_document
from ..core.logging_config import get_logger
from ..core.scanner import scan
from .models import Catalog, CatalogMetadata, ComponentSpec

logger = get_logger(__name__)


# ── Reading ────────────────────────────────────────────────────────

def read_catalog_document(path: Path) -> dict[str, Any]:
    """Read and decode a catalog JSON file."""
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise CatalogLoadError(f"Read error: {exc}", source=str(path)) from exc

    try:
        return decode_document(raw)
    except JSONParseError as exc:
        raise CatalogLoadError(f"Parse error: {exc}", source=str(path)) from exc


# ── Schema mapping ─────────────────────────────────────────────────

def is_legacy_record(record: dict[str, Any]) -> bool:
    """Legacy records declare their variants inline."""
    return isinstance(record.get("variants"), list)


def _expand_legacy(record: dict[str, Any]) -> Iterator[dict[str, Any]]:
    """Yield the base entry followed by one entry per declared variant."""
    base = {k: v for k, v in record.items() if k != "variants"}
    base["variant"] = None
    style = base.get("style")
    if isinstance(style, dict) and style.get("entry") and not base.get("styles"):
        base["styles"] = [style["entry"]]
    yield base

    for declared in record["variants"]:
        if not isinstance(declared, dict) or not declared.get("name"):
            raise CatalogLoadError(
                f"Component '{record.get('name')}' declares a variant without a name"
            )
        entry = dict(base)
        entry["variant"] = declared["name"]
        entry["description"] = declared.get("description") or base.get("description", "")
        entry["variant_props"] = declared.get("props") or {}
        yield entry


def _with_package(record: dict[str, Any]) -> dict[str, Any]:
    """Derive ``package`` from the import path or statement when the record omits it."""
    if record.get("package"):
        return record
    import_path = record.get("importPath") or record.get("import_path")
    if isinstance(import_path, str) and import_path:
        return {**record, "package": import_path}
    if not isinstance(record.get("import"), str):
        return record
    packages = scan(record["import"]).packages
    if not packages:
        return record
    return {**record, "package": packages[0]}


def _parse_component(record: Any, index: int) -> ComponentSpec:
    if not isinstance(record, dict):
        raise CatalogLoadError(f"components[{index}]: expected object, got {type(record).__name__}")
    try:
        return ComponentSpec.model_validate(_with_package(record))
    except PydanticValidationError as exc:
        name = record.get("name", f"components[{index}]")
        raise CatalogLoadError(f"[{name}] Missing/invalid field: {exc}") from exc


# ── Invariants ─────────────────────────────────────────────────────

def _check_invariants(components: list[ComponentSpec]) -> None:
    seen: set[tuple[str, str | None]] = set()
    bases: set[str] = set()
    with_variants: dict[str, str] = {}

    for comp in components:
        key = (comp.name.lower(), comp.variant)
        if key in seen:
            label = comp.variant if comp.variant is not None else "base"
            raise CatalogLoadError(f"[{comp.name}] Duplicate entry for variant '{label}'")
        seen.add(key)
        if comp.is_base:
            bases.add(comp.name.lower())
        else:
            with_variants.setdefault(comp.name.lower(), comp.name)

    missing = [name for key, name in with_variants.items() if key not in bases]
    if missing:
        raise CatalogLoadError(f"Components declare variants without a base entry: {missing}")


def _build_metadata(document: dict[str, Any], components: list[ComponentSpec]) -> CatalogMetadata:
    raw = document.get("metadata") or {}
    if not isinstance(raw, dict):
        raise CatalogLoadError("metadata: expected object")

    tags = raw.get("tags") or list(dict.fromkeys(t for c in components for t in c.tags))
    packages = raw.get("packages") or list(
        dict.fromkeys(c.package for c in components if c.package)
    )
    try:
        return CatalogMetadata(
            version=raw.get("version") or document.get("version") or "1.0.0",
            last_updated=raw.get("lastUpdated") or raw.get("last_updated"),
            tags=tags,
            packages=packages,
        )
    except PydanticValidationError as exc:
        raise CatalogLoadError(f"metadata: {exc}") from exc


# ── Public API ─────────────────────────────────────────────────────

def parse_catalog(document: dict[str, Any]) -> Catalog:
    """Map a decoded catalog document onto the canonical Catalog.

    Legacy records (inline ``variants`` list) are expanded into one entry per
    variant. Any malformed record or broken invariant aborts the load.
    """
    records = document.get("components")
    if not isinstance(records, list):
        raise CatalogLoadError("Catalog document has no 'components' array")

    components: list[ComponentSpec] = []
    legacy = 0
    for index, record in enumerate(records):
        if isinstance(record, dict) and is_legacy_record(record):
            legacy += 1
            components.extend(_parse_component(r, index) for r in _expand_legacy(record))
        else:
            components.append(_parse_component(record, index))

    if legacy:
        logger.warning("legacy_catalog_records", count=legacy)

    _check_invariants(components)
    return Catalog(metadata=_build_metadata(document, components), components=tuple(components))
