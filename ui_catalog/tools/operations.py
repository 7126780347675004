"""
Catalog Tool Operations
Request -> structured result. Lookup misses and bad input come back as data;
only a catalog load failure propagates.
"""

from typing import Any

from pydantic import ValidationError as PydanticValidationError
from returns.result import Failure

from ..assembly import AssembledResponse, ResponseAssembler, TriggerRegistry
from ..catalog import ComponentSpec, QueryEngine, VariantResolver
from ..core.config import Settings
from ..core.errors import CatalogLoadError
from ..core.json import safe_json_dumps
from ..core.logging_config import get_logger
from ..core.validate import (
    DesignSpecificationsRequest,
    GetComponentRequest,
    ListComponentsRequest,
    ValidateResponseRequest,
    ValidationError,
    validate_json_depth,
    validate_json_size,
)
from ..monitoring.metrics import MetricsCollector, metrics_collector
from ..validation import ConsistencyValidator, ValidationResult
from .guidelines import render_guidelines

logger = get_logger(__name__)

RECOMMENDATIONS = [
    "Fix all errors before using this component",
    "Ensure all imported files are created",
    "Verify all dependencies are installed",
    "Follow the setup_instructions exactly",
]


def describe_error(exc: Exception) -> str:
    """One-line message for an error returned to the caller."""
    if isinstance(exc, PydanticValidationError):
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'arguments'}: {err['msg']}"
            for err in exc.errors()
        )
        return f"Invalid arguments: {details}"
    return str(exc) or type(exc).__name__


def list_item(component: ComponentSpec, catalog_version: str) -> dict[str, Any]:
    """Summary of one entry as shown by list_components."""
    return {
        "name": component.name,
        "description": component.description,
        "package": component.package,
        "version": component.version or catalog_version,
        "style": component.style.model_dump(mode="json") if component.style else None,
        "tags": list(component.tags),
    }


def collapse_variants(components: list[ComponentSpec]) -> list[ComponentSpec]:
    """One entry per name; the base entry wins, the first-seen position is kept."""
    chosen: dict[str, ComponentSpec] = {}
    for comp in components:
        key = comp.name.lower()
        if key not in chosen or comp.is_base:
            chosen[key] = comp
    return list(chosen.values())


class CatalogTools:
    """The four catalog operations, wired to their collaborators."""

    def __init__(
        self,
        settings: Settings,
        engine: QueryEngine,
        resolver: VariantResolver,
        assembler: ResponseAssembler,
        validator: ConsistencyValidator,
        metrics: MetricsCollector | None = None,
    ) -> None:
        self.settings = settings
        self.engine = engine
        self.resolver = resolver
        self.assembler = assembler
        self.validator = validator
        self.metrics = metrics or metrics_collector

    @property
    def triggers(self) -> TriggerRegistry:
        return self.assembler.triggers

    # ------------------------------------------------------------------
    # list_components
    # ------------------------------------------------------------------

    def list_components(
        self,
        query: str | None = None,
        tags: list[str] | None = None,
        package_filter: str | None = None,
    ) -> dict[str, Any]:
        """List catalog entries matching every supplied filter."""
        try:
            request = ListComponentsRequest(query=query, tags=tags, package_filter=package_filter)
            components = self.engine.find(request.query, request.tags, request.package_filter)
            if self.settings.collapse_variants:
                components = collapse_variants(components)

            version = self.engine.store.load().version
            items = [list_item(c, version) for c in components]
            logger.info(
                "components_listed",
                query=request.query,
                tags=request.tags,
                package_filter=request.package_filter,
                total=len(items),
            )
            return {"items": items, "total": len(items)}
        except CatalogLoadError:
            raise
        except Exception as e:
            self._record_failure(e, "list_components")
            return {"error": describe_error(e), "items": [], "total": 0}

    # ------------------------------------------------------------------
    # get_component
    # ------------------------------------------------------------------

    def get_component(self, name: str, variant: str | None = None) -> dict[str, Any]:
        """Fetch a component (optionally one variant) with everything its code needs."""
        try:
            request = GetComponentRequest(name=name, variant=variant)
            lookup = self.resolver.narrow(
                request.name, self.engine.named(request.name), request.variant
            )

            if isinstance(lookup, Failure):
                logger.info("component_not_found", name=request.name, variant=request.variant)
                return {"error": lookup.failure().message}

            response = self.assembler.assemble(
                lookup.unwrap(), request.variant, requested_name=request.name
            )
            result = self.validator.validate(response)
            self._attach_diagnostics(response, result)
            return response.to_wire()
        except CatalogLoadError:
            raise
        except Exception as e:
            self._record_failure(e, "get_component")
            return {"error": describe_error(e)}

    def _attach_diagnostics(self, response: AssembledResponse, result: ValidationResult) -> None:
        self.metrics.record_validation(len(result.errors), len(result.warnings))

        if not result.is_valid:
            logger.error("component_validation_failed", errors=result.errors)
            if response.critical_notes is not None:
                response.critical_notes.append("VALIDATION ERRORS DETECTED:")
                response.critical_notes.extend(f"ERROR: {err}" for err in result.errors)

        if result.warnings:
            logger.warning("component_validation_warnings", warnings=result.warnings)
            if response.critical_notes is not None:
                response.critical_notes.append("VALIDATION WARNINGS:")
                response.critical_notes.extend(f"WARNING: {warn}" for warn in result.warnings)

    # ------------------------------------------------------------------
    # validate_component_response
    # ------------------------------------------------------------------

    def validate_component_response(self, response: dict[str, Any]) -> dict[str, Any]:
        """Cross-check a response the caller holds."""
        try:
            request = ValidateResponseRequest(response=response)
            validate_json_depth(request.response, self.settings.max_json_depth)
            size = len(safe_json_dumps(request.response).encode("utf-8"))
            validate_json_size(size, self.settings.max_payload_size, "Component response")

            result = self.validator.validate(AssembledResponse.from_wire(request.response))
            self.metrics.record_validation(len(result.errors), len(result.warnings))
            logger.info(
                "component_response_validated",
                valid=result.is_valid,
                errors=len(result.errors),
                warnings=len(result.warnings),
            )

            if result.is_valid:
                summary = "Component response is valid and should work without errors"
            else:
                summary = (
                    f"Component response has {len(result.errors)} critical errors "
                    "that will cause runtime failures"
                )

            return {
                "isValid": result.is_valid,
                "status": "PASSED" if result.is_valid else "FAILED",
                "errors": result.errors,
                "warnings": result.warnings,
                "summary": summary,
                "recommendations": [] if result.is_valid else list(RECOMMENDATIONS),
            }
        except CatalogLoadError:
            raise
        except (ValidationError, PydanticValidationError) as e:
            self._record_failure(e, "validate_component_response", level="warning")
            return {"error": describe_error(e)}
        except Exception as e:
            self._record_failure(e, "validate_component_response")
            return {"error": describe_error(e)}

    # ------------------------------------------------------------------
    # get_design_specifications
    # ------------------------------------------------------------------

    def get_design_specifications(self, versions: dict[str, str] | None = None) -> str:
        """Guidelines document for the requested design system version."""
        request = DesignSpecificationsRequest(versions=versions)
        key = self.settings.design_system_name.lower()
        version = (request.versions or {}).get(key) or self.settings.design_system_version
        logger.info("design_specifications", design_system=key, version=version)
        return render_guidelines(self.settings.design_system_name, version, self.triggers)

    def _record_failure(self, exc: Exception, tool: str, level: str = "error") -> None:
        self.metrics.record_error(type(exc).__name__, tool)
        if level == "warning":
            logger.warning("tool_rejected_input", tool=tool, error=describe_error(exc))
        else:
            logger.exception("tool_failed", tool=tool, error=str(exc))
