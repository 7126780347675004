"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from ..assembly import ResponseAssembler, TriggerRegistry, default_registry
from ..catalog import CatalogStore, QueryEngine, VariantResolver
from ..handlers import ToolHandler
from ..monitoring import MetricsCollector, metrics_collector
from ..tools import CatalogTools, ToolRegistry
from ..validation import ConsistencyValidator
from .config import Settings, get_settings


class CatalogModule(Module):
    """Catalog service dependencies."""

    def __init__(
        self,
        settings: Settings | None = None,
        metrics: MetricsCollector | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.metrics = metrics or metrics_collector

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        return self.settings

    @singleton
    @provider
    def provide_metrics(self) -> MetricsCollector:
        return self.metrics

    @singleton
    @provider
    def provide_catalog_store(self, settings: Settings, metrics: MetricsCollector) -> CatalogStore:
        """Provide the process-wide catalog store (loads lazily)."""
        return CatalogStore.from_path(settings.resolved_catalog_path(), metrics=metrics)

    @singleton
    @provider
    def provide_query_engine(self, store: CatalogStore) -> QueryEngine:
        return QueryEngine(store)

    @singleton
    @provider
    def provide_variant_resolver(self) -> VariantResolver:
        return VariantResolver()

    @singleton
    @provider
    def provide_trigger_registry(self) -> TriggerRegistry:
        """Provide the helper/dependency trigger table."""
        return default_registry()

    @singleton
    @provider
    def provide_response_assembler(self, triggers: TriggerRegistry) -> ResponseAssembler:
        return ResponseAssembler(triggers)

    @singleton
    @provider
    def provide_consistency_validator(self) -> ConsistencyValidator:
        return ConsistencyValidator()

    @singleton
    @provider
    def provide_tool_registry(self) -> ToolRegistry:
        """Provide tool registry singleton."""
        return ToolRegistry()

    @singleton
    @provider
    def provide_catalog_tools(
        self,
        settings: Settings,
        engine: QueryEngine,
        resolver: VariantResolver,
        assembler: ResponseAssembler,
        validator: ConsistencyValidator,
        metrics: MetricsCollector,
    ) -> CatalogTools:
        """Provide the catalog operations with all dependencies."""
        return CatalogTools(
            settings=settings,
            engine=engine,
            resolver=resolver,
            assembler=assembler,
            validator=validator,
            metrics=metrics,
        )

    @singleton
    @provider
    def provide_tool_handler(
        self, tools: CatalogTools, registry: ToolRegistry, metrics: MetricsCollector
    ) -> ToolHandler:
        return ToolHandler(tools, registry, metrics)


def create_container(
    settings: Settings | None = None, metrics: MetricsCollector | None = None
) -> Injector:
    """Create configured injector."""
    return Injector([CatalogModule(settings, metrics)])
