"""Query Engine - name, description, tag and package filtering over the catalog."""

from collections.abc import Iterable

from .models import ComponentSpec
from .store import CatalogStore


def matches_query(component: ComponentSpec, query: str) -> bool:
    """Case-insensitive substring match on name or description."""
    needle = query.lower()
    return needle in component.name.lower() or needle in component.description.lower()


def matches_tags(component: ComponentSpec, tags: Iterable[str]) -> bool:
    """True when the component shares at least one tag with ``tags``."""
    return not set(component.tags).isdisjoint(tags)


def matches_package(component: ComponentSpec, package_filter: str) -> bool:
    """Substring match on the package, import path or import statement."""
    return any(
        package_filter in text
        for text in (component.package, component.import_path, component.import_statement)
        if text
    )


class QueryEngine:
    """
    Read-only queries over the catalog held by a CatalogStore.
    Results always keep catalog order.
    """

    def __init__(self, store: CatalogStore) -> None:
        self.store = store

    def find(
        self,
        query: str | None = None,
        tags: list[str] | None = None,
        package_filter: str | None = None,
    ) -> list[ComponentSpec]:
        """
        Filter the catalog. Every supplied filter must hold (AND); tags match
        when any one of them is shared (OR).

        Args:
            query: Substring of name or description, case-insensitive
            tags: Tag set, at least one must be shared
            package_filter: Substring of package, import path or import statement

        Returns:
            Matching entries in catalog order
        """
        components: Iterable[ComponentSpec] = self.store.load().components

        if package_filter:
            components = [c for c in components if matches_package(c, package_filter)]

        if tags:
            wanted = set(tags)
            components = [c for c in components if matches_tags(c, wanted)]

        if query:
            components = [c for c in components if matches_query(c, query)]

        return list(components)

    def named(self, name: str) -> list[ComponentSpec]:
        """All entries (base and variants) whose name equals ``name``, ignoring case."""
        key = name.lower()
        return [c for c in self.store.load().components if c.name.lower() == key]

    def get(self, name: str) -> ComponentSpec | None:
        """Base entry named ``name`` (case-insensitive), or None."""
        return next((c for c in self.named(name) if c.is_base), None)
