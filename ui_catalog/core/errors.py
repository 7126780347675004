"""Error taxonomy.

Only ``CatalogLoadError`` is allowed to leave an operation. Lookup misses are
plain values carried inside ``returns`` containers so callers can branch on
which condition occurred.
"""

from dataclasses import dataclass


class CatalogLoadError(Exception):
    """The catalog source could not be read, parsed or validated."""

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


@dataclass(frozen=True)
class ComponentNotFound:
    """No catalog entry carries the requested name."""

    name: str

    @property
    def message(self) -> str:
        return f'Component "{self.name}" not found'


@dataclass(frozen=True)
class VariantNotFound:
    """The component exists but none of its entries has the requested variant."""

    name: str
    variant: str

    @property
    def message(self) -> str:
        return f'Component "{self.name}" with variant "{self.variant}" not found'


LookupFailure = ComponentNotFound | VariantNotFound
