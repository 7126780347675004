"""Catalog Data Models."""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class CatalogModel(BaseModel):
    """Base for catalog models: immutable once loaded, unknown keys kept verbatim."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")


def _catalog_field(snake: str, camel: str, **kwargs: Any) -> Any:
    return Field(validation_alias=AliasChoices(snake, camel), **kwargs)


class ComponentProp(CatalogModel):
    """One documented prop of a component."""

    name: str = Field(..., min_length=1)
    type: str = Field(default="any")
    required: bool = Field(default=False)
    default: Any = Field(default=None)
    description: str = Field(default="")


class ComponentStyle(CatalogModel):
    """Stylesheet entry point (legacy catalog format)."""

    type: str
    entry: str


class ComponentExample(CatalogModel):
    """Usage example shipped with a component."""

    title: str = Field(default="")
    code: str


class ComponentSpec(CatalogModel):
    """One documented UI component, or one variant of it."""

    name: str = Field(..., min_length=1, description="Display name, matched case-insensitively")
    variant: str | None = Field(default=None, description="None denotes the base entry")
    description: str = Field(default="")
    package: str | None = Field(default=None, description="Module specifier consumers import")
    import_path: str | None = _catalog_field(
        "import_path", "importPath", default=None, description="Module specifier as authored"
    )
    import_statement: str | None = Field(default=None, alias="import")
    code: str | None = Field(default=None, description="Component source text")
    version: str | None = Field(default=None)
    language: str | None = Field(default=None)
    props: tuple[ComponentProp, ...] = Field(default=())
    styles: tuple[str, ...] = Field(default=())
    style: ComponentStyle | None = Field(default=None)
    tags: tuple[str, ...] = Field(default=())
    dependencies: tuple[str, ...] = Field(default=())
    assets: tuple[str, ...] = Field(default=())
    examples: tuple[ComponentExample, ...] = Field(default=())
    notes: tuple[str, ...] = Field(default=())
    size_specifications: dict[str, Any] | None = _catalog_field(
        "size_specifications", "sizeSpecifications", default=None
    )
    data_attributes: tuple[str, ...] = _catalog_field("data_attributes", "dataAttributes", default=())
    variant_props: dict[str, Any] = _catalog_field(
        "variant_props", "variantProps", default_factory=dict
    )

    @property
    def is_base(self) -> bool:
        return self.variant is None

    @property
    def code_text(self) -> str:
        """Text inspected by the consistency validator."""
        return self.code or self.import_statement or ""

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready form; ``variant`` is always present (null for base)."""
        data = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        data["variant"] = self.variant
        return data


class CatalogMetadata(CatalogModel):
    """Catalog-level metadata."""

    version: str = Field(default="1.0.0")
    last_updated: str | None = Field(default=None)
    tags: tuple[str, ...] = Field(default=())
    packages: tuple[str, ...] = Field(default=())


class Catalog(CatalogModel):
    """Ordered, immutable collection of component specifications."""

    metadata: CatalogMetadata = Field(default_factory=CatalogMetadata)
    components: tuple[ComponentSpec, ...] = Field(default=())

    @property
    def version(self) -> str:
        return self.metadata.version

    def __len__(self) -> int:
        return len(self.components)
