"""Response Data Models."""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from ..catalog.models import ComponentSpec


class HelperFile(BaseModel):
    """One file of a helper bundle."""

    model_config = ConfigDict(frozen=True)

    path: str
    content: str = ""


class HelperBundle(BaseModel):
    """Auxiliary files a component's code depends on but the catalog entry does not carry."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    description: str = ""
    files: tuple[HelperFile, ...] = Field(default=())


def _wire_field(snake: str, camel: str, **kwargs: Any) -> Any:
    return Field(default=None, validation_alias=AliasChoices(snake, camel), **kwargs)


class AssembledResponse(BaseModel):
    """
    Outward value of get_component: resolved entries plus the helper
    bundles, dependencies and instructions the consumer needs.
    Built fresh per request.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    components: list[ComponentSpec] = Field(default_factory=list)

    # Dependencies and installation
    required_dependencies: dict[str, str] | None = _wire_field(
        "required_dependencies", "requiredDependencies"
    )
    package_json_dependencies: dict[str, str] | None = _wire_field(
        "package_json_dependencies", "packageJsonDependencies"
    )
    installation_commands: list[str] | None = _wire_field(
        "installation_commands", "installationCommands"
    )

    # Setup instructions
    setup_instructions: list[str] | None = _wire_field("setup_instructions", "setupInstructions")
    critical_notes: list[str] | None = _wire_field("critical_notes", "criticalNotes")

    # Helper components
    helper_components: list[HelperBundle] | None = _wire_field(
        "helper_components", "helperComponents"
    )

    @property
    def primary(self) -> ComponentSpec | None:
        return self.components[0] if self.components else None

    def helper_names(self) -> set[str]:
        return {h.name for h in self.helper_components or []}

    def declares_dependency(self, package: str) -> bool:
        """True when either dependency map pins ``package``."""
        return any(
            bool(deps.get(package))
            for deps in (self.required_dependencies, self.package_json_dependencies)
            if deps
        )

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready form; absent optional sections are omitted."""
        data: dict[str, Any] = {"components": [c.to_wire() for c in self.components]}
        data.update(
            self.model_dump(mode="json", exclude={"components"}, exclude_none=True)
        )
        return data

    @classmethod
    def from_wire(cls, payload: dict[str, Any]) -> "AssembledResponse":
        """Parse a response as a caller submits it (snake_case or camelCase keys)."""
        return cls.model_validate(payload)
