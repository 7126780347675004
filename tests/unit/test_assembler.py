"""Response assembly tests."""

import pytest

from ui_catalog.assembly import (
    SPINNER,
    AssembledResponse,
    HelperBundle,
    HelperFile,
    ResponseAssembler,
    Trigger,
    TriggerRegistry,
)


# ============================================================================
# Trigger table
# ============================================================================

@pytest.mark.unit
def test_default_registry_has_button_row(triggers):
    assert len(triggers) == 1
    [button] = triggers.matching("button")
    assert button.helpers == (SPINNER,)
    assert button.dependencies == {"clsx": "^2.0.0"}


@pytest.mark.unit
def test_installation_commands_per_package_manager():
    trigger = Trigger(component="Chart", dependencies={"d3": "^7.0.0", "clsx": "^2.0.0"})
    assert trigger.installation_commands() == [
        "pnpm add d3 clsx",
        "npm install d3 clsx",
        "yarn add d3 clsx",
    ]
    assert Trigger(component="Badge").installation_commands() == []


@pytest.mark.unit
def test_spinner_bundle_files():
    paths = [f.path for f in SPINNER.files]
    assert paths == ["components/Spinner/Spinner.tsx", "components/Spinner/Spinner.module.css"]
    assert all(f.content for f in SPINNER.files)


# ============================================================================
# Assembler
# ============================================================================

@pytest.mark.unit
def test_button_attaches_helpers_and_dependencies(engine, assembler):
    response = assembler.assemble(engine.named("Button"))

    assert [c.variant for c in response.components] == [None, "primary"]
    assert response.helper_names() == {"Spinner"}
    assert response.required_dependencies == {"clsx": "^2.0.0"}
    assert response.package_json_dependencies == {"clsx": "^2.0.0"}
    assert "pnpm add clsx" in response.installation_commands
    assert response.setup_instructions[0].startswith("1. MANDATORY")
    assert any("Spinner" in note for note in response.critical_notes)


@pytest.mark.unit
def test_component_without_trigger_is_plain(engine, assembler):
    response = assembler.assemble(engine.named("Badge"))

    assert response.primary.name == "Badge"
    assert response.helper_components is None
    assert response.required_dependencies is None
    assert response.setup_instructions is None
    assert response.critical_notes is None
    assert set(response.to_wire()) == {"components"}


@pytest.mark.unit
def test_trigger_keyed_by_requested_name(engine, assembler):
    response = assembler.assemble(engine.named("button"), requested_name="BUTTON")
    assert response.helper_names() == {"Spinner"}


@pytest.mark.unit
def test_catalog_entries_pass_through_unchanged(engine, assembler):
    entries = engine.named("Button")
    response = assembler.assemble(entries, "primary")
    assert response.components == entries


@pytest.mark.unit
def test_responses_are_fresh(engine, assembler):
    first = assembler.assemble(engine.named("Button"))
    first.critical_notes.append("extra")
    second = assembler.assemble(engine.named("Button"))
    assert "extra" not in second.critical_notes


@pytest.mark.unit
def test_multiple_triggers_merge(engine):
    icon = HelperBundle(name="Icon", files=(HelperFile(path="components/Icon/Icon.tsx"),))
    registry = TriggerRegistry([
        Trigger(component="Button", helpers=(SPINNER,), dependencies={"clsx": "^2.0.0"}),
        Trigger(
            component="Button",
            helpers=(SPINNER, icon),
            dependencies={"clsx": "^2.0.0", "lucide-react": "^0.400.0"},
            critical_notes=("Icon required",),
        ),
    ])
    response = ResponseAssembler(registry).assemble(engine.named("Button"))

    assert [h.name for h in response.helper_components] == ["Spinner", "Icon"]
    assert response.required_dependencies == {"clsx": "^2.0.0", "lucide-react": "^0.400.0"}
    assert response.installation_commands.count("pnpm add clsx") == 1
    assert response.critical_notes == ["Icon required"]
    assert response.setup_instructions is None


# ============================================================================
# Wire format
# ============================================================================

@pytest.mark.unit
def test_to_wire_uses_snake_case(engine, assembler):
    wire = assembler.assemble(engine.named("Button")).to_wire()

    assert set(wire) == {
        "components",
        "required_dependencies",
        "package_json_dependencies",
        "installation_commands",
        "setup_instructions",
        "critical_notes",
        "helper_components",
    }
    spinner = wire["helper_components"][0]
    assert spinner["name"] == "Spinner"
    assert spinner["files"][0]["path"] == "components/Spinner/Spinner.tsx"


@pytest.mark.unit
def test_from_wire_accepts_camel_case():
    response = AssembledResponse.from_wire({
        "components": [{"name": "Button", "code": "clsx()"}],
        "requiredDependencies": {"clsx": "^2.0.0"},
        "helperComponents": [{"name": "Spinner", "files": []}],
        "criticalNotes": [],
    })
    assert response.declares_dependency("clsx")
    assert response.helper_names() == {"Spinner"}
    assert response.critical_notes == []
    assert response.setup_instructions is None
