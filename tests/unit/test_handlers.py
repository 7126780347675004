"""Tests for the tool handler, container and bootstrap."""

import json

import pytest

from ui_catalog import create_handler
from ui_catalog.catalog import CatalogStore, QueryEngine
from ui_catalog.core import CatalogLoadError, Settings, create_container
from ui_catalog.handlers import ToolHandler, snake_case_arguments
from ui_catalog.tools import CatalogTools, ToolRegistry


def _payload(envelope: dict) -> dict:
    [block] = envelope["content"]
    assert block["type"] == "text"
    return json.loads(block["text"])


# ============================================================================
# ToolHandler Tests
# ============================================================================

@pytest.mark.unit
def test_handler_lists_catalog_tools(handler):
    ids = {tool.id for tool in handler.list_tools()}
    assert ids == {
        "list_components",
        "get_component",
        "validate_component_response",
        "get_design_specifications",
    }


@pytest.mark.unit
def test_handle_list_components(handler):
    result = _payload(handler.handle("list_components", {"query": "but"}))
    assert result["total"] == 1
    assert result["items"][0]["name"] == "Button"


@pytest.mark.unit
def test_handle_camel_case_arguments(handler):
    result = _payload(handler.handle("list_components", {"packageFilter": "@andes/badge"}))
    assert [item["name"] for item in result["items"]] == ["Badge"]


@pytest.mark.unit
def test_handle_get_component(handler):
    result = _payload(handler.handle("get_component", {"name": "Button", "variant": "primary"}))
    assert result["components"][0]["variant"] == "primary"
    assert result["installation_commands"][0] == "pnpm add clsx"


@pytest.mark.unit
def test_handle_not_found_is_data(handler):
    result = _payload(handler.handle("get_component", {"name": "Button", "variant": "secondary"}))
    assert result == {"error": 'Component "Button" with variant "secondary" not found'}


@pytest.mark.unit
def test_handle_output_is_indented_json(handler):
    text = handler.handle("get_component", {"name": "Badge"})["content"][0]["text"]
    assert text.startswith('{\n  "components"')


@pytest.mark.unit
def test_handle_validate_component_response(handler):
    response = _payload(handler.handle("get_component", {"name": "Button"}))
    result = _payload(handler.handle("validate_component_response", {"response": response}))
    assert result["isValid"] is True
    assert result["status"] == "PASSED"


@pytest.mark.unit
def test_handle_design_specifications_is_markdown(handler):
    text = handler.handle("get_design_specifications", {"versions": {"andes": "9.0.0"}})[
        "content"
    ][0]["text"]
    assert text.startswith("# Specification")
    assert "version: 9.0.0" in text


@pytest.mark.unit
def test_handle_invalid_design_versions(handler):
    result = _payload(handler.handle("get_design_specifications", {"versions": {"andes": 9}}))
    assert result["error"].startswith("Invalid arguments")


@pytest.mark.unit
def test_handle_unknown_tool(handler):
    assert _payload(handler.handle("delete_component", {})) == {
        "error": "Unknown tool: delete_component"
    }


@pytest.mark.unit
def test_handle_unexpected_argument(handler):
    result = _payload(handler.handle("get_component", {"name": "Button", "size": "large"}))
    assert "Invalid arguments for get_component" in result["error"]


@pytest.mark.unit
def test_handle_missing_argument(handler):
    result = _payload(handler.handle("get_component", None))
    assert "error" in result


@pytest.mark.unit
def test_handle_records_metrics(handler, metrics):
    handler.handle("get_component", {"name": "Button"})
    handler.handle("get_component", {"name": "Tooltip"})

    sample = metrics.registry.get_sample_value
    assert sample("catalog_tool_requests_total", {"tool": "get_component", "status": "success"}) == 1.0
    assert sample("catalog_tool_requests_total", {"tool": "get_component", "status": "error"}) == 1.0


@pytest.mark.unit
def test_handle_times_every_outcome(handler, metrics):
    handler.handle("get_component", {"name": "Button"})
    handler.handle("get_component", {"name": "Button", "size": "large"})

    sample = metrics.registry.get_sample_value
    assert sample(
        "catalog_tool_requests_total", {"tool": "get_component", "status": "invalid_arguments"}
    ) == 1.0
    assert sample("catalog_tool_duration_seconds_count", {"tool": "get_component"}) == 2.0
    assert sample("catalog_tool_duration_seconds_sum", {"tool": "get_component"}) >= 0


@pytest.mark.unit
def test_handle_catalog_load_error_propagates(tmp_path, settings, resolver, assembler, validator, metrics):
    store = CatalogStore.from_path(tmp_path / "missing.json", metrics=metrics)
    tools = CatalogTools(settings, QueryEngine(store), resolver, assembler, validator, metrics)
    handler = ToolHandler(tools, ToolRegistry(), metrics)

    with pytest.raises(CatalogLoadError):
        handler.handle("list_components", {})

    assert metrics.registry.get_sample_value(
        "catalog_tool_requests_total", {"tool": "list_components", "status": "catalog_error"}
    ) == 1.0


@pytest.mark.unit
def test_snake_case_arguments():
    assert snake_case_arguments({"packageFilter": "x", "query": "y"}) == {
        "package_filter": "x",
        "query": "y",
    }
    assert snake_case_arguments(None) == {}
    # Nested payload keys are left alone
    nested = snake_case_arguments({"response": {"helperComponents": []}})
    assert nested == {"response": {"helperComponents": []}}


# ============================================================================
# Tool Registry Tests
# ============================================================================

@pytest.mark.unit
def test_tool_registry_categories(tool_registry):
    assert tool_registry.get_categories() == ["catalog", "guidelines"]
    assert len(tool_registry) == 4
    assert "get_component" in tool_registry
    assert len(tool_registry.list_tools("catalog")) == 3

    tool = tool_registry.get_tool("get_component")
    assert tool.annotations.read_only is True
    assert tool.annotations.idempotent is True


@pytest.mark.unit
def test_tool_registry_description(tool_registry):
    description = tool_registry.get_tools_description()
    assert "CATALOG:" in description
    assert "get_design_specifications" in description


@pytest.mark.unit
def test_tool_registry_ignores_duplicates(tool_registry):
    original = tool_registry.get_tool("list_components")
    tool_registry.register_tool(original.model_copy(update={"name": "Other"}))
    assert tool_registry.get_tool("list_components").name == "List Components"


# ============================================================================
# Container and Bootstrap Tests
# ============================================================================

@pytest.mark.unit
def test_container_wires_singletons(metrics):
    container = create_container(Settings(), metrics)

    handler = container.get(ToolHandler)
    assert handler is container.get(ToolHandler)
    assert handler.tools is container.get(CatalogTools)
    assert handler.tools.engine.store is container.get(CatalogStore)


@pytest.mark.unit
def test_create_handler_loads_packaged_catalog(metrics):
    handler = create_handler(Settings(catalog_path=None), metrics=metrics)

    result = _payload(handler.handle("list_components", {"query": "card"}))
    assert [item["name"] for item in result["items"]] == ["Card"]


@pytest.mark.unit
def test_create_handler_fails_on_broken_catalog(tmp_path, metrics):
    path = tmp_path / "catalog.json"
    path.write_text("not json", encoding="utf-8")

    with pytest.raises(CatalogLoadError):
        create_handler(Settings(catalog_path=path), metrics=metrics)

    # Lazy handlers defer the failure to the first call
    handler = create_handler(Settings(catalog_path=path), eager=False, metrics=metrics)
    with pytest.raises(CatalogLoadError):
        handler.handle("get_component", {"name": "Button"})
