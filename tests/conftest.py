"""Pytest configuration and fixtures."""

import copy

import pytest
from prometheus_client import CollectorRegistry

from ui_catalog.assembly import ResponseAssembler, default_registry
from ui_catalog.catalog import CatalogStore, QueryEngine, VariantResolver
from ui_catalog.core import Settings
from ui_catalog.handlers import ToolHandler
from ui_catalog.monitoring import MetricsCollector
from ui_catalog.tools import CatalogTools, ToolRegistry
from ui_catalog.validation import ConsistencyValidator


BUTTON_CODE = """import React, { forwardRef } from 'react';
import clsx from 'clsx';
import Spinner from '../Spinner/Spinner';
import styles from './Button.module.css';

const Button = forwardRef(({ loading, className, children, ...rest }, ref) => (
  <button ref={ref} className={clsx(styles.button, className)} {...rest}>
    {loading && <Spinner />}
    {children}
  </button>
));

export default Button;
"""

BADGE_CODE = """import React from 'react';
import styles from './Badge.module.css';

const Badge = ({ children }) => <span className={styles.badge}>{children}</span>;

export default Badge;
"""


SAMPLE_CATALOG = {
    "metadata": {"version": "3.1.0", "lastUpdated": "2025-09-30"},
    "components": [
        {
            "name": "Button",
            "variant": None,
            "description": "Clickable button that triggers an action",
            "package": "@andes/button",
            "import": "import Button from '@andes/button';",
            "version": "2.0.0",
            "styles": ["components/Button/Button.module.css"],
            "tags": ["action", "form"],
            "code": BUTTON_CODE,
        },
        {
            "name": "Button",
            "variant": "primary",
            "description": "Primary call to action",
            "package": "@andes/button",
            "import": "import Button from '@andes/button';",
            "tags": ["action", "form"],
            "variant_props": {"hierarchy": "primary"},
            "code": BUTTON_CODE,
        },
        {
            "name": "Badge",
            "variant": None,
            "description": "Small status label",
            "package": "@andes/badge",
            "import": "import Badge from '@andes/badge';",
            "tags": ["status"],
            "code": BADGE_CODE,
        },
    ],
}


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    return Settings(log_level="DEBUG", design_system_name="Andes", design_system_version="latest")


@pytest.fixture
def metrics():
    """Metrics collector on an isolated registry."""
    return MetricsCollector(registry=CollectorRegistry())


@pytest.fixture
def catalog_document():
    """Fresh copy of the sample catalog document."""
    return copy.deepcopy(SAMPLE_CATALOG)


# ============================================================================
# Catalog Fixtures
# ============================================================================

@pytest.fixture
def store(catalog_document, metrics):
    """Catalog store backed by the sample document."""
    return CatalogStore.from_document(catalog_document, metrics=metrics)


@pytest.fixture
def engine(store):
    """Query engine over the sample catalog."""
    return QueryEngine(store)


@pytest.fixture
def resolver():
    """Variant resolver."""
    return VariantResolver()


# ============================================================================
# Assembly and Validation Fixtures
# ============================================================================

@pytest.fixture
def triggers():
    """Shipped trigger table."""
    return default_registry()


@pytest.fixture
def assembler(triggers):
    """Response assembler with the shipped triggers."""
    return ResponseAssembler(triggers)


@pytest.fixture
def validator():
    """Consistency validator with default rules."""
    return ConsistencyValidator()


# ============================================================================
# Tool Fixtures
# ============================================================================

@pytest.fixture
def tools(settings, engine, resolver, assembler, validator, metrics):
    """Catalog operations wired to the sample catalog."""
    return CatalogTools(
        settings=settings,
        engine=engine,
        resolver=resolver,
        assembler=assembler,
        validator=validator,
        metrics=metrics,
    )


@pytest.fixture
def tool_registry():
    """Tool registry fixture."""
    return ToolRegistry()


@pytest.fixture
def handler(tools, tool_registry, metrics):
    """Tool handler over the sample catalog."""
    return ToolHandler(tools, tool_registry, metrics)
