"""Pytest configuration and fixtures."""

import os
from unittest.mock import Mock

import pytest
import respx

from pageforge.core import InstanceIdMinter, get_settings
from pageforge.registry import ComponentRegistry
from pageforge.blueprint import BlueprintStore, ComponentInstance, ResourceTracker
from pageforge.dnd import DragReconciler
from pageforge.editor import PropertiesEditor
from pageforge.export import ExportSerializer


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ['PAGEFORGE_LOG_LEVEL'] = 'DEBUG'
    os.environ['PAGEFORGE_BACKEND_URL'] = 'http://localhost:8000'


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    return get_settings()


@pytest.fixture
def registry():
    """Registry with the built-in catalog."""
    return ComponentRegistry()


@pytest.fixture
def releaser():
    """Platform release hook that records calls."""
    return Mock()


@pytest.fixture
def resources(releaser):
    """Resource tracker wired to the recording releaser."""
    return ResourceTracker(releaser=releaser)


@pytest.fixture
def store(resources):
    """Empty blueprint store."""
    return BlueprintStore(resources)


@pytest.fixture
def clock():
    """Frozen millisecond clock so minted ids are predictable."""
    return Mock(return_value=1678886400000)


@pytest.fixture
def reconciler(store, registry, clock):
    """Reconciler with a deterministic id minter."""
    return DragReconciler(store, registry, minter=InstanceIdMinter(clock=clock))


@pytest.fixture
def editor(store, registry):
    """Properties editor."""
    return PropertiesEditor(store, registry)


@pytest.fixture
def serializer(store, registry, settings):
    """Export serializer."""
    return ExportSerializer(store, registry, settings)


# ============================================================================
# Data Fixtures
# ============================================================================

def make_instance(instance_id, component_type="Input", **props):
    """Build an instance directly (bypasses palette insertion)."""
    props.setdefault("styles", {"marginTop": 0, "marginBottom": 0, "marginLeft": 0, "marginRight": 0})
    return ComponentInstance(id=instance_id, type=component_type, props=props)


@pytest.fixture
def instance_factory():
    """Factory for instances built outside the palette path."""
    return make_instance


@pytest.fixture
def abc_store(store):
    """Store holding instances A, B, C in that order."""
    for instance_id in ("A", "B", "C"):
        store.insert_at(len(store), make_instance(instance_id, label=instance_id))
    return store


@pytest.fixture
def table_instance(store, registry):
    """Table with rows=4, cols=2, header on and 3x2 literal cells."""
    props = registry.get_defaults("Table")
    props.update(
        rows=4,
        cols=2,
        hasHeader=True,
        data={
            "headers": ["Name", "Age"],
            "cells": [["Ada", "36"], ["Alan", "41"], ["Grace", "85"]],
        },
    )
    instance = ComponentInstance(id="Table-1", type="Table", props=props)
    store.insert_at(0, instance)
    return instance


@pytest.fixture
def sample_document():
    """Sample canonical document."""
    return {
        "name": "Contact Page",
        "components": [
            {
                "id": "Text-1678886400000",
                "type": "Text",
                "props": {
                    "text": "Get in touch",
                    "styles": {"marginTop": 8, "marginBottom": 8, "marginLeft": 0,
                               "marginRight": 0, "fontSize": 18, "color": "#1e293b"},
                },
            },
            {
                "id": "Input-1678886400001",
                "type": "Input",
                "props": {
                    "label": "Email",
                    "placeholder": "you@example.com",
                    "styles": {"marginTop": 10, "marginBottom": 4, "marginLeft": 0, "marginRight": 0},
                },
            },
        ],
    }


# ============================================================================
# HTTP/Network Fixtures
# ============================================================================

@pytest.fixture
def mock_httpx_client():
    """Mock httpx client."""
    with respx.mock:
        yield respx
