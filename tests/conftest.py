"""Pytest configuration and fixtures."""

import copy

import pytest

from formsemantics.config import reset_settings
from formsemantics.model.node import NormalizedNode

SAMPLE_BUNDLE = {
    "schemaVersion": "1.0",
    "form": {"name": "CustomerForm", "type": "Demo.CustomerForm", "width": 800, "height": 600, "dpi": 96},
    "nodes": [
        {
            "id": "root",
            "type": "System.Windows.Forms.Form",
            "name": "CustomerForm",
            "bounds": {"x": 0, "y": 0, "w": 800, "h": 600},
            "children": [
                {
                    "id": "grid",
                    "type": "DevExpress.XtraGrid.GridControl",
                    "name": "gridCustomers",
                    "bounds": {"x": 0, "y": 0, "w": 800, "h": 400},
                    "metadata": {"devexpress": {"kind": "GridControl"}},
                    "children": [],
                },
                {
                    "id": "txtName",
                    "type": "System.Windows.Forms.TextBox",
                    "name": "txtName",
                    "text": "",
                    "bounds": {"x": 10, "y": 420, "w": 200, "h": 24},
                    "children": [],
                },
                {
                    "id": "panelButtons",
                    "type": "System.Windows.Forms.Panel",
                    "name": "panelButtons",
                    "bounds": {"x": 600, "y": 540, "w": 200, "h": 60},
                    "children": [
                        {
                            "id": "btnOK",
                            "type": "System.Windows.Forms.Button",
                            "name": "btnOK",
                            "text": "OK",
                            "bounds": {"x": 10, "y": 20, "w": 80, "h": 30},
                            "children": [],
                        },
                        {
                            "id": "btnCancel",
                            "type": "System.Windows.Forms.Button",
                            "name": "btnCancel",
                            "text": "Cancel",
                            "bounds": {"x": 100, "y": 20, "w": 80, "h": 30},
                            "children": [],
                        },
                    ],
                },
            ],
        }
    ],
}


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate every test from environment-provided settings."""
    for name in ("ALLOW_HIGHER_MAJOR", "CONSUMER_SCHEMA_VERSION", "SEMANTIC_VERSION"):
        monkeypatch.delenv(f"FORMSEMANTICS_{name}", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sample_bundle():
    """A small dump: form root, grid, text box and an OK/Cancel button panel."""
    return copy.deepcopy(SAMPLE_BUNDLE)


@pytest.fixture
def make_node():
    """Factory for normalized nodes with sensible defaults."""

    def _make(node_id="n1", type="System.Windows.Forms.Button", **kwargs):
        return NormalizedNode(id=node_id, type=type, name=kwargs.pop("name", node_id), **kwargs)

    return _make
