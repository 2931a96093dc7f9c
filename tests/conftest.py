"""
Pytest configuration for kubefilter tests.

SPDX-License-Identifier: Apache-2.0
Copyright 2025 Sebastian Daberdaku
"""

import os
import sys
from pathlib import Path

import pytest

# Add src directory to Python path for imports
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def setup_test_environment():
    """Set up test environment variables."""
    # Never clean up resources a test did not create itself
    os.environ["DELETE_AFTER_INSPECT"] = "false"
    os.environ["LOG_LEVEL"] = "DEBUG"
    os.environ["ENABLE_JSON_LOGS"] = "false"


@pytest.fixture
def deployment_manifest():
    """Single-document Deployment manifest."""
    return {
        "apiVersion": "apps/v1",
        "kind": "Deployment",
        "metadata": {"name": "web", "namespace": "demo", "labels": {"app": "nginx"}},
        "spec": {
            "replicas": 1,
            "selector": {"matchLabels": {"app": "nginx"}},
            "template": {
                "metadata": {"labels": {"app": "nginx"}},
                "spec": {"containers": [{"name": "nginx", "image": "nginx:1.27"}]},
            },
        },
    }


@pytest.fixture
def labelled_documents():
    """Two documents differing only by their app label."""
    return [
        {"metadata": {"name": "first", "labels": {"app": "nginx"}}},
        {"metadata": {"name": "second", "labels": {"app": "other"}}},
    ]


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test (requires Kubernetes cluster)"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        # Add integration marker to tests in integration directory
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
