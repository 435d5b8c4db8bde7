"""Pytest configuration and shared fixtures."""

from typing import Any

import pytest

from nodeprobes.core.models import ControlPlaneSpec, NodeRole


@pytest.fixture
def rke2_control_plane() -> ControlPlaneSpec:
    """Provide an rke2 control plane with the default CNI."""
    return ControlPlaneSpec(kubernetes_version="v1.27.4+rke2r1")


@pytest.fixture
def k3s_control_plane() -> ControlPlaneSpec:
    """Provide a k3s control plane."""
    return ControlPlaneSpec(kubernetes_version="v1.27.4+k3s1")


@pytest.fixture
def all_roles_node() -> NodeRole:
    """Provide a node running etcd, control plane and worker."""
    return NodeRole(etcd=True, control_plane=True, worker=True)


@pytest.fixture
def control_plane_node() -> NodeRole:
    """Provide a control plane only node."""
    return NodeRole(control_plane=True)


@pytest.fixture
def etcd_only_node() -> NodeRole:
    """Provide an etcd only node."""
    return NodeRole(etcd=True)


@pytest.fixture
def worker_node() -> NodeRole:
    """Provide a worker only node."""
    return NodeRole(worker=True)


# ==============================================================================
# Test Data Fixtures
# ==============================================================================


@pytest.fixture
def custom_node_config() -> dict[str, Any]:
    """Node config overriding controller manager and scheduler flags."""
    return {
        "kube-controller-manager-arg": [
            "secure-port=10357",
            "cert-dir=/etc/kcm/certs",
        ],
        "kube-scheduler-arg": [
            "tls-cert-file=/etc/scheduler/serving.crt",
            "cert-dir=/etc/scheduler/certs",
        ],
    }


# ==============================================================================
# Pytest Markers
# ==============================================================================


def pytest_configure(config: Any) -> None:
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
