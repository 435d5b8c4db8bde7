"""Unit tests for the probe catalog."""

import pytest

from nodeprobes.probes.catalog import (
    CALICO,
    ETCD,
    KUBE_APISERVER,
    KUBE_CONTROLLER_MANAGER,
    KUBE_SCHEDULER,
    KUBELET,
    PROBE_CATALOG,
    get_probe,
)


class TestProbeCatalog:
    """Tests for PROBE_CATALOG contents."""

    def test_known_components(self) -> None:
        """Test the catalog covers every component."""
        assert set(PROBE_CATALOG) == {
            CALICO,
            ETCD,
            KUBE_APISERVER,
            KUBE_CONTROLLER_MANAGER,
            KUBE_SCHEDULER,
            KUBELET,
        }

    @pytest.mark.parametrize("name", sorted(PROBE_CATALOG))
    def test_default_timings(self, name: str) -> None:
        """Test every template carries the default thresholds."""
        probe = PROBE_CATALOG[name]

        assert probe.initial_delay_seconds == 1
        assert probe.timeout_seconds == 5
        assert probe.success_threshold == 1
        assert probe.failure_threshold == 2

    @pytest.mark.parametrize("name", [KUBE_CONTROLLER_MANAGER, KUBE_SCHEDULER])
    def test_secure_components_template_port(self, name: str) -> None:
        """Test the secure components carry a port placeholder."""
        assert PROBE_CATALOG[name].http_get.url == "https://127.0.0.1:%s/healthz"

    def test_apiserver_certificates_templated(self) -> None:
        """Test the apiserver certificate paths are runtime templates."""
        action = PROBE_CATALOG[KUBE_APISERVER].http_get

        assert action.url == "https://127.0.0.1:6443/readyz"
        assert action.ca_cert == "/var/lib/rancher/%s/server/tls/server-ca.crt"
        assert action.client_cert == "/var/lib/rancher/%s/server/tls/client-kube-apiserver.crt"
        assert action.client_key == "/var/lib/rancher/%s/server/tls/client-kube-apiserver.key"

    def test_catalog_is_read_only(self) -> None:
        """Test entries cannot be replaced."""
        with pytest.raises(TypeError):
            PROBE_CATALOG[KUBELET] = PROBE_CATALOG[ETCD]  # type: ignore[index]


class TestGetProbe:
    """Tests for get_probe."""

    def test_returns_equal_copy(self) -> None:
        """Test a copy equal to, but distinct from, the template is returned."""
        probe = get_probe(KUBELET)

        assert probe == PROBE_CATALOG[KUBELET]
        assert probe is not PROBE_CATALOG[KUBELET]

    def test_custom_catalog(self) -> None:
        """Test reading a copy from another catalog."""
        catalog = {"kube-proxy": PROBE_CATALOG[KUBELET]}

        probe = get_probe("kube-proxy", catalog)

        assert probe == PROBE_CATALOG[KUBELET]
        assert probe is not catalog["kube-proxy"]

    def test_unknown_component(self) -> None:
        """Test unknown components raise KeyError."""
        with pytest.raises(KeyError):
            get_probe("kube-proxy")
