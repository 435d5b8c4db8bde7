"""Catalog of probe templates for cluster components."""

from collections.abc import Mapping
from types import MappingProxyType

from nodeprobes.core.models import HTTPGetAction, Probe

CALICO = "calico"
ETCD = "etcd"
KUBE_APISERVER = "kube-apiserver"
KUBE_CONTROLLER_MANAGER = "kube-controller-manager"
KUBE_SCHEDULER = "kube-scheduler"
KUBELET = "kubelet"


def _probe(
    url: str, ca_cert: str = "", client_cert: str = "", client_key: str = ""
) -> Probe:
    return Probe(
        initial_delay_seconds=1,
        timeout_seconds=5,
        success_threshold=1,
        failure_threshold=2,
        http_get=HTTPGetAction(
            url=url, ca_cert=ca_cert, client_cert=client_cert, client_key=client_key
        ),
    )


# %s in certificate paths is the runtime, %s in URLs is the secure port.
PROBE_CATALOG: Mapping[str, Probe] = MappingProxyType(
    {
        CALICO: _probe("http://127.0.0.1:9099/liveness"),
        ETCD: _probe("http://127.0.0.1:2381/health"),
        KUBE_APISERVER: _probe(
            "https://127.0.0.1:6443/readyz",
            ca_cert="/var/lib/rancher/%s/server/tls/server-ca.crt",
            client_cert="/var/lib/rancher/%s/server/tls/client-kube-apiserver.crt",
            client_key="/var/lib/rancher/%s/server/tls/client-kube-apiserver.key",
        ),
        KUBE_CONTROLLER_MANAGER: _probe("https://127.0.0.1:%s/healthz"),
        KUBE_SCHEDULER: _probe("https://127.0.0.1:%s/healthz"),
        KUBELET: _probe("http://127.0.0.1:10248/healthz"),
    }
)


def get_probe(name: str, catalog: Mapping[str, Probe] = PROBE_CATALOG) -> Probe:
    """Get a copy of a catalog probe template.

    Args:
        name: Component name
        catalog: Catalog to read from

    Returns:
        Probe template

    Raises:
        KeyError: If the component has no probe in the catalog
    """
    return catalog[name].model_copy(deep=True)
