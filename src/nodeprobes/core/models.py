"""Core data models for nodeprobes."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

PLACEHOLDER = "%s"

ETCD_ROLE_LABEL = "rke.cattle.io/etcd-role"
CONTROL_PLANE_ROLE_LABEL = "rke.cattle.io/control-plane-role"
WORKER_ROLE_LABEL = "rke.cattle.io/worker-role"


def fill_placeholder(template: str, value: str) -> str:
    """Replace the single placeholder in a template.

    Args:
        template: Template string, possibly containing a placeholder
        value: Value to substitute

    Returns:
        Template with the placeholder filled, or the template unchanged
        when it has no placeholder
    """
    return template.replace(PLACEHOLDER, value, 1)


class Runtime(str, Enum):
    """Cluster runtime flavor."""

    K3S = "k3s"
    RKE2 = "rke2"


class HTTPGetAction(BaseModel):
    """HTTP check performed by a probe."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str
    ca_cert: str = Field(default="", alias="caCert")
    client_cert: str = Field(default="", alias="clientCert")
    client_key: str = Field(default="", alias="clientKey")


class Probe(BaseModel):
    """Node-level health check definition."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    initial_delay_seconds: int = Field(..., ge=0, alias="initialDelaySeconds")
    timeout_seconds: int = Field(..., ge=0, alias="timeoutSeconds")
    success_threshold: int = Field(..., ge=0, alias="successThreshold")
    failure_threshold: int = Field(..., ge=0, alias="failureThreshold")
    http_get: HTTPGetAction = Field(..., alias="httpGet")

    def has_placeholders(self) -> bool:
        """Check whether any URL or certificate field is still a template.

        Returns:
            True if a placeholder remains unresolved
        """
        action = self.http_get
        return any(
            PLACEHOLDER in value
            for value in (action.url, action.ca_cert, action.client_cert, action.client_key)
        )

    def with_http_get(self, **updates: Any) -> "Probe":
        """Return a copy of this probe with HTTP action fields replaced.

        Args:
            **updates: HTTPGetAction field values to replace

        Returns:
            New Probe instance
        """
        return self.model_copy(update={"http_get": self.http_get.model_copy(update=updates)})


ProbeSet = dict[str, Probe]


class NodeRole(BaseModel):
    """Role facts for a single cluster node."""

    model_config = ConfigDict(frozen=True)

    etcd: bool = False
    control_plane: bool = False
    worker: bool = False

    @property
    def is_etcd_only(self) -> bool:
        """Whether the node runs etcd and nothing else."""
        return self.etcd and not self.control_plane and not self.worker

    @classmethod
    def from_labels(cls, labels: dict[str, str] | None) -> "NodeRole":
        """Build role facts from machine role labels.

        Args:
            labels: Machine labels

        Returns:
            NodeRole instance
        """
        labels = labels or {}
        return cls(
            etcd=labels.get(ETCD_ROLE_LABEL) == "true",
            control_plane=labels.get(CONTROL_PLANE_ROLE_LABEL) == "true",
            worker=labels.get(WORKER_ROLE_LABEL) == "true",
        )


class ControlPlaneSpec(BaseModel):
    """Cluster control plane descriptor."""

    kubernetes_version: str = Field(..., description="Declared Kubernetes version")
    machine_global_config: dict[str, Any] = Field(
        default_factory=dict, description="Config applied to every machine"
    )

    @property
    def cni(self) -> str:
        """Configured CNI name, empty when unset."""
        value = self.machine_global_config.get("cni")
        return "" if value is None else str(value)
