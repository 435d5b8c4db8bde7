"""Runtime resolver interface."""

from abc import ABC, abstractmethod

from nodeprobes.core.models import Runtime


class RuntimeResolver(ABC):
    """Abstract interface mapping a cluster version to a runtime flavor."""

    @abstractmethod
    def resolve(self, kubernetes_version: str) -> Runtime:
        """Resolve the runtime flavor for a declared Kubernetes version.

        Args:
            kubernetes_version: Declared version (e.g. "v1.27.4+rke2r1")

        Returns:
            Runtime flavor
        """


class VersionRuntimeResolver(RuntimeResolver):
    """Resolve the runtime from the distribution suffix of the version.

    Versions carrying a k3s suffix run k3s; everything else runs rke2.
    """

    def resolve(self, kubernetes_version: str) -> Runtime:
        """Resolve runtime from version string."""
        if Runtime.K3S.value in (kubernetes_version or "").lower():
            return Runtime.K3S
        return Runtime.RKE2
