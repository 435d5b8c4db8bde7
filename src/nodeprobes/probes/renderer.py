"""Rendering of the probe set for a node's execution plan."""

from collections.abc import Mapping
from typing import Any

from nodeprobes.core.config import NodeProbesConfig
from nodeprobes.core.exceptions import UnresolvedEndpointError
from nodeprobes.core.models import ControlPlaneSpec, NodeRole, Probe, ProbeSet
from nodeprobes.interfaces.runtime_resolver import RuntimeResolver, VersionRuntimeResolver
from nodeprobes.probes.catalog import (
    KUBE_CONTROLLER_MANAGER,
    KUBE_SCHEDULER,
    PROBE_CATALOG,
    get_probe,
)
from nodeprobes.probes.secure_endpoint import render_secure_probe, resolve_secure_endpoint
from nodeprobes.probes.selector import select_probes
from nodeprobes.probes.templater import apply_runtime
from nodeprobes.utils.logging import get_logger, log_error, log_operation, node_context

logger = get_logger(__name__)

# Components whose URL carries the secure port and that need a client identity.
SECURE_COMPONENTS = (KUBE_CONTROLLER_MANAGER, KUBE_SCHEDULER)


class ProbeRenderer:
    """Builds the rendered probe set for a single node.

    The renderer holds no per-node state; one instance can render probes for
    any number of nodes, including concurrently.
    """

    def __init__(
        self,
        config: NodeProbesConfig | None = None,
        runtime_resolver: RuntimeResolver | None = None,
        catalog: Mapping[str, Probe] = PROBE_CATALOG,
    ) -> None:
        """Initialize probe renderer.

        Args:
            config: Configuration with secure component defaults
            runtime_resolver: Resolver mapping versions to runtimes
            catalog: Probe templates keyed by component name
        """
        self.config = config or NodeProbesConfig()
        self.runtime_resolver = runtime_resolver or VersionRuntimeResolver()
        self.catalog = catalog

    def render(
        self,
        control_plane: ControlPlaneSpec,
        role: NodeRole,
        node_config: Mapping[str, Any] | None = None,
        node_name: str | None = None,
    ) -> ProbeSet:
        """Render the probes for a node.

        Args:
            control_plane: Cluster control plane descriptor
            role: Node role facts
            node_config: Node config carrying component startup arguments
            node_name: Node name, for log context only

        Returns:
            Fully rendered probes keyed by component name

        Raises:
            UnresolvedEndpointError: If a secure component endpoint cannot be resolved
        """
        node_config = node_config or {}
        runtime = self.runtime_resolver.resolve(control_plane.kubernetes_version)

        with node_context(node=node_name, runtime=runtime.value):
            names = select_probes(role, runtime, control_plane.cni)
            probes = apply_runtime({name: get_probe(name, self.catalog) for name in names}, runtime)

            if role.control_plane:
                for component in SECURE_COMPONENTS:
                    defaults = self.config.get_component(component)
                    try:
                        endpoint = resolve_secure_endpoint(
                            node_config.get(defaults.args_key),
                            defaults.secure_port,
                            defaults.cert_dir,
                            defaults.cert_file,
                            runtime,
                            component=component,
                        )
                    except UnresolvedEndpointError as e:
                        log_error(logger, e, operation="render_probes", component=component)
                        raise
                    probes[component] = render_secure_probe(probes[component], endpoint)

            log_operation(logger, "render_probes", probes=sorted(probes))
        return probes


def render_probes(
    control_plane: ControlPlaneSpec,
    role: NodeRole,
    node_config: Mapping[str, Any] | None = None,
    config: NodeProbesConfig | None = None,
) -> ProbeSet:
    """Render the probes for a node with the default runtime resolver.

    Args:
        control_plane: Cluster control plane descriptor
        role: Node role facts
        node_config: Node config carrying component startup arguments
        config: Optional configuration overriding secure component defaults

    Returns:
        Fully rendered probes keyed by component name
    """
    return ProbeRenderer(config=config).render(control_plane, role, node_config)


def dump_probes(probes: Mapping[str, Probe]) -> dict[str, dict[str, Any]]:
    """Serialize probes to the plan schema, omitting unset certificate fields."""
    return {
        name: probe.model_dump(by_alias=True, exclude_defaults=True)
        for name, probe in probes.items()
    }
