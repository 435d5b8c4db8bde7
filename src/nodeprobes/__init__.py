"""Node health-check probe rendering for cluster provisioning plans.

Decides which component probes apply to a node and renders them with the
node's runtime paths and operator-supplied secure endpoint overrides.
"""

from nodeprobes.core.exceptions import NodeProbesError, UnresolvedEndpointError
from nodeprobes.core.models import ControlPlaneSpec, HTTPGetAction, NodeRole, Probe, Runtime
from nodeprobes.probes.renderer import ProbeRenderer, dump_probes, render_probes

__version__ = "0.1.0"
__author__ = "Platform Engineering Team"
__license__ = "Apache-2.0"

__all__ = [
    "ControlPlaneSpec",
    "HTTPGetAction",
    "NodeProbesError",
    "NodeRole",
    "Probe",
    "ProbeRenderer",
    "Runtime",
    "UnresolvedEndpointError",
    "dump_probes",
    "render_probes",
]
