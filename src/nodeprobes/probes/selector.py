"""Selection of the probes that apply to a node."""

from collections.abc import Callable
from dataclasses import dataclass

from nodeprobes.core.models import NodeRole, Runtime
from nodeprobes.probes.catalog import (
    CALICO,
    ETCD,
    KUBE_APISERVER,
    KUBE_CONTROLLER_MANAGER,
    KUBE_SCHEDULER,
    KUBELET,
)
from nodeprobes.utils.logging import get_logger

logger = get_logger(__name__)

CALICO_CNIS = frozenset({"", "calico", "calico+multus"})


@dataclass(frozen=True)
class SelectionContext:
    """Inputs the selection rules are evaluated against."""

    role: NodeRole
    runtime: Runtime
    cni: str


@dataclass(frozen=True)
class SelectionRule:
    """Includes a group of probes when its predicate holds."""

    probes: tuple[str, ...]
    predicate: Callable[[SelectionContext], bool]
    description: str


def is_calico(runtime: Runtime, cni: str | None) -> bool:
    """Whether the cluster CNI resolves to Calico.

    An empty CNI means the runtime default, which is Calico for rke2 only.
    """
    if runtime != Runtime.RKE2:
        return False
    return (cni or "") in CALICO_CNIS


SELECTION_RULES: tuple[SelectionRule, ...] = (
    SelectionRule(
        probes=(ETCD,),
        predicate=lambda ctx: ctx.runtime != Runtime.K3S and ctx.role.etcd,
        description="etcd members outside k3s",
    ),
    SelectionRule(
        probes=(KUBE_APISERVER, KUBE_CONTROLLER_MANAGER, KUBE_SCHEDULER),
        predicate=lambda ctx: ctx.role.control_plane,
        description="control plane nodes",
    ),
    SelectionRule(
        probes=(KUBELET,),
        # k3s does not run the kubelet on etcd only nodes
        predicate=lambda ctx: not (ctx.role.is_etcd_only and ctx.runtime == Runtime.K3S),
        description="every node running a kubelet",
    ),
    SelectionRule(
        probes=(CALICO,),
        predicate=lambda ctx: not ctx.role.is_etcd_only and is_calico(ctx.runtime, ctx.cni),
        description="non etcd-only nodes using calico",
    ),
)


def select_probes(
    role: NodeRole,
    runtime: Runtime,
    cni: str | None = "",
    rules: tuple[SelectionRule, ...] = SELECTION_RULES,
) -> list[str]:
    """Select the probe names applicable to a node.

    Args:
        role: Node role facts
        runtime: Cluster runtime flavor
        cni: Configured CNI name, empty for the runtime default
        rules: Ordered selection rules

    Returns:
        Ordered, de-duplicated probe names
    """
    context = SelectionContext(role=role, runtime=runtime, cni=cni or "")
    selected: list[str] = []
    for rule in rules:
        if not rule.predicate(context):
            continue
        selected.extend(name for name in rule.probes if name not in selected)

    logger.debug("probes_selected", runtime=runtime.value, cni=context.cni, probes=selected)
    return selected
