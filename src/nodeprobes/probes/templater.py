"""Runtime substitution in probe certificate paths."""

from collections.abc import Mapping

from nodeprobes.core.models import PLACEHOLDER, Probe, ProbeSet, Runtime, fill_placeholder


def replace_runtime(value: str, runtime: Runtime) -> str:
    """Fill the runtime into a path template, leaving plain paths untouched."""
    if PLACEHOLDER not in value:
        return value
    return fill_placeholder(value, runtime.value)


def apply_runtime(probes: Mapping[str, Probe], runtime: Runtime) -> ProbeSet:
    """Render runtime-dependent certificate paths for every probe.

    Args:
        probes: Probes keyed by component name
        runtime: Cluster runtime flavor

    Returns:
        New probe set; the input mapping and its probes are not modified
    """
    result: ProbeSet = {}
    for name, probe in probes.items():
        action = probe.http_get
        result[name] = probe.with_http_get(
            ca_cert=replace_runtime(action.ca_cert, runtime),
            client_cert=replace_runtime(action.client_cert, runtime),
            client_key=replace_runtime(action.client_key, runtime),
        )
    return result
