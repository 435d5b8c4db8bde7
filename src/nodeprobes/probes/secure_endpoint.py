"""Resolution of secure endpoints for control plane component probes."""

from dataclasses import dataclass
from typing import Any

from nodeprobes.core.exceptions import UnresolvedEndpointError
from nodeprobes.core.models import Probe, Runtime, fill_placeholder
from nodeprobes.utils.args import (
    CERT_DIR_ARGUMENT,
    SECURE_PORT_ARGUMENT,
    TLS_CERT_FILE_ARGUMENT,
    get_arg_value,
)
from nodeprobes.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SecureEndpoint:
    """Resolved port and serving certificate of a component."""

    cert_path: str
    port: str
    custom_port: bool = False


def resolve_secure_endpoint(
    args: Any,
    default_port: str,
    default_cert_dir: str,
    default_cert_file: str,
    runtime: Runtime,
    component: str = "",
) -> SecureEndpoint:
    """Resolve the secure port and certificate path of a component.

    Precedence for the port is an explicit secure-port flag, then the default
    port. For the certificate an explicit tls-cert-file flag is used
    verbatim; otherwise the default file name is joined to the cert-dir flag
    or, failing that, to the runtime-rendered default directory.

    Args:
        args: Component startup arguments
        default_port: Port used when secure-port is not set
        default_cert_dir: Certificate directory template (%s is the runtime)
        default_cert_file: Certificate file name inside the directory
        runtime: Cluster runtime flavor
        component: Component name, for error reporting

    Returns:
        Resolved endpoint

    Raises:
        UnresolvedEndpointError: If the port or certificate path is empty
    """
    port = get_arg_value(args, SECURE_PORT_ARGUMENT)
    custom_port = bool(port)
    if not custom_port:
        port = default_port

    cert_path = get_arg_value(args, TLS_CERT_FILE_ARGUMENT)
    if not cert_path:
        cert_dir = get_arg_value(args, CERT_DIR_ARGUMENT)
        if not cert_dir:
            cert_dir = fill_placeholder(default_cert_dir, runtime.value)
        cert_path = f"{cert_dir}/{default_cert_file}"

    if not cert_path or not port:
        raise UnresolvedEndpointError(component, cert_path, port)

    logger.debug(
        "secure_endpoint_resolved",
        component=component,
        port=port,
        custom_port=custom_port,
        cert_path=cert_path,
    )
    return SecureEndpoint(cert_path=cert_path, port=port, custom_port=custom_port)


def render_secure_probe(probe: Probe, endpoint: SecureEndpoint) -> Probe:
    """Set the CA certificate and fill the port into a probe URL.

    Args:
        probe: Probe whose URL carries a port placeholder
        endpoint: Resolved endpoint

    Returns:
        New rendered probe
    """
    return probe.with_http_get(
        ca_cert=endpoint.cert_path,
        url=fill_placeholder(probe.http_get.url, endpoint.port),
    )
