"""Custom exceptions for nodeprobes."""


class NodeProbesError(Exception):
    """Base exception for all nodeprobes errors."""


class ConfigurationError(NodeProbesError):
    """Configuration-related errors."""


class UnresolvedEndpointError(NodeProbesError):
    """Secure probe endpoint could not be resolved.

    Attributes:
        component: Component whose probe was being rendered
        cert_path: Resolved certificate path (may be empty)
        port: Resolved secure port (may be empty)
    """

    def __init__(self, component: str, cert_path: str, port: str):
        """Initialize unresolved endpoint error.

        Args:
            component: Component name
            cert_path: Resolved certificate path
            port: Resolved secure port
        """
        super().__init__(
            f"CA cert ({cert_path}) or port ({port}) not defined properly for {component}"
        )
        self.component = component
        self.cert_path = cert_path
        self.port = port
