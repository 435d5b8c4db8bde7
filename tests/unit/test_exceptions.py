"""Unit tests for custom exceptions."""

import pytest

from nodeprobes.core.exceptions import (
    ConfigurationError,
    NodeProbesError,
    UnresolvedEndpointError,
)


class TestExceptionHierarchy:
    """Tests for exception hierarchy and inheritance."""

    def test_all_exceptions_inherit_from_nodeprobes_error(self) -> None:
        """Test that all custom exceptions inherit from NodeProbesError."""
        for exc_class in (ConfigurationError, UnresolvedEndpointError):
            assert issubclass(exc_class, NodeProbesError)

    def test_nodeprobes_error_inherits_from_exception(self) -> None:
        """Test that NodeProbesError inherits from Exception."""
        assert issubclass(NodeProbesError, Exception)

    def test_can_catch_with_base_exception(self) -> None:
        """Test that specific exceptions can be caught with NodeProbesError."""
        with pytest.raises(NodeProbesError):
            raise ConfigurationError("Test error")

        with pytest.raises(NodeProbesError):
            raise UnresolvedEndpointError("kube-scheduler", "/tmp/cert.crt", "")

    def test_exception_messages(self) -> None:
        """Test that exception messages are preserved."""
        error_message = "This is a test error message"
        exc = ConfigurationError(error_message)

        assert str(exc) == error_message


class TestUnresolvedEndpointError:
    """Tests for UnresolvedEndpointError details."""

    def test_attributes(self) -> None:
        """Test that the component and resolved values are kept."""
        exc = UnresolvedEndpointError("kube-controller-manager", "/certs/kcm.crt", "")

        assert exc.component == "kube-controller-manager"
        assert exc.cert_path == "/certs/kcm.crt"
        assert exc.port == ""

    def test_message_names_component_and_values(self) -> None:
        """Test that the message identifies what could not be resolved."""
        exc = UnresolvedEndpointError("kube-scheduler", "/certs/ks.crt", "")

        message = str(exc)
        assert "kube-scheduler" in message
        assert "CA cert (/certs/ks.crt)" in message
        assert "port ()" in message
