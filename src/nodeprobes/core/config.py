"""Configuration management for nodeprobes."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from nodeprobes.core.exceptions import ConfigurationError
from nodeprobes.probes.catalog import KUBE_CONTROLLER_MANAGER, KUBE_SCHEDULER


class SecureComponentDefaults(BaseModel):
    """Default secure endpoint settings for a control plane component."""

    args_key: str = Field(..., description="Node config key holding the component's arguments")
    secure_port: str = Field(..., description="Default secure port")
    cert_dir: str = Field(..., description="Default cert dir, %s is replaced by the runtime")
    cert_file: str = Field(..., description="Default serving certificate file name")

    @field_validator("secure_port", mode="before")
    @classmethod
    def port_to_str(cls, value: Any) -> Any:
        """Accept ports written as plain YAML numbers."""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


DEFAULT_SECURE_COMPONENTS: dict[str, dict[str, str]] = {
    KUBE_CONTROLLER_MANAGER: {
        "args_key": "kube-controller-manager-arg",
        "secure_port": "10257",
        "cert_dir": "/var/lib/rancher/%s/server/tls/kube-controller-manager",
        "cert_file": "kube-controller-manager.crt",
    },
    KUBE_SCHEDULER: {
        "args_key": "kube-scheduler-arg",
        "secure_port": "10259",
        "cert_dir": "/var/lib/rancher/%s/server/tls/kube-scheduler",
        "cert_file": "kube-scheduler.crt",
    },
}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "json"
    output: str = "stdout"


class NodeProbesConfig(BaseModel):
    """Main nodeprobes configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    secure_components: dict[str, SecureComponentDefaults] = Field(
        default_factory=lambda: {
            name: SecureComponentDefaults(**values)
            for name, values in DEFAULT_SECURE_COMPONENTS.items()
        }
    )

    @field_validator("secure_components", mode="before")
    @classmethod
    def merge_component_defaults(cls, value: Any) -> Any:
        """Merge partial component overrides over the built-in defaults."""
        if not isinstance(value, dict):
            return value

        merged: dict[str, Any] = {name: dict(v) for name, v in DEFAULT_SECURE_COMPONENTS.items()}
        for name, override in value.items():
            if isinstance(override, BaseModel):
                override = override.model_dump()
            if isinstance(override, dict):
                merged[name] = {**merged.get(name, {}), **override}
            else:
                merged[name] = override
        return merged

    @classmethod
    def from_file(cls, path: str | Path) -> "NodeProbesConfig":
        """Load configuration from YAML file.

        Args:
            path: Path to configuration file

        Returns:
            NodeProbesConfig instance

        Raises:
            ConfigurationError: If file cannot be loaded or parsed
        """
        config_path = Path(path).expanduser()

        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with config_path.open() as f:
                data = yaml.safe_load(f)
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

        try:
            return cls(**(data or {}))
        except Exception as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def get_component(self, component: str) -> SecureComponentDefaults:
        """Get secure endpoint defaults for a component.

        Args:
            component: Component name

        Returns:
            Component defaults

        Raises:
            ConfigurationError: If the component has no defaults configured
        """
        try:
            return self.secure_components[component]
        except KeyError as e:
            raise ConfigurationError(f"No secure endpoint defaults for {component}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary.

        Returns:
            Dictionary representation
        """
        return self.model_dump()
