"""Interfaces for collaborators outside the probe rendering core."""

from nodeprobes.interfaces.role_classifier import LabelRoleClassifier, RoleClassifier
from nodeprobes.interfaces.runtime_resolver import RuntimeResolver, VersionRuntimeResolver

__all__ = [
    "LabelRoleClassifier",
    "RoleClassifier",
    "RuntimeResolver",
    "VersionRuntimeResolver",
]
