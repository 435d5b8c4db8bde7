"""Node role classifier interface."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from nodeprobes.core.models import NodeRole


class RoleClassifier(ABC):
    """Abstract interface deriving role facts from an opaque node handle."""

    @abstractmethod
    def classify(self, node: Any) -> NodeRole:
        """Classify a node.

        Args:
            node: Node handle understood by the implementation

        Returns:
            Role facts for the node
        """


class LabelRoleClassifier(RoleClassifier):
    """Classify nodes by their rke.cattle.io role labels.

    Accepts either a label mapping or any object exposing ``labels`` or
    ``metadata.labels`` (such as a kubernetes client model).
    """

    def classify(self, node: Any) -> NodeRole:
        """Classify node from its labels."""
        return NodeRole.from_labels(self._labels(node))

    @staticmethod
    def _labels(node: Any) -> dict[str, str]:
        if node is None:
            return {}
        if isinstance(node, Mapping):
            return dict(node)

        labels = getattr(node, "labels", None)
        if labels is None:
            metadata = getattr(node, "metadata", None)
            labels = getattr(metadata, "labels", None)
        return dict(labels or {})
