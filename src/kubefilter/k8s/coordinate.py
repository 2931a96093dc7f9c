"""
Resource coordinates identifying collections of cluster objects.

SPDX-License-Identifier: Apache-2.0
Copyright 2025 Sebastian Daberdaku
"""

import re
from dataclasses import dataclass
from typing import Any

_IDENTIFIER = re.compile(r"^[a-z0-9]([a-z0-9.-]*[a-z0-9])?$")
_NAMESPACE = re.compile(r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?$")


@dataclass(frozen=True)
class ResourceCoordinate:
    """Group, version, plural resource name and namespace of a collection.

    An empty group is the core API group. An empty namespace addresses
    cluster-scoped resources, or all namespaces for namespaced ones.
    """

    group: str
    version: str
    resource: str
    namespace: str = ""

    def __post_init__(self) -> None:
        if self.group and not _IDENTIFIER.match(self.group):
            raise ValueError(f"Invalid API group '{self.group}'")
        if not self.version or not _IDENTIFIER.match(self.version):
            raise ValueError(f"Invalid API version '{self.version}'")
        if not self.resource or not _IDENTIFIER.match(self.resource):
            raise ValueError(f"Invalid resource name '{self.resource}'")
        if self.namespace and (len(self.namespace) > 63 or not _NAMESPACE.match(self.namespace)):
            raise ValueError(f"Invalid namespace '{self.namespace}'")

    @property
    def api_version(self) -> str:
        """Render the apiVersion string, e.g. "apps/v1" or "v1"."""
        return f"{self.group}/{self.version}" if self.group else self.version

    def with_namespace(self, namespace: str) -> "ResourceCoordinate":
        """Return the same collection in another namespace."""
        return ResourceCoordinate(self.group, self.version, self.resource, namespace)

    def __str__(self) -> str:
        scope = f" in namespace '{self.namespace}'" if self.namespace else ""
        return f"{self.resource}.{self.api_version}{scope}"

    @classmethod
    def for_manifest(
        cls, document: dict[str, Any], default_namespace: str = "default"
    ) -> "ResourceCoordinate":
        """Derive the collection a manifest document belongs to.

        :param document: Decoded manifest document
        :param default_namespace: Namespace used when the document has none
        :return: Coordinate of the document's collection
        """
        group, _, version = document.get("apiVersion", "").rpartition("/")
        metadata = document.get("metadata") or {}
        return cls(
            group=group,
            version=version or "v1",
            resource=pluralize(document["kind"]),
            namespace=metadata.get("namespace") or default_namespace,
        )


def pluralize(kind: str) -> str:
    """Guess the plural resource name for a kind.

    :param kind: Object kind (e.g., "Deployment", "Ingress", "NetworkPolicy")
    :return: Lowercase plural resource name (e.g., "deployments", "ingresses")
    """
    name = kind.lower()
    if name.endswith(("ss", "x", "z", "ch", "sh")):
        return f"{name}es"
    if name.endswith("s"):
        return name
    if name.endswith("y") and name[-2:-1] not in ("a", "e", "i", "o", "u"):
        return f"{name[:-1]}ies"
    return f"{name}s"
