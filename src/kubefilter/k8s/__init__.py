"""
Kubernetes module exports for client, coordinates, manifests and exception classes.

SPDX-License-Identifier: Apache-2.0
Copyright 2025 Sebastian Daberdaku
"""

from kubefilter.k8s.client import KubernetesClient
from kubefilter.k8s.coordinate import ResourceCoordinate
from kubefilter.k8s.exception import (
    ConflictError,
    KubernetesException,
    NotFoundError,
    TransportError,
)
from kubefilter.k8s.manifest import ManifestException, load_manifest

__all__ = [
    "ConflictError",
    "KubernetesClient",
    "KubernetesException",
    "ManifestException",
    "NotFoundError",
    "ResourceCoordinate",
    "TransportError",
    "load_manifest",
]
