"""
Kubernetes dynamic API client wrapper with error handling and resource operations.

SPDX-License-Identifier: Apache-2.0
Copyright 2025 Sebastian Daberdaku
"""

import logging
from typing import Any

from kubernetes import client as k8s
from kubernetes import config as k8s_config
from kubernetes.client import ApiException
from kubernetes.dynamic import DynamicClient
from kubernetes.dynamic.resource import Resource

from kubefilter.k8s.coordinate import ResourceCoordinate
from kubefilter.k8s.exception import KubernetesException, handle_k8s_api_exception
from kubefilter.settings import KUBE_CONTEXT, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class KubernetesClient:
    """Wrapper for dynamic Kubernetes API operations."""

    def __init__(self, context: str = None, request_timeout: float = None) -> None:
        """Initialize Kubernetes client.

        :param context: Kubeconfig context used outside the cluster
        :param request_timeout: Default per-request timeout in seconds
        """
        self.context = KUBE_CONTEXT if context is None else context
        self.request_timeout = (
            REQUEST_TIMEOUT.total_seconds() if request_timeout is None else request_timeout
        )
        try:
            k8s_config.load_incluster_config()
            logger.info("Loaded in-cluster Kubernetes config")
        except k8s_config.ConfigException:
            try:
                k8s_config.load_kube_config(context=self.context)
                logger.info("Loaded local Kubernetes config")
            except k8s_config.ConfigException as e:
                raise KubernetesException(
                    f"Failed to load Kubernetes config: {e}. Ensure you have a valid "
                    f"kubeconfig file or are running in a Kubernetes cluster"
                ) from e
            except Exception as e:
                raise KubernetesException(f"Unexpected error loading kube config: {e}") from e

        try:
            self.dynamic: DynamicClient = DynamicClient(k8s.ApiClient())
        except Exception as e:
            raise KubernetesException(f"Failed to discover cluster API resources: {e}") from e
        logger.info("Kubernetes client initialized")

    def _resource(self, coordinate: ResourceCoordinate) -> Resource:
        """Resolve a coordinate to a discovered API resource.

        The core group is served under the "api" prefix, named groups under "apis".
        """
        return self.dynamic.resources.get(
            prefix="apis" if coordinate.group else "api",
            group=coordinate.group or None,
            api_version=coordinate.version,
            name=coordinate.resource,
        )

    @staticmethod
    def _namespace(resource: Resource, coordinate: ResourceCoordinate) -> str | None:
        return (coordinate.namespace or None) if resource.namespaced else None

    def _timeout(self, timeout: float | None) -> float | None:
        return self.request_timeout if timeout is None else timeout

    @handle_k8s_api_exception
    def list_resources(
        self, coordinate: ResourceCoordinate, timeout: float = None
    ) -> list[dict[str, Any]]:
        """List every object of a collection.

        :param coordinate: Collection to list
        :param timeout: Request timeout in seconds, overrides the client default
        :return: List of objects as plain dictionaries, possibly empty
        """
        resource = self._resource(coordinate)
        result = self.dynamic.get(
            resource,
            namespace=self._namespace(resource, coordinate),
            _request_timeout=self._timeout(timeout),
        )
        items = result.to_dict().get("items") or []
        logger.info(f"Found {len(items)} {coordinate}")
        return items

    @handle_k8s_api_exception
    def get_resource(
        self, coordinate: ResourceCoordinate, name: str, timeout: float = None
    ) -> dict[str, Any]:
        """Get a single object by name.

        :param coordinate: Collection holding the object
        :param name: Object name
        :param timeout: Request timeout in seconds, overrides the client default
        :return: Object as a plain dictionary
        """
        resource = self._resource(coordinate)
        result = self.dynamic.get(
            resource,
            name=name,
            namespace=self._namespace(resource, coordinate),
            _request_timeout=self._timeout(timeout),
        )
        return result.to_dict()

    @handle_k8s_api_exception
    def create_resource(
        self, coordinate: ResourceCoordinate, body: dict[str, Any], timeout: float = None
    ) -> dict[str, Any]:
        """Create an object from a manifest document.

        :param coordinate: Collection the object belongs to
        :param body: Manifest document
        :param timeout: Request timeout in seconds, overrides the client default
        :return: Created object as returned by the API server
        """
        resource = self._resource(coordinate)
        result = self.dynamic.create(
            resource,
            body=body,
            namespace=self._namespace(resource, coordinate),
            _request_timeout=self._timeout(timeout),
        )
        logger.info(f"Created {body['kind']} {body['metadata']['name']} in {coordinate}")
        return result.to_dict()

    @handle_k8s_api_exception
    def delete_resource(
        self, coordinate: ResourceCoordinate, name: str, timeout: float = None
    ) -> bool:
        """Delete an object by name.

        :param coordinate: Collection holding the object
        :param name: Object name
        :param timeout: Request timeout in seconds, overrides the client default
        :return: True if deleted, False if it was already gone
        """
        resource = self._resource(coordinate)
        try:
            self.dynamic.delete(
                resource,
                name=name,
                namespace=self._namespace(resource, coordinate),
                _request_timeout=self._timeout(timeout),
            )
        except ApiException as e:
            if e.status == 404:
                logger.info(f"{name} already deleted from {coordinate}")
                return False
            raise e
        logger.info(f"Deleted {name} from {coordinate}")
        return True

