"""
ManifestExplorer orchestration class for applying, inspecting and removing manifests.

SPDX-License-Identifier: Apache-2.0
Copyright 2025 Sebastian Daberdaku
"""

import logging
from typing import Any

from kubefilter.k8s import (
    ConflictError,
    KubernetesClient,
    KubernetesException,
    NotFoundError,
    ResourceCoordinate,
    load_manifest,
)
from kubefilter.k8s.unstructured import first_container_image, object_name
from kubefilter.query import Query, QueryException, compile_query, get_resources_by_query
from kubefilter.settings import (
    DEFAULT_NAMESPACE,
    DELETE_AFTER_INSPECT,
    MANIFEST_PATH,
    QUERY,
    QUERY_GROUP,
    QUERY_NAMESPACE,
    QUERY_RESOURCE,
    QUERY_VERSION,
)

logger = logging.getLogger(__name__)


class ManifestExplorer:
    """Applies a manifest, inspects the cluster and removes the manifest again."""

    def __init__(
        self,
        manifest_path: str = None,
        query: str = None,
        query_coordinate: ResourceCoordinate = None,
        default_namespace: str = None,
        delete_after_inspect: bool = None,
    ) -> None:
        """Initialize ManifestExplorer.

        :param manifest_path: Path of the manifest to apply
        :param query: jq expression selecting resources to report
        :param query_coordinate: Collection the query runs against; an empty
            namespace means the namespace of the first manifest document
        :param default_namespace: Namespace for documents without one
        :param delete_after_inspect: Delete the applied resources at the end
        """
        self.manifest_path = MANIFEST_PATH if manifest_path is None else manifest_path
        self.query = QUERY if query is None else query
        self.query_coordinate = (
            ResourceCoordinate(QUERY_GROUP, QUERY_VERSION, QUERY_RESOURCE, QUERY_NAMESPACE)
            if query_coordinate is None
            else query_coordinate
        )
        self.default_namespace = (
            DEFAULT_NAMESPACE if default_namespace is None else default_namespace
        )
        self.delete_after_inspect = (
            DELETE_AFTER_INSPECT if delete_after_inspect is None else delete_after_inspect
        )
        self.k8s_client = KubernetesClient()
        logger.info(
            f"ManifestExplorer initialized with manifest: {self.manifest_path}, "
            f"delete_after_inspect: {self.delete_after_inspect}"
        )

    def run(self) -> None:
        """Run ManifestExplorer."""
        logger.info(f"Starting kubefilter run for {self.manifest_path}...")
        documents = load_manifest(self.manifest_path)
        # Invalid queries and coordinates are rejected before the cluster is modified
        query = compile_query(self.query)
        planned = [
            (document, ResourceCoordinate.for_manifest(document, self.default_namespace))
            for document in documents
        ]

        applied: list[tuple[dict[str, Any], ResourceCoordinate]] = []
        for document, coordinate in planned:
            self.apply(document, coordinate)
            self.report_status(document, coordinate)
            self.report_images(coordinate)
            applied.append((document, coordinate))

        if applied:
            query_coordinate = self.query_coordinate
            if not query_coordinate.namespace:
                query_coordinate = query_coordinate.with_namespace(applied[0][1].namespace)
            self.report_matches(query, query_coordinate)

        if self.delete_after_inspect:
            for document, coordinate in applied:
                self.delete(document, coordinate)
        for document, coordinate in applied:
            self.report_status(document, coordinate)
        logger.info("Finished kubefilter run.")

    def apply(self, document: dict[str, Any], coordinate: ResourceCoordinate) -> bool:
        """Create the object described by a manifest document.

        :param document: Manifest document
        :param coordinate: Collection the object belongs to
        :return: True if the object was created
        """
        name = document["metadata"]["name"]
        try:
            self.k8s_client.create_resource(coordinate, document)
        except ConflictError:
            logger.warning(f"{document['kind']} '{name}' already exists in {coordinate}")
            return False
        except KubernetesException as e:
            logger.error(f"Failed to apply {document['kind']} '{name}': {e}")
            return False
        logger.info(f"Manifest {self.manifest_path} applied {document['kind']} '{name}'")
        return True

    def report_status(self, document: dict[str, Any], coordinate: ResourceCoordinate) -> bool:
        """Report whether the object of a manifest document exists.

        :param document: Manifest document
        :param coordinate: Collection the object belongs to
        :return: True if the object was found
        """
        kind, name = document["kind"], document["metadata"]["name"]
        try:
            self.k8s_client.get_resource(coordinate, name)
        except NotFoundError:
            logger.info(f"{kind} '{name}' not found in {coordinate}")
            return False
        except KubernetesException as e:
            logger.error(f"Error getting {kind} '{name}': {e}")
            return False
        logger.info(f"Found {kind} '{name}' in {coordinate}")
        return True

    def report_images(self, coordinate: ResourceCoordinate) -> list[str]:
        """Report the first container image of every object in a collection.

        :param coordinate: Collection to inspect
        :return: Images found, in listing order
        """
        try:
            items = self.k8s_client.list_resources(coordinate)
        except KubernetesException as e:
            logger.error(f"Failed to list {coordinate}: {e}")
            return []

        images = []
        for item in items:
            try:
                image = first_container_image(item)
            except (LookupError, TypeError) as e:
                logger.warning(f"Skipping {object_name(item)}: {e}")
                continue
            logger.info(f"{object_name(item)}: {image}")
            images.append(image)
        return images

    def report_matches(self, query: Query, coordinate: ResourceCoordinate) -> list[str]:
        """Report the objects of a collection selected by a query.

        :param query: Compiled query
        :param coordinate: Collection to filter
        :return: Names of the selected objects
        """
        try:
            selected = get_resources_by_query(self.k8s_client, coordinate, query)
        except (KubernetesException, QueryException) as e:
            logger.error(f"Failed to filter {coordinate}: {e}")
            return []

        names = [object_name(item) for item in selected]
        for name in names:
            logger.info(f"Matched {name}")
        return names

    def delete(self, document: dict[str, Any], coordinate: ResourceCoordinate) -> bool:
        """Delete the object of a manifest document.

        :param document: Manifest document
        :param coordinate: Collection the object belongs to
        :return: True if the object was deleted by this call
        """
        name = document["metadata"]["name"]
        try:
            deleted = self.k8s_client.delete_resource(coordinate, name)
        except KubernetesException as e:
            logger.error(f"Failed to delete {document['kind']} '{name}': {e}")
            return False
        if deleted:
            logger.info(f"Manifest {self.manifest_path} deleted {document['kind']} '{name}'")
        return deleted
