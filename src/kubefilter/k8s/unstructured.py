"""
Field access helpers for unstructured Kubernetes objects.

SPDX-License-Identifier: Apache-2.0
Copyright 2025 Sebastian Daberdaku
"""

from typing import Any

_MISSING = object()


def nested_field(obj: dict[str, Any], *fields: str) -> tuple[Any, bool]:
    """Walk a path of keys through nested mappings.

    :param obj: Unstructured object
    :param fields: Keys to follow
    :return: Tuple of (value, found)
    :raises TypeError: If an intermediate value is not a mapping
    """
    value: Any = obj
    for i, field in enumerate(fields):
        if not isinstance(value, dict):
            path = ".".join(fields[:i])
            raise TypeError(
                f"{path} accessor error: {value!r} is of type {type(value).__name__}"
            )
        value = value.get(field, _MISSING)
        if value is _MISSING:
            return None, False
    return value, True


def nested_slice(obj: dict[str, Any], *fields: str) -> tuple[list[Any], bool]:
    """Read a list value at a nested path.

    :raises TypeError: If the value is present but not a list
    """
    value, found = nested_field(obj, *fields)
    if not found or value is None:
        return [], False
    if not isinstance(value, list):
        raise TypeError(
            f"{'.'.join(fields)} accessor error: expected list, got {type(value).__name__}"
        )
    return value, True


def nested_string(obj: dict[str, Any], *fields: str) -> tuple[str, bool]:
    """Read a string value at a nested path.

    :raises TypeError: If the value is present but not a string
    """
    value, found = nested_field(obj, *fields)
    if not found or value is None:
        return "", False
    if not isinstance(value, str):
        raise TypeError(
            f"{'.'.join(fields)} accessor error: expected string, got {type(value).__name__}"
        )
    return value, True


def containers(obj: dict[str, Any]) -> list[Any]:
    """Get the container list of a workload or pod.

    Workloads carry a pod template under spec.template; pods carry the
    containers directly in their spec.

    :param obj: Unstructured object
    :return: List of container specs, empty if none were found
    """
    items, found = nested_slice(obj, "spec", "template", "spec", "containers")
    if found:
        return items
    items, _ = nested_slice(obj, "spec", "containers")
    return items


def first_container_image(obj: dict[str, Any]) -> str:
    """Get the image of the first container of a workload or pod.

    :param obj: Unstructured object
    :return: Container image reference
    :raises LookupError: If no container or image is present
    :raises TypeError: If the container spec is malformed
    """
    items = containers(obj)
    if not items:
        raise LookupError("Containers slice not found")
    first = items[0]
    if not isinstance(first, dict):
        raise TypeError("First item in containers slice is not a map")
    image, found = nested_string(first, "image")
    if not found:
        raise LookupError("Container image name field not found")
    return image


def object_name(obj: dict[str, Any]) -> str:
    """Format an object's name as namespace/name, or just name if cluster-scoped."""
    metadata = obj.get("metadata") if isinstance(obj, dict) else None
    if not isinstance(metadata, dict):
        return "<unnamed>"
    name = metadata.get("name", "<unnamed>")
    namespace = metadata.get("namespace")
    return f"{namespace}/{name}" if namespace else name
