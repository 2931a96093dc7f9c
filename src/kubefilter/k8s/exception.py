"""
Custom exceptions and error handling decorators for Kubernetes API operations.

SPDX-License-Identifier: Apache-2.0
Copyright 2025 Sebastian Daberdaku
"""

import json
from functools import wraps
from typing import Any, Callable

from kubernetes.client import ApiException
from kubernetes.dynamic.exceptions import ResourceNotFoundError, ResourceNotUniqueError


class KubernetesException(Exception):
    """Custom exception for Kubernetes client errors."""


class TransportError(KubernetesException):
    """The cluster could not be reached or refused the request."""


class NotFoundError(KubernetesException):
    """The requested resource or resource type does not exist."""


class ConflictError(KubernetesException):
    """The resource already exists or was modified concurrently."""


def _status_message(e: ApiException) -> str | None:
    """Extract the human-readable message from a Status response body.

    :param e: API exception raised by the client
    :return: Status message, or None when the body carries none
    """
    body = getattr(e, "body", None)
    if not body:
        return None
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    try:
        status = json.loads(body)
    except (TypeError, ValueError):
        return None
    if isinstance(status, dict):
        return status.get("message")
    return None


def handle_k8s_api_exception(func) -> Callable[..., Any]:
    """Decorator to translate Kubernetes API exceptions."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except KubernetesException:
            raise
        except ApiException as e:
            message = _status_message(e)
            detail = f": {message}" if message else ""
            match e.status:
                case 401 | 403:
                    raise TransportError(
                        f"'Unauthorized' error when running {func.__name__}. "
                        f"Check RBAC permissions{detail}"
                    ) from e
                case 404:
                    raise NotFoundError(
                        f"'Not found' error when running {func.__name__}{detail}"
                    ) from e
                case 409:
                    raise ConflictError(
                        f"'Conflict' error when running {func.__name__}{detail}"
                    ) from e
                case _:
                    raise TransportError(
                        f"Unexpected error when running {func.__name__}: "
                        f"HTTP {e.status} - {e.reason}{detail}"
                    ) from e
        except ResourceNotFoundError as e:
            raise NotFoundError(
                f"'Not found' error when running {func.__name__}: unknown resource type ({e})"
            ) from e
        except ResourceNotUniqueError as e:
            raise KubernetesException(
                f"Ambiguous resource type when running {func.__name__}: {e}"
            ) from e
        except Exception as e:
            raise TransportError(f"Unexpected error when running {func.__name__}: {e}") from e

    return wrapper
