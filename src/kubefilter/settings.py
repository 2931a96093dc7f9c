"""
Environment variable parsing and configuration management for kubefilter.

SPDX-License-Identifier: Apache-2.0
Copyright 2025 Sebastian Daberdaku
"""

import os
import re
from datetime import timedelta


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable.

    :param key: Environment variable name
    :param default: Default value if not set
    :return: Boolean value
    """
    value = os.getenv(key, str(default)).lower()
    return value in ("true", "1", "yes", "on")


def _parse_duration(duration_str: str) -> timedelta:
    """Parse duration string like '10s', '1m', '2h' into timedelta.

    :param duration_str: Duration string (e.g., "30s", "1m", "2h")
    :return: Parsed timedelta object
    """
    match = re.match(r"^(\d+)([smhd])$", duration_str.strip().lower())
    if not match:
        return timedelta(seconds=30)  # Default fallback

    value, unit = int(match.group(1)), match.group(2)

    match unit:
        case "s":
            return timedelta(seconds=value)
        case "m":
            return timedelta(minutes=value)
        case "h":
            return timedelta(hours=value)
        case "d":
            return timedelta(days=value)
        case _:
            return timedelta(seconds=30)  # Default fallback


"""kubefilter Settings"""
MANIFEST_PATH = os.getenv("MANIFEST_PATH", "my-deployment.yaml")
QUERY = os.getenv("QUERY", '.metadata.labels["app"] == "nginx"')
QUERY_GROUP = os.getenv("QUERY_GROUP", "apps").strip()
QUERY_VERSION = os.getenv("QUERY_VERSION", "v1").strip()
QUERY_RESOURCE = os.getenv("QUERY_RESOURCE", "deployments").strip()
QUERY_NAMESPACE = os.getenv("QUERY_NAMESPACE", "").strip()
DEFAULT_NAMESPACE = os.getenv("DEFAULT_NAMESPACE", "default").strip()
DELETE_AFTER_INSPECT = _get_bool_env("DELETE_AFTER_INSPECT", True)
REQUEST_TIMEOUT = _parse_duration(os.getenv("REQUEST_TIMEOUT", "30s"))
KUBE_CONTEXT = os.getenv("KUBE_CONTEXT") or None
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
ENABLE_JSON_LOGS = _get_bool_env("ENABLE_JSON_LOGS", False)
