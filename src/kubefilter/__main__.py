"""
Main entry point for kubefilter when run as a module.

SPDX-License-Identifier: Apache-2.0
Copyright 2025 Sebastian Daberdaku
"""
import logging
import sys

from kubefilter.explorer import ManifestExplorer
from kubefilter.k8s import KubernetesException, ManifestException
from kubefilter.logging import setup_logging
from kubefilter.query import QueryException

logger = logging.getLogger(__name__)


def main() -> None:
    """Run kubefilter."""
    setup_logging()
    try:
        explorer = ManifestExplorer()
        explorer.run()
    except (KubernetesException, ManifestException, QueryException, ValueError) as e:
        logger.error(f"kubefilter failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
