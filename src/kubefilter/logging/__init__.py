"""
Logging module exports for setup and configuration functions.

SPDX-License-Identifier: Apache-2.0
Copyright 2025 Sebastian Daberdaku
"""

from kubefilter.logging.logging import setup_logging

__all__ = ["setup_logging"]
