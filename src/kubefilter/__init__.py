"""
kubefilter: apply a manifest, inspect and jq-filter cluster resources, remove it again.

SPDX-License-Identifier: Apache-2.0
Copyright 2025 Sebastian Daberdaku
"""

__version__ = "0.1.0"
