"""
Query module exports for jq compilation, filtering and exception classes.

SPDX-License-Identifier: Apache-2.0
Copyright 2025 Sebastian Daberdaku
"""

from kubefilter.query.exception import CompileError, EvaluationError, QueryException
from kubefilter.query.filter import Query, apply_query, compile_query, get_resources_by_query

__all__ = [
    "CompileError",
    "EvaluationError",
    "Query",
    "QueryException",
    "apply_query",
    "compile_query",
    "get_resources_by_query",
]
