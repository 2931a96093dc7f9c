"""
Exceptions raised while compiling and evaluating jq queries.

SPDX-License-Identifier: Apache-2.0
Copyright 2025 Sebastian Daberdaku
"""


class QueryException(Exception):
    """Base exception for query errors."""


class CompileError(QueryException):
    """The query expression is not valid jq."""


class EvaluationError(QueryException):
    """The query raised an error while evaluating a document."""
