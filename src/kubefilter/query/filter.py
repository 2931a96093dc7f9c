"""
jq predicate filtering over unstructured Kubernetes objects.

SPDX-License-Identifier: Apache-2.0
Copyright 2025 Sebastian Daberdaku
"""

import logging
from collections.abc import Iterable, Iterator
from typing import Any

import jq

from kubefilter.k8s.client import KubernetesClient
from kubefilter.k8s.coordinate import ResourceCoordinate
from kubefilter.k8s.unstructured import object_name
from kubefilter.query.exception import CompileError, EvaluationError
from kubefilter.query.value import JsonKind, kind_of, to_json_value

logger = logging.getLogger(__name__)


class Query:
    """A compiled jq expression.

    Queries hold no per-evaluation state and can be reused across documents,
    filter passes and threads.
    """

    def __init__(self, expression: str) -> None:
        """Compile a jq expression.

        :param expression: jq expression, e.g. '.metadata.labels["app"] == "nginx"'
        :raises CompileError: If the expression is not valid jq
        """
        self.expression = expression
        try:
            self._program = jq.compile(expression)
        except ValueError as e:
            raise CompileError(f"Invalid query '{expression}': {e}") from e

    def evaluate(self, value: Any) -> Iterator[Any]:
        """Evaluate the query lazily against a JSON value.

        :param value: Canonical JSON value
        :return: Iterator over the query's output values
        :raises EvaluationError: While iterating, if jq raises an error
        """
        results = iter(self._program.input_value(value))
        while True:
            try:
                result = next(results)
            except StopIteration:
                return
            except ValueError as e:
                raise EvaluationError(f"Query '{self.expression}' failed: {e}") from e
            yield result

    def __repr__(self) -> str:
        return f"Query({self.expression!r})"


def compile_query(expression: str) -> Query:
    """Compile a jq expression into a reusable query."""
    return Query(expression)


def matches(query: Query, document: dict[str, Any]) -> bool:
    """Check whether a query selects a document.

    Every output of the query is consumed, even after a true value, so that
    errors and non-boolean outputs later in the sequence are always surfaced.

    :param query: Compiled query
    :param document: Unstructured object
    :return: True if at least one output is boolean true
    :raises EvaluationError: If the query raises an error
    """
    matched = False
    for result in query.evaluate(to_json_value(document)):
        result_kind = kind_of(result)
        if result_kind is not JsonKind.BOOLEAN:
            logger.warning(
                f"Query returned non-boolean value ({result_kind.value}) "
                f"for {object_name(document)}"
            )
        elif result:
            matched = True
    return matched


def apply_query(query: Query, documents: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    """Select the documents a query yields true for.

    The result preserves input order and holds each document at most once.
    Evaluation stops at the first error and no partial result is returned.

    :param query: Compiled query
    :param documents: Unstructured objects to filter
    :return: Matching documents
    :raises EvaluationError: If the query raises an error on any document
    """
    return [document for document in documents if matches(query, document)]


def get_resources_by_query(
    client: KubernetesClient,
    coordinate: ResourceCoordinate,
    query: Query | str,
    timeout: float = None,
) -> list[dict[str, Any]]:
    """List a collection and keep the objects matching a jq query.

    A string expression is compiled before the cluster is contacted.

    :param client: Kubernetes client
    :param coordinate: Collection to list
    :param query: Compiled query or jq expression yielding booleans
    :param timeout: Request timeout in seconds
    :return: Matching objects
    """
    if isinstance(query, str):
        query = compile_query(query)
    items = client.list_resources(coordinate, timeout=timeout)
    selected = apply_query(query, items)
    logger.info(
        f"Query '{query.expression}' matched {len(selected)} of {len(items)} {coordinate}"
    )
    return selected
