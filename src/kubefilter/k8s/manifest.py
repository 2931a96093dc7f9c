"""
Multi-document YAML manifest loading.

SPDX-License-Identifier: Apache-2.0
Copyright 2025 Sebastian Daberdaku
"""

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


class ManifestException(Exception):
    """Raised when a manifest cannot be read or is malformed."""


def parse_manifest(text: str, source: str = "<string>") -> list[dict[str, Any]]:
    """Decode manifest documents from YAML text.

    Empty documents (e.g., a trailing "---") are skipped.

    :param text: YAML text with one or more documents
    :param source: Name of the manifest used in error messages
    :return: List of decoded documents
    """
    try:
        raw_documents = list(yaml.safe_load_all(text))
    except yaml.YAMLError as e:
        raise ManifestException(f"Failed to parse manifest {source}: {e}") from e

    documents = []
    for index, document in enumerate(raw_documents):
        if document is None:
            continue
        _validate_document(document, source, index)
        documents.append(document)

    logger.debug(f"Decoded {len(documents)} document(s) from {source}")
    return documents


def load_manifest(path: str | Path) -> list[dict[str, Any]]:
    """Read and decode a manifest file.

    :param path: Path to the manifest file
    :return: List of decoded documents
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestException(f"Failed to read manifest {path}: {e}") from e
    return parse_manifest(text, source=str(path))


def _validate_document(document: Any, source: str, index: int) -> None:
    if not isinstance(document, dict):
        raise ManifestException(f"Document {index} in {source} is not a mapping")
    for field in ("apiVersion", "kind"):
        if not isinstance(document.get(field), str) or not document[field]:
            raise ManifestException(f"Document {index} in {source} has no '{field}'")
    metadata = document.get("metadata")
    if not isinstance(metadata, dict) or not metadata.get("name"):
        raise ManifestException(f"Document {index} in {source} has no 'metadata.name'")
