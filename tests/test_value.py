"""
Unit tests for JSON value classification and canonical conversion.

SPDX-License-Identifier: Apache-2.0
Copyright 2025 Sebastian Daberdaku
"""

from collections import OrderedDict
from datetime import date, datetime, timedelta, timezone
from unittest.mock import Mock

import pytest

from kubefilter.query.value import JsonKind, kind_of, to_json_value


class TestKindOf:
    """Test JSON value classification."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, JsonKind.NULL),
            (True, JsonKind.BOOLEAN),
            (False, JsonKind.BOOLEAN),
            (0, JsonKind.NUMBER),
            (1.5, JsonKind.NUMBER),
            ("", JsonKind.STRING),
            ([], JsonKind.ARRAY),
            ({}, JsonKind.OBJECT),
        ],
    )
    def test_kinds(self, value, expected):
        """Test every JSON kind is recognized."""
        assert kind_of(value) is expected

    def test_bool_is_not_number(self):
        """Test booleans are not classified as numbers."""
        assert kind_of(True) is not JsonKind.NUMBER

    def test_non_json_value(self):
        """Test non-JSON values are rejected."""
        with pytest.raises(TypeError):
            kind_of(object())


class TestToJsonValue:
    """Test canonical JSON conversion."""

    def test_plain_tree_is_unchanged(self, deployment_manifest):
        """Test JSON-shaped input converts to an equal tree."""
        assert to_json_value(deployment_manifest) == deployment_manifest

    def test_conversion_copies(self):
        """Test the converted tree does not share containers with the input."""
        document = {"spec": {"items": [1, 2]}}

        converted = to_json_value(document)
        converted["spec"]["items"].append(3)

        assert document == {"spec": {"items": [1, 2]}}

    def test_tuple_becomes_list(self):
        """Test tuples become lists."""
        assert to_json_value({"a": (1, "b")}) == {"a": [1, "b"]}

    def test_mapping_becomes_dict(self):
        """Test arbitrary mappings become dicts."""
        result = to_json_value(OrderedDict(a=1))

        assert type(result) is dict
        assert result == {"a": 1}

    def test_utc_datetime(self):
        """Test aware datetimes are rendered in UTC with a Z suffix."""
        value = datetime(2025, 1, 2, 5, 4, 5, tzinfo=timezone(timedelta(hours=2)))

        assert to_json_value(value) == "2025-01-02T03:04:05Z"

    def test_datetime_keeps_microseconds(self):
        """Test sub-second precision is kept."""
        value = datetime(2025, 1, 2, 3, 4, 5, 120000, tzinfo=timezone.utc)

        assert to_json_value(value) == "2025-01-02T03:04:05.120000Z"

    def test_date(self):
        """Test dates are rendered as ISO strings."""
        assert to_json_value(date(2025, 1, 2)) == "2025-01-02"

    def test_to_dict_objects(self):
        """Test objects exposing to_dict are converted through it."""
        field = Mock()
        field.to_dict.return_value = {"name": "web"}

        assert to_json_value({"metadata": field}) == {"metadata": {"name": "web"}}

    def test_non_string_key(self):
        """Test non-string keys are rejected."""
        with pytest.raises(TypeError):
            to_json_value({1: "a"})

    def test_unsupported_value(self):
        """Test values without a JSON form are rejected."""
        with pytest.raises(TypeError):
            to_json_value({"a": {1, 2}})
