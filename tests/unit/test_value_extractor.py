"""Unit tests for value extraction from search responses."""

import json

import pytest

from es_scaler.components.value_extractor import get_value_from_search, lookup, parse_path
from es_scaler.domain import InvalidValueType


class TestParsePath:
    """Tests for the path expression tokenizer."""

    @pytest.mark.unit
    def test_dotted(self):
        assert parse_path("hits.total.value") == ["hits", "total", "value"]

    @pytest.mark.unit
    def test_brackets(self):
        assert parse_path("hits.hits[0]._source.n") == ["hits", "hits", "0", "_source", "n"]
        assert parse_path("a[1][2]") == ["a", "1", "2"]

    @pytest.mark.unit
    def test_escaped_dot(self):
        assert parse_path(r"aggregations.by\.host.value") == ["aggregations", "by.host", "value"]


class TestGetValueFromSearch:
    """Tests for get_value_from_search()."""

    @pytest.mark.unit
    def test_number_at_root(self):
        assert get_value_from_search(b'{"count": 42}', "count") == 42

    @pytest.mark.unit
    def test_nested_number(self, search_response):
        assert get_value_from_search(search_response, "hits.total.value") == 42

    @pytest.mark.unit
    def test_raw_bytes_and_decoded_document_agree(self, search_response):
        raw = json.dumps(search_response).encode()
        assert get_value_from_search(raw, "hits.total.value") == get_value_from_search(
            search_response, "hits.total.value"
        )

    @pytest.mark.unit
    def test_array_indexed_string(self, search_response):
        assert get_value_from_search(search_response, "hits.hits.0._source.pending") == 7
        assert get_value_from_search(search_response, "hits.hits[0]._source.pending") == 7

    @pytest.mark.unit
    def test_array_length(self, search_response):
        assert get_value_from_search(search_response, "hits.hits.#") == 2

    @pytest.mark.unit
    def test_float_is_truncated(self, search_response):
        assert get_value_from_search(search_response, "hits.hits.0._source.ratio") == 2
        assert get_value_from_search(b'{"v": -2.7}', "v") == -2

    @pytest.mark.unit
    def test_escaped_key(self, search_response):
        assert get_value_from_search(search_response, r"aggregations.by\.host.value") == 12

    @pytest.mark.unit
    def test_string_number(self):
        assert get_value_from_search('{"v": "42"}', "v") == 42

    @pytest.mark.unit
    def test_non_numeric_string_cites_literal(self):
        with pytest.raises(InvalidValueType) as exc_info:
            get_value_from_search(b'{"v": "abc"}', "v")
        assert exc_info.value.found == "abc"
        assert str(exc_info.value) == (
            "valueLocation must point to value of type number but got: 'abc'"
        )

    @pytest.mark.unit
    @pytest.mark.parametrize("path", ["missing", "hits.total.nope", "hits.hits.5", "hits.hits.x"])
    def test_missing_path_is_an_error_not_zero(self, search_response, path):
        with pytest.raises(InvalidValueType) as exc_info:
            get_value_from_search(search_response, path)
        assert exc_info.value.found == "Null"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "path,type_name",
        [
            ("hits.hits.1._source.done", "True"),
            ("timed_out", "False"),
            ("hits.hits", "JSON"),
            ("hits.total", "JSON"),
        ],
    )
    def test_other_types_cite_type_name(self, search_response, path, type_name):
        with pytest.raises(InvalidValueType) as exc_info:
            get_value_from_search(search_response, path)
        assert exc_info.value.found == type_name

    @pytest.mark.unit
    def test_json_null(self):
        with pytest.raises(InvalidValueType, match="'Null'"):
            get_value_from_search(b'{"v": null}', "v")

    @pytest.mark.unit
    def test_invalid_json(self):
        with pytest.raises(InvalidValueType):
            get_value_from_search(b"<html>oops</html>", "v")

    @pytest.mark.unit
    @pytest.mark.parametrize("body", [b'{"v": "\xff"}', b"\xff\xfe garbage", bytearray(b"\xff")])
    def test_invalid_utf8(self, body):
        with pytest.raises(InvalidValueType) as exc_info:
            get_value_from_search(body, "v")
        assert exc_info.value.found == "invalid JSON response"


@pytest.mark.unit
def test_lookup_returns_none_for_empty_path(search_response):
    assert lookup(search_response, "") is None
