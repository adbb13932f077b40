"""
Tests for request building: parameter checks, query strings, path templating,
header precedence and body encoding.
"""

from __future__ import annotations

import json
from urllib.parse import parse_qs, urlsplit

import pytest

from maestro.api.common import (
    CBOR,
    JSON,
    Endpoint,
    Order,
    assert_param_exists,
    build_request,
    serialize_data_if_needed,
    set_search_params,
    substitute_path,
    to_cbor_bytes,
    to_path_string,
)
from maestro.api.errors import MaestroError, RequiredError
from maestro.data.configuration import Configuration

from tests.support import API_KEY, PREPROD_URL


class TestAssertParamExists:
    def test_none_raises_with_operation_and_param(self):
        with pytest.raises(RequiredError) as exc:
            assert_param_exists("account_info", "stake_addr", None)
        assert exc.value.field == "stake_addr"
        assert "stake_addr" in str(exc.value)
        assert "account_info" in str(exc.value)

    def test_falsy_values_are_present(self):
        for value in ("", 0, False, []):
            assert_param_exists("epoch_info", "epoch_no", value)

    def test_required_error_is_maestro_error(self):
        assert issubclass(RequiredError, MaestroError)


class TestSetSearchParams:
    def test_none_values_are_omitted(self):
        url = set_search_params("https://x.org/v1/pools", {"count": 5, "cursor": None, "order": None})
        assert url == "https://x.org/v1/pools?count=5"

    def test_all_none_leaves_no_query(self):
        url = set_search_params("https://x.org/v1/pools", {"count": None, "cursor": None})
        assert url == "https://x.org/v1/pools"

    def test_parsed_query_has_exactly_non_null_keys(self):
        params = {"count": 10, "cursor": "abc", "from": None, "to": 99, "order": None}
        query = parse_qs(urlsplit(set_search_params("https://x.org/p", params)).query)
        assert query == {"count": ["10"], "cursor": ["abc"], "to": ["99"]}

    def test_insertion_order_is_kept(self):
        url = set_search_params("https://x.org/p", {"cursor": "c", "count": 2, "asset": "a"})
        assert urlsplit(url).query == "cursor=c&count=2&asset=a"

    def test_lists_become_repeated_keys(self):
        url = set_search_params("https://x.org/p", {"ids": ["a", "b"]})
        assert urlsplit(url).query == "ids=a&ids=b"
        assert "a%2Cb" not in url and "a,b" not in url

    def test_booleans_are_lowercase(self):
        url = set_search_params("https://x.org/p", {"resolve_datums": True, "with_cbor": False})
        assert urlsplit(url).query == "resolve_datums=true&with_cbor=false"

    def test_enum_values_are_used(self):
        url = set_search_params("https://x.org/p", {"order": Order.DESC})
        assert urlsplit(url).query == "order=desc"

    def test_nested_mappings_flatten_to_dotted_keys(self):
        url = set_search_params("https://x.org/p", {"filter": {"policy": "ab", "skip": None}})
        assert urlsplit(url).query == "filter.policy=ab"

    def test_existing_query_is_preserved(self):
        url = set_search_params("https://x.org/p?count=1", {"count": 2, "cursor": "z"})
        assert parse_qs(urlsplit(url).query) == {"count": ["1", "2"], "cursor": ["z"]}

    def test_values_are_percent_encoded(self):
        url = set_search_params("https://x.org/p", {"cursor": "a b&c=d"})
        assert parse_qs(urlsplit(url).query) == {"cursor": ["a b&c=d"]}


class TestSubstitutePath:
    def test_all_placeholders_substituted(self):
        path = substitute_path(
            "/transactions/{tx_hash}/outputs/{index}/txo", {"tx_hash": "deadbeef", "index": 3}
        )
        assert path == "/transactions/deadbeef/outputs/3/txo"
        assert "{" not in path and "}" not in path

    def test_values_are_percent_encoded(self):
        path = substitute_path("/ecosystem/adahandle/{handle}", {"handle": "a/b c?#"})
        assert path == "/ecosystem/adahandle/a%2Fb%20c%3F%23"

    def test_unreserved_characters_are_kept(self):
        assert substitute_path("/x/{v}", {"v": "a-b_c.d~e!f*g'h(i)"}) == "/x/a-b_c.d~e!f*g'h(i)"

    def test_missing_value_is_an_error(self):
        with pytest.raises(ValueError):
            substitute_path("/pools/{pool_id}/info", {})

    def test_template_without_placeholders(self):
        assert substitute_path("/chain-tip", {"unused": 1}) == "/chain-tip"


class TestSerializeDataIfNeeded:
    def test_json_mime_dumps_objects(self, config):
        body = {"sender": "addr1", "total_installments": 2}
        out = serialize_data_if_needed(body, {"Content-Type": JSON}, config)
        assert json.loads(out) == body

    def test_none_becomes_empty_object(self, config):
        assert serialize_data_if_needed(None, {"Content-Type": JSON}, config) == "{}"

    def test_strings_pass_through(self, config):
        assert serialize_data_if_needed('["a"]', {"Content-Type": JSON}, config) == '["a"]'

    def test_non_json_mime_passes_through(self, config):
        body = {"a": 1}
        assert serialize_data_if_needed(body, {"Content-Type": "text/plain"}, config) is body

    def test_without_configuration_objects_are_dumped(self):
        assert serialize_data_if_needed([1, 2], {}, None) == "[1, 2]"


class TestHelpers:
    def test_cbor_hex_string_is_decoded(self):
        assert to_cbor_bytes("84a3") == b"\x84\xa3"

    def test_cbor_bytes_pass_through(self):
        assert to_cbor_bytes(bytearray(b"\x84")) == b"\x84"

    def test_to_path_string(self):
        assert to_path_string("https://x.org/v1/pools?count=2#f") == "/v1/pools?count=2#f"


class TestBuildRequest:
    LISTING = Endpoint(
        "utxos_by_address", "GET", "/addresses/{address}/utxos", required=("address",), amounts_as_strings=True
    )
    JSON_POST = Endpoint("lock", "POST", "/contracts/vesting/lock", required=("req",), body="req", content_type=JSON)
    CBOR_POST = Endpoint("submit", "POST", "/txmanager", required=("body",), body="body", content_type=CBOR)

    def test_url_and_method(self, config):
        desc = build_request(config, self.LISTING, {"address": "addr1"}, {"count": 5, "cursor": None})
        assert desc.method == "GET"
        assert desc.url == f"{PREPROD_URL}/addresses/addr1/utxos?count=5"
        assert desc.body is None

    def test_missing_required_param(self, config):
        with pytest.raises(RequiredError) as exc:
            build_request(config, self.LISTING, {"address": None})
        assert exc.value.field == "address"

    def test_missing_required_body(self, config):
        with pytest.raises(RequiredError) as exc:
            build_request(config, self.JSON_POST)
        assert exc.value.field == "req"

    def test_header_precedence(self, session):
        config = Configuration(
            API_KEY,
            network="Preprod",
            session=session,
            base_options={"headers": {"x-trace": "base", "x-base": "1", "api-key": "from-base"}},
        )
        options = {
            "headers": {
                "x-trace": "call",
                "API-KEY": "from-call",
                "amounts-as-strings": "false",
                "Content-Type": "text/plain",
            }
        }
        desc = build_request(config, self.LISTING, {"address": "a"}, options=options)
        assert desc.headers["x-base"] == "1"
        assert desc.headers["x-trace"] == "call"
        assert desc.headers["api-key"] == API_KEY
        assert desc.headers["amounts-as-strings"] == "true"
        assert desc.headers["Content-Type"] == "text/plain"

        desc = build_request(config, self.JSON_POST, body={"a": 1}, options=options)
        assert desc.headers["Content-Type"] == JSON
        assert desc.headers["amounts-as-strings"] == "false"

    def test_options_merge(self, session):
        config = Configuration(API_KEY, session=session, base_options={"timeout": 30, "verify": True})
        desc = build_request(config, self.LISTING, {"address": "a"}, options={"timeout": 5})
        assert desc.options == {"timeout": 5, "verify": True}
        assert "headers" not in desc.options

    def test_request_keys_are_dropped_from_options(self, session):
        config = Configuration(API_KEY, session=session, base_options={"data": "base", "timeout": 30})
        desc = build_request(config, self.LISTING, {"address": "a"}, options={"method": "PUT", "url": "u"})
        assert desc.options == {"timeout": 30}
        assert desc.method == "GET"

    def test_json_body(self, config):
        body = {"sender": "addr_test1", "beneficiary": "addr_test2"}
        desc = build_request(config, self.JSON_POST, body=body)
        assert desc.headers["Content-Type"] == JSON
        assert json.loads(desc.body) == body

    def test_cbor_body(self, config):
        desc = build_request(config, self.CBOR_POST, body="84a400")
        assert desc.headers["Content-Type"] == CBOR
        assert desc.body == b"\x84\xa4\x00"

    def test_configuration_is_not_mutated(self, session):
        config = Configuration(API_KEY, session=session, base_options={"headers": {"x-a": "1"}})
        build_request(config, self.LISTING, {"address": "a"}, options={"headers": {"x-b": "2"}})
        assert config.base_options == {"headers": {"x-a": "1"}}
