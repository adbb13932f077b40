"""
Request building shared by every endpoint: parameter checks, path templating,
query-string serialization, header composition and body encoding.

Endpoints are declared as Endpoint records in the resource modules; build_request
turns one record plus call arguments into a RequestDescriptor ready for dispatch.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

from requests.structures import CaseInsensitiveDict

from maestro.api.errors import RequiredError

if TYPE_CHECKING:
    from maestro.data.configuration import Configuration

API_KEY_HEADER = "api-key"

# Asks the service to render amount fields as strings so large lovelace values keep precision.
HEADER_AMOUNTS_AS_STRING = {"amounts-as-strings": "true"}

JSON = "application/json"
CBOR = "application/cbor"

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")

# Keyword arguments RequestHandler.send passes itself.
_DESCRIPTOR_KEYS = frozenset({"method", "url", "data"})

logger = logging.getLogger(__name__)


class Order(Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class Endpoint:
    """Static description of one REST operation."""

    name: str
    method: str
    path: str
    required: tuple[str, ...] = ()
    body: str | None = None
    content_type: str | None = None
    amounts_as_strings: bool = False


@dataclass(frozen=True)
class RequestDescriptor:
    url: str
    method: str
    headers: CaseInsensitiveDict
    body: Any = None
    options: dict[str, Any] = field(default_factory=dict)


def assert_param_exists(function_name: str, param_name: str, param_value: Any) -> None:
    if param_value is None:
        raise RequiredError(
            param_name,
            f"Required parameter {param_name} was null or undefined when calling {function_name}.",
        )


def set_api_key_to_object(target: Any, key_param_name: str, configuration: "Configuration") -> None:
    target[key_param_name] = configuration.api_key


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return _stringify(value.value)
    return str(value)


def _flatten_query(pairs: list[tuple[str, str]], parameter: Any, key: str = "") -> None:
    if parameter is None:
        return
    if isinstance(parameter, Mapping):
        for current_key, item in parameter.items():
            _flatten_query(pairs, item, f"{key}.{current_key}" if key else str(current_key))
    elif isinstance(parameter, (list, tuple, set, frozenset)):
        for item in parameter:
            _flatten_query(pairs, item, key)
    else:
        pairs.append((key, _stringify(parameter)))


def set_search_params(url: str, *objects: Any) -> str:
    """Append every non-None value in objects to the query string of url.

    Keys keep the insertion order of the supplied mappings. Sequences become
    repeated keys, nested mappings become dotted keys.
    """
    scheme, netloc, path, query, fragment = urlsplit(url)
    pairs = parse_qsl(query, keep_blank_values=True)
    _flatten_query(pairs, list(objects))
    return urlunsplit((scheme, netloc, path, urlencode(pairs), fragment))


def encode_path_value(value: Any) -> str:
    """Percent-encode a path segment the way encodeURIComponent does."""
    return quote(_stringify(value), safe="!*'()")


def substitute_path(template: str, path_params: Mapping[str, Any]) -> str:
    def _replace(match: re.Match) -> str:
        name = match.group(1)
        value = path_params.get(name)
        if value is None:
            raise ValueError(f"No value for path placeholder {{{name}}} in {template}")
        return encode_path_value(value)

    return _PLACEHOLDER.sub(_replace, template)


def to_path_string(url: str) -> str:
    parts = urlsplit(url)
    out = parts.path
    if parts.query:
        out += f"?{parts.query}"
    if parts.fragment:
        out += f"#{parts.fragment}"
    return out


def serialize_data_if_needed(value: Any, headers: Mapping[str, str], configuration: "Configuration") -> Any:
    non_string = not isinstance(value, str)
    if non_string and configuration is not None:
        needs_serialization = configuration.is_json_mime(headers.get("Content-Type"))
    else:
        needs_serialization = non_string
    if needs_serialization:
        return json.dumps(value if value is not None else {})
    return value or ""


def to_cbor_bytes(value: str | bytes | bytearray | memoryview) -> bytes:
    """Hex strings are decoded, raw bytes pass through."""
    if isinstance(value, str):
        return bytes.fromhex(value)
    return bytes(value)


def build_request(
    configuration: "Configuration",
    endpoint: Endpoint,
    path_params: Mapping[str, Any] | None = None,
    query: Mapping[str, Any] | None = None,
    body: Any = None,
    options: Mapping[str, Any] | None = None,
) -> RequestDescriptor:
    path_params = path_params or {}
    for name in endpoint.required:
        value = body if name == endpoint.body else path_params.get(name)
        assert_param_exists(endpoint.name, name, value)

    path = substitute_path(endpoint.path, path_params)
    url = set_search_params(configuration.base_url + path, query or {})

    base_options = configuration.base_options
    call_options = dict(options or {})
    headers = CaseInsensitiveDict(base_options.pop("headers", None) or {})
    headers.update(call_options.pop("headers", None) or {})

    # api-key and endpoint-forced headers always win over caller overrides.
    set_api_key_to_object(headers, API_KEY_HEADER, configuration)
    if endpoint.content_type:
        headers["Content-Type"] = endpoint.content_type
    if endpoint.amounts_as_strings:
        headers.update(HEADER_AMOUNTS_AS_STRING)

    data = None
    if endpoint.content_type == CBOR:
        data = to_cbor_bytes(body)
    elif endpoint.body is not None:
        data = serialize_data_if_needed(body, headers, configuration)

    merged_options = {**base_options, **call_options}
    for key in _DESCRIPTOR_KEYS.intersection(merged_options):
        logger.warning(f"Ignoring transport option {key!r} for {endpoint.name}; it is set by the request")
        del merged_options[key]

    return RequestDescriptor(
        url=url,
        method=endpoint.method,
        headers=headers,
        body=data,
        options=merged_options,
    )
