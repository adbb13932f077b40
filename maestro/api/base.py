"""
Base class for the per-resource sub-APIs.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from maestro.api.common import Endpoint, build_request
from maestro.api.handle_requests import RequestHandler
from maestro.data.configuration import Configuration


class BaseAPI:
    """Holds the shared configuration and dispatches built requests."""

    def __init__(self, configuration: Configuration, http: RequestHandler | None = None):
        self.configuration = configuration
        self.http = http or RequestHandler(configuration)

    def _request(
        self,
        endpoint: Endpoint,
        path_params: Mapping[str, Any] | None = None,
        query: Mapping[str, Any] | None = None,
        body: Any = None,
        options: Mapping[str, Any] | None = None,
    ) -> Any:
        descriptor = build_request(self.configuration, endpoint, path_params, query, body, options)
        return self.http.dispatch(descriptor)
