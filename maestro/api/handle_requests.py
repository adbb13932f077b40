"""
HTTP dispatch for prepared request descriptors.
Sends through the configuration's session, raises on non-2xx and decodes the body.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import requests

from maestro.api.common import RequestDescriptor, to_path_string

if TYPE_CHECKING:
    from maestro.data.configuration import Configuration

logger = logging.getLogger(__name__)


class RequestHandler:
    def __init__(self, configuration: "Configuration"):
        self.configuration = configuration
        self.session = configuration.session

    def send(self, descriptor: RequestDescriptor) -> requests.Response:
        """Issue the request; no retry, no status handling."""
        return self.session.request(
            descriptor.method,
            descriptor.url,
            headers=dict(descriptor.headers),
            data=descriptor.body,
            **descriptor.options,
        )

    def decode(self, resp: requests.Response) -> Any:
        # 204s and bodiless 202s may still advertise application/json
        if not resp.content:
            return None
        if self.configuration.is_json_mime(resp.headers.get("Content-Type")):
            return resp.json()
        return resp.text

    def dispatch(self, descriptor: RequestDescriptor) -> Any:
        """
        Send a descriptor and return the decoded payload.
          - JSON responses are parsed, anything else is returned as text
          - non-2xx responses raise requests.HTTPError
          - transport errors propagate unchanged
        """
        path = to_path_string(descriptor.url)
        logger.debug(f"{descriptor.method} {path}")
        resp = self.send(descriptor)
        logger.debug(f"{descriptor.method} {path} - Status: {resp.status_code}")
        resp.raise_for_status()
        return self.decode(resp)

    def close(self) -> None:
        """Close the session if the configuration created it; injected sessions stay open."""
        if self.configuration.owns_session:
            self.session.close()
