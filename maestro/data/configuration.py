"""
Client configuration: API key, target network and the HTTP session every call goes through.
"""

from __future__ import annotations

import os
import re
from enum import Enum
from typing import Any

import requests
from dotenv import load_dotenv
from requests_ratelimiter import LimiterSession

from maestro.api.errors import ConfigurationError

_JSON_MIME = re.compile(r"^(application/json|[^;/ \t]+/[^;/ \t]+[+]json)[ \t]*(;.*)?$", re.IGNORECASE)


class Network(Enum):
    MAINNET = "Mainnet"
    PREPROD = "Preprod"
    PREVIEW = "Preview"

    @classmethod
    def parse(cls, value: "Network | str") -> "Network":
        if isinstance(value, Network):
            return value
        for member in cls:
            if member.value.lower() == str(value).lower():
                return member
        raise ValueError(f"Unsupported network: {value!r}")


class Configuration:
    """Settings shared by every sub-API of one client.

    Pass a session in to control pooling or adapters, otherwise a fresh
    requests.Session is created. Setting requests_per_second builds a
    rate-limited session instead. Only sessions created here are closed
    by MaestroClient.close(); an injected session stays the caller's.
    """

    def __init__(
        self,
        api_key: str,
        network: Network | str = Network.MAINNET,
        base_options: dict[str, Any] | None = None,
        session: requests.Session | None = None,
        requests_per_second: float | None = None,
    ):
        self._api_key = api_key
        self._network = Network.parse(network)
        self._base_url = f"https://{self._network.value}.gomaestro-api.org/v1"
        self._base_options = dict(base_options or {})
        self._owns_session = session is None
        if session is None:
            if requests_per_second:
                session = LimiterSession(per_second=requests_per_second, per_host=False)
            else:
                session = requests.Session()
        self._session = session

    @classmethod
    def from_env(cls, env_file: str | None = None, **overrides: Any) -> "Configuration":
        """Build a configuration from MAESTRO_* environment variables (and a .env file)."""
        load_dotenv(env_file)
        api_key = overrides.pop("api_key", None) or os.getenv("MAESTRO_API_KEY")
        if not api_key:
            raise ConfigurationError("MAESTRO_API_KEY not found in environment.")
        network = overrides.pop("network", None) or os.getenv("MAESTRO_NETWORK", Network.MAINNET.value)
        rps = os.getenv("MAESTRO_REQUESTS_PER_SECOND")
        if rps and "requests_per_second" not in overrides:
            overrides["requests_per_second"] = float(rps)
        return cls(api_key, network=network, **overrides)

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def network(self) -> Network:
        return self._network

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def base_options(self) -> dict[str, Any]:
        return dict(self._base_options)

    @property
    def session(self) -> requests.Session:
        return self._session

    @property
    def owns_session(self) -> bool:
        """True when the session was built here rather than passed in by the caller."""
        return self._owns_session

    def is_json_mime(self, mime: str | None) -> bool:
        """
        Check if the given MIME is a JSON MIME, e.g.
          application/json
          application/json; charset=UTF8
          APPLICATION/JSON
          application/vnd.company+json
        """
        if mime is None:
            return False
        return bool(_JSON_MIME.match(mime)) or mime.lower() == "application/json-patch+json"

    def __repr__(self) -> str:
        return f"Configuration(network={self._network.value!r}, base_url={self._base_url!r})"
