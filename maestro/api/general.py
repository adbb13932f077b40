"""
General API module for chain-wide information: tip, eras, protocol parameters.
"""

from maestro.api.base import BaseAPI
from maestro.api.common import Endpoint

CHAIN_TIP = Endpoint("chain_tip", "GET", "/chain-tip")
ERA_HISTORY = Endpoint("era_history", "GET", "/era-history")
PROTOCOL_PARAMS = Endpoint("protocol_params", "GET", "/protocol-params")
SYSTEM_START = Endpoint("system_start", "GET", "/system-start")


class GeneralAPI(BaseAPI):
    """General endpoints."""

    def chain_tip(self, *, options: dict | None = None) -> dict:
        """Latest block of the chain (GET /chain-tip)."""
        return self._request(CHAIN_TIP, options=options)

    def era_history(self, *, options: dict | None = None) -> dict:
        """Era boundaries and slot lengths (GET /era-history)."""
        return self._request(ERA_HISTORY, options=options)

    def protocol_params(self, *, options: dict | None = None) -> dict:
        """Current protocol parameters (GET /protocol-params)."""
        return self._request(PROTOCOL_PARAMS, options=options)

    def system_start(self, *, options: dict | None = None) -> dict:
        """Blockchain system start time (GET /system-start)."""
        return self._request(SYSTEM_START, options=options)
