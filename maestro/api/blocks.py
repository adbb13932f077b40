"""
Blocks API module for block lookups by hash or height.
"""

from maestro.api.base import BaseAPI
from maestro.api.common import Endpoint

BLOCK_INFO = Endpoint("block_info", "GET", "/blocks/{hash_or_height}", required=("hash_or_height",))
BLOCK_LATEST = Endpoint("block_latest", "GET", "/blocks/latest")


class BlocksAPI(BaseAPI):
    """Blocks endpoints."""

    def block_info(self, hash_or_height: str | int, *, options: dict | None = None) -> dict:
        """Block details by height or hex hash (GET /blocks/{hash_or_height})."""
        return self._request(BLOCK_INFO, {"hash_or_height": hash_or_height}, options=options)

    def block_latest(self, *, options: dict | None = None) -> dict:
        """Most recent block (GET /blocks/latest)."""
        return self._request(BLOCK_LATEST, options=options)
