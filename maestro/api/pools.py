"""
Pools API module for stake pool listings, performance history and registration data.
"""

from maestro.api.base import BaseAPI
from maestro.api.common import Endpoint, Order

LIST_POOLS = Endpoint("list_pools", "GET", "/pools")
POOL_BLOCKS = Endpoint("pool_blocks", "GET", "/pools/{pool_id}/blocks", required=("pool_id",))
POOL_DELEGATORS = Endpoint("pool_delegators", "GET", "/pools/{pool_id}/delegators", required=("pool_id",))
POOL_HISTORY = Endpoint("pool_history", "GET", "/pools/{pool_id}/history", required=("pool_id",))
POOL_INFO = Endpoint("pool_info", "GET", "/pools/{pool_id}/info", required=("pool_id",), amounts_as_strings=True)
POOL_METADATA = Endpoint("pool_metadata", "GET", "/pools/{pool_id}/metadata", required=("pool_id",))
POOL_RELAYS = Endpoint("pool_relays", "GET", "/pools/{pool_id}/relays", required=("pool_id",))
POOL_UPDATES = Endpoint("pool_updates", "GET", "/pools/{pool_id}/updates", required=("pool_id",))


class PoolsAPI(BaseAPI):
    """Pools endpoints."""

    def list_pools(self, *, count: int | None = None, cursor: str | None = None, options: dict | None = None) -> dict:
        """Registered stake pools (GET /pools)."""
        query = {"count": count, "cursor": cursor}
        return self._request(LIST_POOLS, query=query, options=options)

    def pool_blocks(
        self,
        pool_id: str,
        *,
        epoch_no: int | None = None,
        count: int | None = None,
        order: Order | str | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> dict:
        """Blocks minted by the pool, ordered by slot (GET /pools/{pool_id}/blocks)."""
        query = {"epoch_no": epoch_no, "count": count, "order": order, "cursor": cursor}
        return self._request(POOL_BLOCKS, {"pool_id": pool_id}, query, options=options)

    def pool_delegators(
        self, pool_id: str, *, count: int | None = None, cursor: str | None = None, options: dict | None = None
    ) -> dict:
        """Stake accounts delegated to the pool (GET /pools/{pool_id}/delegators)."""
        query = {"count": count, "cursor": cursor}
        return self._request(POOL_DELEGATORS, {"pool_id": pool_id}, query, options=options)

    def pool_history(
        self,
        pool_id: str,
        *,
        epoch_no: int | None = None,
        count: int | None = None,
        order: Order | str | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> dict:
        """Per-epoch pool performance, ordered by epoch number (GET /pools/{pool_id}/history)."""
        query = {"epoch_no": epoch_no, "count": count, "order": order, "cursor": cursor}
        return self._request(POOL_HISTORY, {"pool_id": pool_id}, query, options=options)

    def pool_info(self, pool_id: str, *, options: dict | None = None) -> dict:
        """Current pool parameters and stake (GET /pools/{pool_id}/info)."""
        return self._request(POOL_INFO, {"pool_id": pool_id}, options=options)

    def pool_metadata(self, pool_id: str, *, options: dict | None = None) -> dict:
        """Off-chain metadata of the pool (GET /pools/{pool_id}/metadata)."""
        return self._request(POOL_METADATA, {"pool_id": pool_id}, options=options)

    def pool_relays(self, pool_id: str, *, options: dict | None = None) -> dict:
        """Relays declared by the pool (GET /pools/{pool_id}/relays)."""
        return self._request(POOL_RELAYS, {"pool_id": pool_id}, options=options)

    def pool_updates(self, pool_id: str, *, options: dict | None = None) -> dict:
        """Registration and retirement updates of the pool (GET /pools/{pool_id}/updates)."""
        return self._request(POOL_UPDATES, {"pool_id": pool_id}, options=options)
