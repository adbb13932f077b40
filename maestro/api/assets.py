"""
Assets API module for native assets and minting policies.
Assets are identified by the hex concatenation of policy ID and asset name.
"""

from maestro.api.base import BaseAPI
from maestro.api.common import Endpoint, Order

ASSET_INFO = Endpoint("asset_info", "GET", "/assets/{asset}", required=("asset",))
ASSET_ACCOUNTS = Endpoint("asset_accounts", "GET", "/assets/{asset}/accounts", required=("asset",))
ASSET_ADDRESSES = Endpoint("asset_addresses", "GET", "/assets/{asset}/addresses", required=("asset",))
ASSET_TXS = Endpoint("asset_txs", "GET", "/assets/{asset}/transactions", required=("asset",))
ASSET_UPDATES = Endpoint("asset_updates", "GET", "/assets/{asset}/updates", required=("asset",))
ASSET_UTXOS = Endpoint("asset_utxos", "GET", "/assets/{asset}/utxos", required=("asset",))
POLICY_ACCOUNTS = Endpoint("policy_accounts", "GET", "/assets/policy/{policy}/accounts", required=("policy",))
POLICY_ADDRESSES = Endpoint("policy_addresses", "GET", "/assets/policy/{policy}/addresses", required=("policy",))
POLICY_INFO = Endpoint("policy_info", "GET", "/policy/{policy}/assets", required=("policy",))
POLICY_TXS = Endpoint("policy_txs", "GET", "/policy/{policy}/txs", required=("policy",))
POLICY_UTXOS = Endpoint("policy_utxos", "GET", "/policy/{policy}/utxos", required=("policy",))


class AssetsAPI(BaseAPI):
    """Assets endpoints."""

    def asset_info(self, asset: str, *, options: dict | None = None) -> dict:
        """Native asset information (GET /assets/{asset})."""
        return self._request(ASSET_INFO, {"asset": asset}, options=options)

    def asset_accounts(
        self, asset: str, *, count: int | None = None, cursor: str | None = None, options: dict | None = None
    ) -> dict:
        """Stake accounts holding the asset (GET /assets/{asset}/accounts)."""
        query = {"count": count, "cursor": cursor}
        return self._request(ASSET_ACCOUNTS, {"asset": asset}, query, options=options)

    def asset_addresses(
        self, asset: str, *, count: int | None = None, cursor: str | None = None, options: dict | None = None
    ) -> dict:
        """Addresses holding the asset (GET /assets/{asset}/addresses)."""
        query = {"count": count, "cursor": cursor}
        return self._request(ASSET_ADDRESSES, {"asset": asset}, query, options=options)

    def asset_txs(
        self,
        asset: str,
        *,
        from_height: int | None = None,
        count: int | None = None,
        order: Order | str | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> dict:
        """Transactions moving the asset, ordered by block height (GET /assets/{asset}/transactions)."""
        query = {"from_height": from_height, "count": count, "order": order, "cursor": cursor}
        return self._request(ASSET_TXS, {"asset": asset}, query, options=options)

    def asset_updates(
        self,
        asset: str,
        *,
        count: int | None = None,
        order: Order | str | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> dict:
        """Transactions minting or burning the asset (GET /assets/{asset}/updates)."""
        query = {"count": count, "order": order, "cursor": cursor}
        return self._request(ASSET_UPDATES, {"asset": asset}, query, options=options)

    def asset_utxos(
        self,
        asset: str,
        *,
        address: str | None = None,
        count: int | None = None,
        order: Order | str | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> dict:
        """UTxOs containing the asset, optionally at one address (GET /assets/{asset}/utxos)."""
        query = {"address": address, "count": count, "order": order, "cursor": cursor}
        return self._request(ASSET_UTXOS, {"asset": asset}, query, options=options)

    def policy_accounts(
        self, policy: str, *, count: int | None = None, cursor: str | None = None, options: dict | None = None
    ) -> dict:
        """Stake accounts holding assets of the policy (GET /assets/policy/{policy}/accounts)."""
        query = {"count": count, "cursor": cursor}
        return self._request(POLICY_ACCOUNTS, {"policy": policy}, query, options=options)

    def policy_addresses(
        self, policy: str, *, count: int | None = None, cursor: str | None = None, options: dict | None = None
    ) -> dict:
        """Addresses holding assets of the policy (GET /assets/policy/{policy}/addresses)."""
        query = {"count": count, "cursor": cursor}
        return self._request(POLICY_ADDRESSES, {"policy": policy}, query, options=options)

    def policy_info(
        self, policy: str, *, count: int | None = None, cursor: str | None = None, options: dict | None = None
    ) -> dict:
        """Information on every asset of the policy (GET /policy/{policy}/assets)."""
        query = {"count": count, "cursor": cursor}
        return self._request(POLICY_INFO, {"policy": policy}, query, options=options)

    def policy_txs(
        self,
        policy: str,
        *,
        count: int | None = None,
        order: Order | str | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> dict:
        """Transactions moving assets of the policy (GET /policy/{policy}/txs)."""
        query = {"count": count, "order": order, "cursor": cursor}
        return self._request(POLICY_TXS, {"policy": policy}, query, options=options)

    def policy_utxos(
        self,
        policy: str,
        *,
        count: int | None = None,
        order: Order | str | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> dict:
        """UTxOs containing assets of the policy (GET /policy/{policy}/utxos)."""
        query = {"count": count, "order": order, "cursor": cursor}
        return self._request(POLICY_UTXOS, {"policy": policy}, query, options=options)
