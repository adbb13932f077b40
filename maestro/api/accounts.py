"""
Accounts API module for stake account information, history and holdings.
"""

from maestro.api.base import BaseAPI
from maestro.api.common import Endpoint

ACCOUNT_INFO = Endpoint("account_info", "GET", "/accounts/{stake_addr}", required=("stake_addr",))
ACCOUNT_ADDRESSES = Endpoint("account_addresses", "GET", "/accounts/{stake_addr}/addresses", required=("stake_addr",))
ACCOUNT_ASSETS = Endpoint("account_assets", "GET", "/accounts/{stake_addr}/assets", required=("stake_addr",))
ACCOUNT_HISTORY = Endpoint("account_history", "GET", "/accounts/{stake_addr}/history", required=("stake_addr",))
ACCOUNT_REWARDS = Endpoint("account_rewards", "GET", "/accounts/{stake_addr}/rewards", required=("stake_addr",))
ACCOUNT_UPDATES = Endpoint("account_updates", "GET", "/accounts/{stake_addr}/updates", required=("stake_addr",))


class AccountsAPI(BaseAPI):
    """Accounts endpoints."""

    def account_info(self, stake_addr: str, *, options: dict | None = None) -> dict:
        """Stake account information (GET /accounts/{stake_addr})."""
        return self._request(ACCOUNT_INFO, {"stake_addr": stake_addr}, options=options)

    def account_addresses(
        self,
        stake_addr: str,
        *,
        count: int | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> dict:
        """Addresses seen on-chain using the stake key (GET /accounts/{stake_addr}/addresses)."""
        query = {"count": count, "cursor": cursor}
        return self._request(ACCOUNT_ADDRESSES, {"stake_addr": stake_addr}, query, options=options)

    def account_assets(
        self,
        stake_addr: str,
        *,
        policy: str | None = None,
        count: int | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> dict:
        """Native assets owned by addresses with the stake key (GET /accounts/{stake_addr}/assets)."""
        query = {"policy": policy, "count": count, "cursor": cursor}
        return self._request(ACCOUNT_ASSETS, {"stake_addr": stake_addr}, query, options=options)

    def account_history(
        self,
        stake_addr: str,
        *,
        epoch_no: int | None = None,
        count: int | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> dict:
        """Per-epoch history of the stake key (GET /accounts/{stake_addr}/history)."""
        query = {"epoch_no": epoch_no, "count": count, "cursor": cursor}
        return self._request(ACCOUNT_HISTORY, {"stake_addr": stake_addr}, query, options=options)

    def account_rewards(
        self,
        stake_addr: str,
        *,
        count: int | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> dict:
        """Staking rewards earned by the stake key (GET /accounts/{stake_addr}/rewards)."""
        query = {"count": count, "cursor": cursor}
        return self._request(ACCOUNT_REWARDS, {"stake_addr": stake_addr}, query, options=options)

    def account_updates(
        self,
        stake_addr: str,
        *,
        count: int | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> dict:
        """Registration, delegation and withdrawal updates (GET /accounts/{stake_addr}/updates)."""
        query = {"count": count, "cursor": cursor}
        return self._request(ACCOUNT_UPDATES, {"stake_addr": stake_addr}, query, options=options)
