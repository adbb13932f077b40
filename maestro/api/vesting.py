"""
Vesting API module for the hosted vesting contract.
"""

from maestro.api.base import BaseAPI
from maestro.api.common import JSON, Endpoint

VESTING_COLLECT = Endpoint(
    "contracts_vesting_collect_beneficiary_post",
    "POST",
    "/contracts/vesting/collect/{beneficiary}",
    required=("beneficiary",),
)
VESTING_LOCK = Endpoint(
    "contracts_vesting_lock_post",
    "POST",
    "/contracts/vesting/lock",
    required=("contracts_vesting_lock_post_request",),
    body="contracts_vesting_lock_post_request",
    content_type=JSON,
)
VESTING_STATE = Endpoint(
    "contracts_vesting_state_beneficiary_get",
    "GET",
    "/contracts/vesting/state/{beneficiary}",
    required=("beneficiary",),
)


class VestingAPI(BaseAPI):
    """Vesting endpoints."""

    def contracts_vesting_collect_beneficiary_post(self, beneficiary: str, *, options: dict | None = None) -> dict:
        """Build a transaction collecting vested assets (POST /contracts/vesting/collect/{beneficiary})."""
        return self._request(VESTING_COLLECT, {"beneficiary": beneficiary}, options=options)

    def contracts_vesting_lock_post(
        self, contracts_vesting_lock_post_request: dict, *, options: dict | None = None
    ) -> dict:
        """
        Build a transaction locking assets into the vesting contract.
        POST /contracts/vesting/lock
        The request carries sender, beneficiary, asset_policy_id, asset_token_name,
        total_vesting_quantity, vesting_period_start, vesting_period_end,
        first_unlock_possible_after, total_installments and vesting_memo.
        """
        return self._request(VESTING_LOCK, body=contracts_vesting_lock_post_request, options=options)

    def contracts_vesting_state_beneficiary_get(self, beneficiary: str, *, options: dict | None = None) -> list:
        """Vesting assets at a beneficiary address (GET /contracts/vesting/state/{beneficiary})."""
        return self._request(VESTING_STATE, {"beneficiary": beneficiary}, options=options)
