"""
Transaction manager API module: submit signed transactions and follow their state.
Submitted bodies are CBOR; hex strings are decoded to bytes before sending.
"""

from maestro.api.base import BaseAPI
from maestro.api.common import CBOR, Endpoint

TX_MANAGER_HISTORY = Endpoint("tx_manager_history", "GET", "/txmanager/history")
TX_MANAGER_STATE = Endpoint("tx_manager_state", "GET", "/txmanager/{tx_hash}/state", required=("tx_hash",))
TX_MANAGER_SUBMIT = Endpoint(
    "tx_manager_submit", "POST", "/txmanager", required=("body",), body="body", content_type=CBOR
)
TX_MANAGER_TURBO_SUBMIT = Endpoint(
    "tx_manager_turbo_submit", "POST", "/txmanager/turbosubmit", required=("body",), body="body", content_type=CBOR
)


class TxManagerAPI(BaseAPI):
    """Transaction manager endpoints."""

    def tx_manager_history(
        self, *, count: int | None = None, page: int | None = None, options: dict | None = None
    ) -> list:
        """Monitored transactions submitted with this key (GET /txmanager/history)."""
        query = {"count": count, "page": page}
        return self._request(TX_MANAGER_HISTORY, query=query, options=options)

    def tx_manager_state(self, tx_hash: str, *, options: dict | None = None) -> dict:
        """State of a monitored transaction (GET /txmanager/{tx_hash}/state)."""
        return self._request(TX_MANAGER_STATE, {"tx_hash": tx_hash}, options=options)

    def tx_manager_submit(self, body: str | bytes, *, options: dict | None = None) -> str:
        """Submit a signed transaction; returns its hash (POST /txmanager)."""
        return self._request(TX_MANAGER_SUBMIT, body=body, options=options)

    def tx_manager_turbo_submit(self, body: str | bytes, *, options: dict | None = None) -> str:
        """Turbo submit a signed transaction; returns its hash (POST /txmanager/turbosubmit)."""
        return self._request(TX_MANAGER_TURBO_SUBMIT, body=body, options=options)
