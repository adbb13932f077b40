"""
Transactions API module for transaction details and output lookups.
"""

from maestro.api.base import BaseAPI
from maestro.api.common import JSON, Endpoint

TX_INFO = Endpoint("tx_info", "GET", "/transactions/{tx_hash}", required=("tx_hash",))
TX_CBOR_BY_TX_HASH = Endpoint("tx_cbor_by_tx_hash", "GET", "/transactions/{tx_hash}/cbor", required=("tx_hash",))
ADDRESS_BY_TXO = Endpoint(
    "address_by_txo", "GET", "/transactions/{tx_hash}/outputs/{index}/address", required=("tx_hash", "index")
)
TXO_BY_TXO_REF = Endpoint(
    "txo_by_txo_ref", "GET", "/transactions/{tx_hash}/outputs/{index}/txo", required=("tx_hash", "index")
)
TXOS_BY_TXO_REFS = Endpoint(
    "txos_by_txo_refs",
    "POST",
    "/transactions/outputs",
    required=("request_body",),
    body="request_body",
    content_type=JSON,
)


class TransactionsAPI(BaseAPI):
    """Transactions endpoints."""

    def tx_info(self, tx_hash: str, *, options: dict | None = None) -> dict:
        """Transaction details (GET /transactions/{tx_hash})."""
        return self._request(TX_INFO, {"tx_hash": tx_hash}, options=options)

    def tx_cbor_by_tx_hash(self, tx_hash: str, *, options: dict | None = None) -> dict:
        """CBOR bytes of a transaction (GET /transactions/{tx_hash}/cbor)."""
        return self._request(TX_CBOR_BY_TX_HASH, {"tx_hash": tx_hash}, options=options)

    def address_by_txo(self, tx_hash: str, index: int, *, options: dict | None = None) -> dict:
        """Address of an output reference (GET /transactions/{tx_hash}/outputs/{index}/address)."""
        return self._request(ADDRESS_BY_TXO, {"tx_hash": tx_hash, "index": index}, options=options)

    def txo_by_txo_ref(
        self, tx_hash: str, index: int, *, with_cbor: bool | None = None, options: dict | None = None
    ) -> dict:
        """Output by output reference (GET /transactions/{tx_hash}/outputs/{index}/txo)."""
        query = {"with_cbor": with_cbor}
        return self._request(TXO_BY_TXO_REF, {"tx_hash": tx_hash, "index": index}, query, options=options)

    def txos_by_txo_refs(
        self,
        request_body: list[str],
        *,
        resolve_datums: bool | None = None,
        with_cbor: bool | None = None,
        options: dict | None = None,
    ) -> dict:
        """
        Outputs for a list of output references, each formatted "{tx_hash}#{index}".
        POST /transactions/outputs
        """
        query = {"resolve_datums": resolve_datums, "with_cbor": with_cbor}
        return self._request(TXOS_BY_TXO_REFS, query=query, body=request_body, options=options)
