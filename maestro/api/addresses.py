"""
Addresses API module for address decoding, balances, transactions and UTxOs.
UTxO endpoints ask for amounts rendered as strings.
"""

from maestro.api.base import BaseAPI
from maestro.api.common import JSON, Endpoint, Order

DECODE_ADDRESS = Endpoint("decode_address", "GET", "/addresses/{address}/decode", required=("address",))
ADDRESS_BALANCE = Endpoint(
    "address_balance", "GET", "/addresses/cred/{credential}/balance", required=("credential",)
)
TX_COUNT_BY_ADDRESS = Endpoint(
    "tx_count_by_address", "GET", "/addresses/{address}/transactions/count", required=("address",)
)
TXS_BY_ADDRESS = Endpoint("txs_by_address", "GET", "/addresses/{address}/transactions", required=("address",))
TXS_BY_PAYMENT_CRED = Endpoint(
    "txs_by_payment_cred", "GET", "/addresses/cred/{credential}/transactions", required=("credential",)
)
UTXO_REFS_AT_ADDRESS = Endpoint(
    "utxo_refs_at_address", "GET", "/addresses/{address}/utxo_refs", required=("address",)
)
UTXOS_BY_ADDRESS = Endpoint(
    "utxos_by_address", "GET", "/addresses/{address}/utxos", required=("address",), amounts_as_strings=True
)
UTXOS_BY_ADDRESSES = Endpoint(
    "utxos_by_addresses",
    "POST",
    "/addresses/utxos",
    required=("request_body",),
    body="request_body",
    content_type=JSON,
    amounts_as_strings=True,
)
UTXOS_BY_PAYMENT_CRED = Endpoint(
    "utxos_by_payment_cred",
    "GET",
    "/addresses/cred/{credential}/utxos",
    required=("credential",),
    amounts_as_strings=True,
)
UTXOS_BY_PAYMENT_CREDS = Endpoint(
    "utxos_by_payment_creds",
    "POST",
    "/addresses/cred/utxos",
    required=("request_body",),
    body="request_body",
    content_type=JSON,
    amounts_as_strings=True,
)


class AddressesAPI(BaseAPI):
    """Addresses endpoints."""

    def decode_address(self, address: str, *, options: dict | None = None) -> dict:
        """Payment and delegation parts encoded in an address (GET /addresses/{address}/decode)."""
        return self._request(DECODE_ADDRESS, {"address": address}, options=options)

    def address_balance(self, credential: str, *, options: dict | None = None) -> dict:
        """Total assets in UTxOs controlled by a payment credential (GET /addresses/cred/{credential}/balance)."""
        return self._request(ADDRESS_BALANCE, {"credential": credential}, options=options)

    def tx_count_by_address(self, address: str, *, options: dict | None = None) -> dict:
        """Number of transactions involving the address (GET /addresses/{address}/transactions/count)."""
        return self._request(TX_COUNT_BY_ADDRESS, {"address": address}, options=options)

    def txs_by_address(
        self,
        address: str,
        *,
        count: int | None = None,
        order: Order | str | None = None,
        from_: int | None = None,
        to: int | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> dict:
        """
        Transactions in which the address spent or received funds.
        GET /addresses/{address}/transactions
        from_ / to bound the slot range; order sorts by transaction age.
        """
        query = {"count": count, "order": order, "from": from_, "to": to, "cursor": cursor}
        return self._request(TXS_BY_ADDRESS, {"address": address}, query, options=options)

    def txs_by_payment_cred(
        self,
        credential: str,
        *,
        count: int | None = None,
        order: Order | str | None = None,
        from_: int | None = None,
        to: int | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> dict:
        """Transactions involving a payment credential (GET /addresses/cred/{credential}/transactions)."""
        query = {"count": count, "order": order, "from": from_, "to": to, "cursor": cursor}
        return self._request(TXS_BY_PAYMENT_CRED, {"credential": credential}, query, options=options)

    def utxo_refs_at_address(
        self,
        address: str,
        *,
        count: int | None = None,
        order: Order | str | None = None,
        from_: int | None = None,
        to: int | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> dict:
        """Output references of UTxOs at an address (GET /addresses/{address}/utxo_refs)."""
        query = {"count": count, "order": order, "from": from_, "to": to, "cursor": cursor}
        return self._request(UTXO_REFS_AT_ADDRESS, {"address": address}, query, options=options)

    def utxos_by_address(
        self,
        address: str,
        *,
        resolve_datums: bool | None = None,
        with_cbor: bool | None = None,
        asset: str | None = None,
        count: int | None = None,
        order: Order | str | None = None,
        from_: int | None = None,
        to: int | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> dict:
        """UTxOs controlled by an address (GET /addresses/{address}/utxos)."""
        query = {
            "resolve_datums": resolve_datums,
            "with_cbor": with_cbor,
            "asset": asset,
            "count": count,
            "order": order,
            "from": from_,
            "to": to,
            "cursor": cursor,
        }
        return self._request(UTXOS_BY_ADDRESS, {"address": address}, query, options=options)

    def utxos_by_addresses(
        self,
        request_body: list[str],
        *,
        resolve_datums: bool | None = None,
        with_cbor: bool | None = None,
        count: int | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> dict:
        """UTxOs controlled by any of the given addresses (POST /addresses/utxos)."""
        query = {"resolve_datums": resolve_datums, "with_cbor": with_cbor, "count": count, "cursor": cursor}
        return self._request(UTXOS_BY_ADDRESSES, query=query, body=request_body, options=options)

    def utxos_by_payment_cred(
        self,
        credential: str,
        *,
        resolve_datums: bool | None = None,
        with_cbor: bool | None = None,
        asset: str | None = None,
        count: int | None = None,
        order: Order | str | None = None,
        from_: int | None = None,
        to: int | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> dict:
        """UTxOs at addresses using a payment credential (GET /addresses/cred/{credential}/utxos)."""
        query = {
            "resolve_datums": resolve_datums,
            "with_cbor": with_cbor,
            "asset": asset,
            "count": count,
            "order": order,
            "from": from_,
            "to": to,
            "cursor": cursor,
        }
        return self._request(UTXOS_BY_PAYMENT_CRED, {"credential": credential}, query, options=options)

    def utxos_by_payment_creds(
        self,
        request_body: list[str],
        *,
        resolve_datums: bool | None = None,
        with_cbor: bool | None = None,
        count: int | None = None,
        cursor: str | None = None,
        options: dict | None = None,
    ) -> dict:
        """UTxOs controlled by any of the given payment credentials (POST /addresses/cred/utxos)."""
        query = {"resolve_datums": resolve_datums, "with_cbor": with_cbor, "count": count, "cursor": cursor}
        return self._request(UTXOS_BY_PAYMENT_CREDS, query=query, body=request_body, options=options)
