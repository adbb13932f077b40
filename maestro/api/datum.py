from maestro.api.base import BaseAPI
from maestro.api.common import Endpoint

LOOKUP_DATUM = Endpoint("lookup_datum", "GET", "/datums/{datum_hash}", required=("datum_hash",))


class DatumAPI(BaseAPI):
    """Datum endpoints."""

    def lookup_datum(self, datum_hash: str, *, options: dict | None = None) -> dict:
        """Datum by its hex hash (GET /datums/{datum_hash})."""
        return self._request(LOOKUP_DATUM, {"datum_hash": datum_hash}, options=options)
