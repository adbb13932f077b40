from maestro.api.base import BaseAPI
from maestro.api.common import Endpoint

ADAHANDLE_RESOLVE = Endpoint("adahandle_resolve", "GET", "/ecosystem/adahandle/{handle}", required=("handle",))


class EcosystemAPI(BaseAPI):
    """Ecosystem endpoints."""

    def adahandle_resolve(self, handle: str, *, options: dict | None = None) -> dict:
        """Address currently holding an ADA Handle (GET /ecosystem/adahandle/{handle})."""
        return self._request(ADAHANDLE_RESOLVE, {"handle": handle}, options=options)
