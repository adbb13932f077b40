from maestro.api.base import BaseAPI
from maestro.api.common import Endpoint

SCRIPT_BY_HASH = Endpoint("script_by_hash", "GET", "/scripts/{script_hash}", required=("script_hash",))


class ScriptsAPI(BaseAPI):
    """Scripts endpoints."""

    def script_by_hash(self, script_hash: str, *, options: dict | None = None) -> dict:
        """Script by its hex hash (GET /scripts/{script_hash})."""
        return self._request(SCRIPT_BY_HASH, {"script_hash": script_hash}, options=options)
