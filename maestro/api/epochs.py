"""
Epochs API module for current and historical epoch details.
"""

from maestro.api.base import BaseAPI
from maestro.api.common import Endpoint

CURRENT_EPOCH = Endpoint("current_epoch", "GET", "/epochs/current")
EPOCH_INFO = Endpoint("epoch_info", "GET", "/epochs/{epoch_no}", required=("epoch_no",))


class EpochsAPI(BaseAPI):
    """Epochs endpoints."""

    def current_epoch(self, *, options: dict | None = None) -> dict:
        """Current epoch details (GET /epochs/current)."""
        return self._request(CURRENT_EPOCH, options=options)

    def epoch_info(self, epoch_no: int, *, options: dict | None = None) -> dict:
        """Details of a specific epoch (GET /epochs/{epoch_no})."""
        return self._request(EPOCH_INFO, {"epoch_no": epoch_no}, options=options)
