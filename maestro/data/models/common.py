from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from maestro.utils.time import parse_iso_utc


@dataclass
class LastUpdated:
    block_hash: str
    block_slot: int
    timestamp: str

    @property
    def at(self) -> datetime | None:
        """When the index was last updated, or None if the service sent no timestamp."""
        return parse_iso_utc(self.timestamp)

    @staticmethod
    def from_dict(d: dict) -> "LastUpdated":
        return LastUpdated(
            block_hash=d.get("block_hash", ""),
            block_slot=d.get("block_slot", 0),
            timestamp=d.get("timestamp", ""),
        )


@dataclass
class Timestamped:
    """Single-record response: {data, last_updated}."""

    data: Any
    last_updated: LastUpdated

    @staticmethod
    def from_dict(d: dict) -> "Timestamped":
        return Timestamped(data=d.get("data"), last_updated=LastUpdated.from_dict(d.get("last_updated") or {}))


@dataclass
class Paginated:
    """Page of a cursor-paginated listing: {data: [...], last_updated, next_cursor?}."""

    data: list[Any] = field(default_factory=list)
    last_updated: LastUpdated | None = None
    next_cursor: str | None = None

    @property
    def has_next(self) -> bool:
        return bool(self.next_cursor)

    @staticmethod
    def from_dict(d: dict) -> "Paginated":
        last_updated = d.get("last_updated")
        return Paginated(
            data=list(d.get("data") or []),
            last_updated=LastUpdated.from_dict(last_updated) if isinstance(last_updated, dict) else None,
            next_cursor=d.get("next_cursor"),
        )
