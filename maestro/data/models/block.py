from dataclasses import dataclass, field


@dataclass
class ChainTip:
    block_hash: str
    height: int
    slot: int

    @staticmethod
    def from_dict(d: dict) -> "ChainTip":
        return ChainTip(block_hash=d["block_hash"], height=d["height"], slot=d["slot"])


@dataclass
class BlockInfo:
    hash: str
    height: int
    absolute_slot: int
    epoch: int
    epoch_slot: int
    timestamp: str
    confirmations: int = 0
    size: int = 0
    total_fees: int = 0
    total_output_lovelace: str = "0"
    era: str | None = None
    block_producer: str | None = None
    previous_block: str | None = None
    tx_hashes: list[str] = field(default_factory=list)

    @staticmethod
    def from_dict(d: dict) -> "BlockInfo":
        return BlockInfo(
            hash=d["hash"],
            height=d["height"],
            absolute_slot=d["absolute_slot"],
            epoch=d["epoch"],
            epoch_slot=d["epoch_slot"],
            timestamp=d.get("timestamp", ""),
            confirmations=d.get("confirmations", 0),
            size=d.get("size", 0),
            total_fees=d.get("total_fees", 0),
            total_output_lovelace=str(d.get("total_output_lovelace", "0")),
            era=d.get("era"),
            block_producer=d.get("block_producer"),
            previous_block=d.get("previous_block"),
            tx_hashes=list(d.get("tx_hashes", [])),
        )
