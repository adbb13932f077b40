from dataclasses import dataclass, field


@dataclass
class Asset:
    unit: str
    amount: str

    @property
    def quantity(self) -> int:
        # amounts arrive as strings when amounts-as-strings is requested
        return int(self.amount)

    @property
    def is_lovelace(self) -> bool:
        return self.unit == "lovelace"

    @staticmethod
    def from_dict(d: dict) -> "Asset":
        return Asset(unit=d["unit"], amount=str(d["amount"]))


@dataclass
class Utxo:
    tx_hash: str
    index: int
    address: str
    assets: list[Asset] = field(default_factory=list)
    datum: dict | None = None
    reference_script: dict | None = None
    slot: int | None = None
    txout_cbor: str | None = None

    @property
    def ref(self) -> str:
        return f"{self.tx_hash}#{self.index}"

    def lovelace(self) -> int:
        return sum(a.quantity for a in self.assets if a.is_lovelace)

    @staticmethod
    def from_dict(d: dict) -> "Utxo":
        return Utxo(
            tx_hash=d["tx_hash"],
            index=d["index"],
            address=d.get("address", ""),
            assets=[Asset.from_dict(a) for a in d.get("assets", []) if a and "unit" in a],
            datum=d.get("datum"),
            reference_script=d.get("reference_script"),
            slot=d.get("slot"),
            txout_cbor=d.get("txout_cbor"),
        )
