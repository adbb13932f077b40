from dataclasses import dataclass


@dataclass
class AccountInfo:
    stake_address: str
    registered: bool
    total_balance: int
    utxo_balance: int
    rewards_available: int
    total_rewarded: int
    total_withdrawn: int
    delegated_pool: str | None = None

    @staticmethod
    def from_dict(d: dict) -> "AccountInfo":
        return AccountInfo(
            stake_address=d["stake_address"],
            registered=bool(d.get("registered")),
            total_balance=int(d.get("total_balance", 0)),
            utxo_balance=int(d.get("utxo_balance", 0)),
            rewards_available=int(d.get("rewards_available", 0)),
            total_rewarded=int(d.get("total_rewarded", 0)),
            total_withdrawn=int(d.get("total_withdrawn", 0)),
            delegated_pool=d.get("delegated_pool"),
        )
