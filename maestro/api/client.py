"""
API Client module providing centralized access to Maestro API endpoints.
Orchestrates sub-API modules for accounts, addresses, assets, blocks and the rest.
"""

from maestro.api.accounts import AccountsAPI
from maestro.api.addresses import AddressesAPI
from maestro.api.assets import AssetsAPI
from maestro.api.blocks import BlocksAPI
from maestro.api.datum import DatumAPI
from maestro.api.ecosystem import EcosystemAPI
from maestro.api.epochs import EpochsAPI
from maestro.api.general import GeneralAPI
from maestro.api.handle_requests import RequestHandler
from maestro.api.pools import PoolsAPI
from maestro.api.scripts import ScriptsAPI
from maestro.api.transactions import TransactionsAPI
from maestro.api.tx_manager import TxManagerAPI
from maestro.api.vesting import VestingAPI
from maestro.data.configuration import Configuration


class MaestroClient:
    """Root client that centralizes sub-APIs and holds shared configuration/session state."""

    def __init__(self, config: Configuration):
        self.config = config
        self.http = RequestHandler(config)
        self.accounts = AccountsAPI(config, self.http)
        self.addresses = AddressesAPI(config, self.http)
        self.assets = AssetsAPI(config, self.http)
        self.blocks = BlocksAPI(config, self.http)
        self.datum = DatumAPI(config, self.http)
        self.ecosystem = EcosystemAPI(config, self.http)
        self.epochs = EpochsAPI(config, self.http)
        self.general = GeneralAPI(config, self.http)
        self.pools = PoolsAPI(config, self.http)
        self.scripts = ScriptsAPI(config, self.http)
        self.transactions = TransactionsAPI(config, self.http)
        self.tx_manager = TxManagerAPI(config, self.http)
        self.vesting = VestingAPI(config, self.http)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "MaestroClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
