"""
Print the latest block (or a given block) using credentials from the environment.

Usage examples:
  python -m scripts.latest_block
  python -m scripts.latest_block --network Preprod --block 1234567
"""

from __future__ import annotations

import argparse
import logging
import sys

import requests

from maestro.api.client import MaestroClient
from maestro.api.errors import ConfigurationError
from maestro.data.configuration import Configuration
from maestro.data.models.block import BlockInfo
from maestro.data.models.common import Timestamped


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show block details from the Maestro API")
    parser.add_argument("--network", default=None, help="Mainnet, Preprod or Preview (default: $MAESTRO_NETWORK)")
    parser.add_argument("--block", default=None, help="Block height or hash (default: latest)")
    parser.add_argument("--debug", action="store_true", help="Log each HTTP request")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        config = Configuration.from_env(network=args.network)
    except ConfigurationError as e:
        logging.error(f"Error: {e}")
        logging.error("Please set MAESTRO_API_KEY in your .env file or environment.")
        return 2

    with MaestroClient(config) as client:
        try:
            if args.block is None:
                payload = client.blocks.block_latest()
            else:
                payload = client.blocks.block_info(args.block)
        except requests.RequestException as e:
            logging.error(f"Request failed: {e}")
            return 1

    result = Timestamped.from_dict(payload)
    block = BlockInfo.from_dict(result.data)
    print(f"Block {block.height} ({block.hash})")
    print(f"    Epoch: {block.epoch} slot {block.epoch_slot} (absolute {block.absolute_slot})")
    print(f"    Time: {block.timestamp}")
    print(f"    Transactions: {len(block.tx_hashes)}  Fees: {block.total_fees}")
    print(f"    Indexed as of slot {result.last_updated.block_slot}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
