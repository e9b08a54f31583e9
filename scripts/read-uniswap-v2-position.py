"""Read a Uniswap v2 LP holding through the position reader contract.

- Uses Ethereum Sepolia testnet by default

- Prints the raw reserves and the owner's share of them

To run:

.. code-block:: shell

    export JSON_RPC_SEPOLIA=...
    python scripts/read-uniswap-v2-position.py

"""

import logging
import os

from eth_lp.chain import SEPOLIA_CHAIN_ID, create_web3, get_chain_name
from eth_lp.env import read_block_identifier, read_json_rpc_url
from eth_lp.reader import create_position_reader
from eth_lp.utils import setup_console_logging

logger = logging.getLogger(__name__)


def main():
    setup_console_logging()

    json_rpc_url = read_json_rpc_url(SEPOLIA_CHAIN_ID, default="https://ethereum-sepolia-rpc.publicnode.com")
    reader_address = os.environ.get("POSITION_READER_ADDRESS", "0x2c13ef1683f8c8488ccd9f697c4f511b28a47f2a")
    block_identifier = read_block_identifier(default=7583716)
    pair_address = os.environ.get("PAIR_ADDRESS", "0x90427805C25c749f6ea6d7d9017841412F4A6434")
    owner_address = os.environ.get("OWNER_ADDRESS", "0x9984b4b4e408e8d618a879e5315bd30952c89103")

    web3 = create_web3(json_rpc_url)
    logger.info("Connected to %s", get_chain_name(web3.eth.chain_id))

    reader = create_position_reader(web3, reader_address, block_identifier=block_identifier)

    amounts = reader.read_uniswap_v2_amounts(pair_address, owner_address)
    if amounts is None:
        logger.error("No Uniswap v2 position for %s in %s", owner_address, pair_address)
        return

    print("-" * 80)
    print("Uniswap v2 pair", amounts.pair)
    print("Block", block_identifier)
    print("Owner", amounts.owner)
    print(f"Share {amounts.share:.6%}")
    print("Amount0", amounts.amount0)
    print("Amount1", amounts.amount1)
    print("-" * 80)


if __name__ == "__main__":
    main()
