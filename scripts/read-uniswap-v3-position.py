"""Read a Uniswap v3 position through the position reader contract and calculate its token amounts.

- Uses Ethereum Sepolia testnet by default

- Calls are pinned to a historical block, so you need an archive node
  for old blocks

To run:

.. code-block:: shell

    export JSON_RPC_SEPOLIA=...
    export TOKEN_ID=12345
    python scripts/read-uniswap-v3-position.py

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

    # You can pass your own endpoint in an environment variable
    json_rpc_url = read_json_rpc_url(SEPOLIA_CHAIN_ID, default="https://ethereum-sepolia-rpc.publicnode.com")
    reader_address = os.environ.get("POSITION_READER_ADDRESS", "0x2c13ef1683f8c8488ccd9f697c4f511b28a47f2a")
    block_identifier = read_block_identifier(default=7583716)
    token_id = int(os.environ.get("TOKEN_ID", "1"))

    web3 = create_web3(json_rpc_url)
    logger.info("Connected to %s", get_chain_name(web3.eth.chain_id))

    reader = create_position_reader(web3, reader_address, block_identifier=block_identifier)

    amounts = reader.read_uniswap_v3_amounts(token_id)
    if amounts is None:
        logger.error("Could not read position %d", token_id)
        return

    print("-" * 80)
    print("Uniswap v3 position", token_id)
    print("Block", block_identifier)
    print("Owner", amounts.owner or "<no position>")
    print("Amount0", amounts.amount0)
    print("Amount1", amounts.amount1)
    print("-" * 80)


if __name__ == "__main__":
    main()
