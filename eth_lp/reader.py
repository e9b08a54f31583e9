"""Position reader contract client.

Wraps a deployed position reader contract that exposes
`getUniswapV2Position(pair, owner)` and `getUniswapV3Position(tokenId)` view functions.

- :py:class:`PositionReader` is constructed by the caller and passed around,
  there is no module level connection

- `fetch_*` methods raise on revert and transport errors

- `read_*` methods log the error and return `None`

Example:

.. code-block:: python

    web3 = create_web3(json_rpc_url)
    reader = create_position_reader(web3, "0x2c13ef1683f8c8488ccd9f697c4f511b28a47f2a", block_identifier=7583716)
    amounts = reader.read_uniswap_v3_amounts(1234)
    if amounts is None:
        print("Could not read the position")

"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

import requests
from eth_typing import HexAddress
from web3 import Web3
from web3.contract.contract import Contract
from web3.exceptions import Web3Exception
from web3.types import BlockIdentifier

from eth_lp.abi import ZERO_ADDRESS, get_deployed_contract, get_function_names
from eth_lp.uniswap_v2.position import UniswapV2Position, UniswapV2PositionAmounts, calculate_uniswap_v2_amounts
from eth_lp.uniswap_v3.position import PositionAmounts, UniswapV3Position, calculate_position_amounts

logger = logging.getLogger(__name__)


#: Bundled ABI of the position reader contract
DEFAULT_ABI_FILE = "PositionReader.json"

#: Functions a position reader ABI must have
REQUIRED_FUNCTIONS = ("getUniswapV2Position", "getUniswapV3Position")

#: Errors we catch when reading positions.
#:
#: Reverts, JSON-RPC error responses and bad output decoding are all :py:class:`Web3Exception`.
CHAIN_ERRORS = (Web3Exception, requests.RequestException)


class PositionReader:
    """Read-only calls to the position reader contract."""

    def __init__(self, contract: Contract, block_identifier: BlockIdentifier = "latest"):
        """
        :param contract:
            Bound contract proxy, or anything that quacks like one in tests

        :param block_identifier:
            Block number or tag all calls are made against
        """
        self.contract = contract
        self.block_identifier = block_identifier

    def __repr__(self):
        return f"<PositionReader {self.contract.address} at block {self.block_identifier}>"

    def call(self, method: str, *args) -> Any:
        """Call a read-only contract function.

        :return:
            Decoded output as web3.py returns it

        :raise Web3Exception:
            On revert or JSON-RPC error
        """
        func = getattr(self.contract.functions, method)
        logger.debug("Calling %s%s at block %s", method, args, self.block_identifier)
        return func(*args).call(block_identifier=self.block_identifier)

    def fetch_uniswap_v3_position(self, token_id: int) -> Optional[UniswapV3Position]:
        """Read a Uniswap v3 position.

        :return:
            `None` if the contract returned an empty position
        """
        owner, current_tick, lower_tick, upper_tick, liquidity = self.call("getUniswapV3Position", token_id)

        if owner == ZERO_ADDRESS and liquidity == 0 and lower_tick == upper_tick == 0:
            logger.info("No Uniswap v3 position for token id %s", token_id)
            return None

        return UniswapV3Position(
            current_tick=int(current_tick),
            lower_tick=int(lower_tick),
            upper_tick=int(upper_tick),
            liquidity=int(liquidity),
            owner=owner,
        )

    def fetch_uniswap_v2_position(
        self,
        pair: Union[HexAddress, str],
        owner: Union[HexAddress, str],
    ) -> Optional[UniswapV2Position]:
        """Read the LP token holding of an owner in a Uniswap v2 pair.

        :return:
            `None` if the pair has no liquidity
        """
        pair = Web3.to_checksum_address(pair)
        owner = Web3.to_checksum_address(owner)

        result = self.call("getUniswapV2Position", pair, owner)
        pair_address, token0, token1, reserve0, reserve1, total_supply, balance = result

        if total_supply == 0:
            logger.info("Uniswap v2 pair %s has no liquidity", pair)
            return None

        return UniswapV2Position(
            pair=pair_address,
            owner=owner,
            token0=token0,
            token1=token1,
            reserve0=int(reserve0),
            reserve1=int(reserve1),
            total_supply=int(total_supply),
            balance=int(balance),
        )

    def read_uniswap_v3_amounts(self, token_id: int) -> Optional[PositionAmounts]:
        """Read a Uniswap v3 position and calculate its token amounts.

        :return:
            Token amounts, with zero amounts if there is no position.

            `None` if the chain call failed. The error is logged.
        """
        try:
            position = self.fetch_uniswap_v3_position(token_id)
        except CHAIN_ERRORS as e:
            logger.error("Error fetching Uniswap v3 position %s at block %s: %s", token_id, self.block_identifier, e)
            return None

        logger.info("Uniswap v3 position %s at block %s: %s", token_id, self.block_identifier, position)
        return calculate_position_amounts(token_id, position)

    def read_uniswap_v2_amounts(
        self,
        pair: Union[HexAddress, str],
        owner: Union[HexAddress, str],
    ) -> Optional[UniswapV2PositionAmounts]:
        """Read a Uniswap v2 LP holding and calculate the owner's share of the reserves.

        :return:
            `None` if the chain call failed, or there is no liquidity in the pair
        """
        try:
            position = self.fetch_uniswap_v2_position(pair, owner)
        except CHAIN_ERRORS as e:
            logger.error("Error fetching Uniswap v2 position %s/%s at block %s: %s", pair, owner, self.block_identifier, e)
            return None

        logger.info("Uniswap v2 position at block %s: %s", self.block_identifier, position)
        return calculate_uniswap_v2_amounts(position)


def create_position_reader(
    web3: Web3,
    address: Union[HexAddress, str],
    abi_fname: str | Path = DEFAULT_ABI_FILE,
    block_identifier: BlockIdentifier = "latest",
) -> PositionReader:
    """Bind a position reader contract at an address.

    :param abi_fname:
        Bundled ABI file name, or an absolute path to your own ABI JSON

    :param block_identifier:
        Pin all calls to a historical block. Needs an archive node for old blocks.
    """
    names = get_function_names(fname=abi_fname)
    missing = [name for name in REQUIRED_FUNCTIONS if name not in names]
    assert not missing, f"ABI {abi_fname} lacks functions {missing}"

    contract = get_deployed_contract(web3, abi_fname, address)
    return PositionReader(contract, block_identifier)
