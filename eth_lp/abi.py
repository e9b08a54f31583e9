"""ABI loading from the bundled ABI files.

Provides functions to load ABI files and construct :py:class:`web3.contract.Contract` types.
The results are cached for the speedup.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Optional, Type, Union

from eth_typing import HexAddress
from web3 import Web3
from web3.contract.contract import Contract

# How big are our ABI and contract caches
_CACHE_SIZE = 64


#: Ethereum 0x0000000000000000000000000000000000000000 address
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


@lru_cache(maxsize=_CACHE_SIZE)
def get_abi_by_filename(fname: str | Path) -> dict | list:
    """Reads a embedded ABI file and returns it.

    Example::

        abi = get_abi_by_filename("PositionReader.json")

    Loaded ABI files are cache in in-process memory to speed up future loading.

    :param fname:
        JSON filename in the bundled `eth_lp/abi` folder.

        Use slash prefixed path for absolute lookups.

    :return:
        Etherscan style ABI list or a full Solidity compiler artifact.
    """

    here = Path(__file__).resolve().parent
    abi_path = here / "abi" / Path(fname)
    with open(abi_path, "rt", encoding="utf-8") as f:
        abi = json.load(f)
    return abi


@lru_cache(maxsize=_CACHE_SIZE)
def get_contract(
    web3: Web3,
    fname: str | Path,
) -> Type[Contract]:
    """Get Contract proxy class from ABI JSON file.

    Read ABI file from

    - Our bundled ABI files in the Python package

    - Filesystem using absolute path

    - ABI file can be a solc compiling artifact or Etherscan copy-pasted ABI.

    Any results are cached. Web3 connection is part of the cache key.

    Example:

    .. code-block:: python

        PositionReader = get_contract(web3, "PositionReader.json")

    :param web3:
        Web3 instance

    :param fname:
        JSON ABI file.

    :return:
        Contract proxy class
    """

    contract_interface = get_abi_by_filename(fname)

    if type(contract_interface) == list:
        # Etherscan
        abi = contract_interface
    else:
        # Solc output
        abi = contract_interface["abi"]

    Contract = web3.eth.contract(abi=abi)
    return Contract


def get_deployed_contract(
    web3: Web3,
    fname: str | Path,
    address: Union[HexAddress, str],
) -> Contract:
    """Get a Contract proxy object for a contract deployed at a specific address.

    :param web3:
        Web3 instance

    :param fname:
        JSON ABI file, see :py:func:`get_contract`

    :param address:
        Ethereum address of the deployed contract

    :return:
        `web3.contract.Contract` proxy
    """
    assert isinstance(web3, Web3), f"Got {type(web3)} instead of Web3"
    assert address, f"get_deployed_contract() address was None"

    address = Web3.to_checksum_address(address)

    Contract = get_contract(web3, fname)
    return Contract(address)


def get_function_names(abi: Optional[list] = None, fname: str | Path = "PositionReader.json") -> list[str]:
    """List callable function names in an ABI.

    Used to check a custom ABI file before binding it.
    """
    if abi is None:
        abi = get_abi_by_filename(fname)
        if type(abi) == dict:
            abi = abi["abi"]
    return [entry["name"] for entry in abi if entry.get("type") == "function"]
