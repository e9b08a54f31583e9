"""Chain specific configuration and Web3 connection setup."""

import logging
from typing import Optional

from web3 import HTTPProvider, Web3

from eth_lp.utils import get_url_domain

logger = logging.getLogger(__name__)


#: Chain id of Ethereum Sepolia testnet, where the position reader contract lives
SEPOLIA_CHAIN_ID = 11155111

#: Manually maintained shorthand names for different EVM chains
CHAIN_NAMES = {
    1: "Ethereum",
    10: "Optimism",
    56: "Binance",
    137: "Polygon",
    8453: "Base",
    42161: "Arbitrum",
    421614: "Arbitrum_Sepolia",
    SEPOLIA_CHAIN_ID: "Sepolia",
}


def get_chain_name(chain_id: int) -> str:
    """Translate Ethereum chain id to its name."""
    name = CHAIN_NAMES.get(chain_id)
    if name:
        return name

    return f"<Unknown chain, id {chain_id}>"


def get_chain_id_by_name(name: str) -> Optional[int]:
    """Get chain id by its name.

    :param name:
        Case-insensitive chain name, e.g. "Ethereum", "Sepolia"

    :return:
        Chain id or None if not found
    """
    name_lower = name.lower()
    for chain_id, chain_name in CHAIN_NAMES.items():
        if chain_name.lower() == name_lower:
            return chain_id
    return None


def create_web3(json_rpc_url: str, request_timeout: float = 30.0) -> Web3:
    """Create a Web3 connection over HTTP JSON-RPC.

    - The provider does not retry failed requests, errors are raised
      to the caller as is

    Example:

    .. code-block:: python

        web3 = create_web3("https://ethereum-sepolia-rpc.publicnode.com")
        print(f"Connected to chain {web3.eth.chain_id}")

    :param json_rpc_url:
        HTTP(S) JSON-RPC endpoint

    :param request_timeout:
        HTTP request timeout in seconds
    """
    assert json_rpc_url.startswith(("http://", "https://")), f"Only HTTP JSON-RPC supported, got {json_rpc_url}"
    provider = HTTPProvider(
        json_rpc_url,
        request_kwargs={"timeout": request_timeout},
        exception_retry_configuration=None,
    )
    web3 = Web3(provider)
    logger.info("Created Web3 connection to %s", get_url_domain(json_rpc_url))
    return web3
