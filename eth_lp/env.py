"""Get JSON-RPC URL and other settings from environment variables."""

import os
from typing import Optional

from eth_lp.chain import CHAIN_NAMES


def get_json_rpc_env(chain: int) -> str:
    """Get the JSON-RPC URL environment variable based on the chain id.

    - Map chain id to a name and from there to environment variables,
      e.g. `JSON_RPC_SEPOLIA`
    """
    chain_name = CHAIN_NAMES.get(chain)
    assert chain_name, f"CHAIN_NAMES not configured for chain id {chain}"
    return f"JSON_RPC_{chain_name.upper()}"


def read_json_rpc_url(chain: int, default: Optional[str] = None) -> str:
    """Read JSON-RPC URL from environment variable based on the chain id.

    :param default:
        Public endpoint used when the environment variable is not set

    :raises ValueError: If the environment variable is not set for the given chain and there is no default.
    """
    assert type(chain) is int, f"Chain ID must be an integer: {type(chain)}"
    env_var = get_json_rpc_env(chain)
    json_rpc_url = os.environ.get(env_var, default)
    if not json_rpc_url:
        raise ValueError(f"Environment variable {env_var} is not set for chain {chain}")
    return json_rpc_url


def read_block_identifier(env_var: str = "BLOCK_NUMBER", default: int | str = "latest") -> int | str:
    """Read the block to pin contract calls to.

    Block numbers are converted to `int`, block tags like `latest`
    are passed through.
    """
    value = os.environ.get(env_var)
    if not value:
        return default
    if value.isdigit():
        return int(value)
    return value
