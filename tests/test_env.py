"""Configuration from environment variables and Web3 connection setup."""
import logging

import pytest

from eth_lp.chain import SEPOLIA_CHAIN_ID, create_web3, get_chain_id_by_name, get_chain_name
from eth_lp.env import get_json_rpc_env, read_block_identifier, read_json_rpc_url
from eth_lp.utils import get_url_domain, setup_console_logging


def test_json_rpc_env_name():
    assert get_json_rpc_env(SEPOLIA_CHAIN_ID) == "JSON_RPC_SEPOLIA"
    assert get_json_rpc_env(1) == "JSON_RPC_ETHEREUM"


def test_read_json_rpc_url(monkeypatch):
    monkeypatch.setenv("JSON_RPC_SEPOLIA", "https://example.com/rpc")
    assert read_json_rpc_url(SEPOLIA_CHAIN_ID) == "https://example.com/rpc"


def test_read_json_rpc_url_default(monkeypatch):
    monkeypatch.delenv("JSON_RPC_SEPOLIA", raising=False)
    assert read_json_rpc_url(SEPOLIA_CHAIN_ID, default="https://fallback.example.com") == "https://fallback.example.com"

    with pytest.raises(ValueError):
        read_json_rpc_url(SEPOLIA_CHAIN_ID)


def test_read_block_identifier(monkeypatch):
    monkeypatch.delenv("BLOCK_NUMBER", raising=False)
    assert read_block_identifier(default=7583716) == 7583716

    monkeypatch.setenv("BLOCK_NUMBER", "123")
    assert read_block_identifier() == 123

    monkeypatch.setenv("BLOCK_NUMBER", "finalized")
    assert read_block_identifier() == "finalized"


def test_chain_names():
    assert get_chain_name(SEPOLIA_CHAIN_ID) == "Sepolia"
    assert get_chain_name(999_999_999) == "<Unknown chain, id 999999999>"
    assert get_chain_id_by_name("sepolia") == SEPOLIA_CHAIN_ID
    assert get_chain_id_by_name("foobar") is None


def test_create_web3_no_retries():
    web3 = create_web3("https://sepolia.infura.io/v3/secret-key")
    assert web3.provider.endpoint_uri == "https://sepolia.infura.io/v3/secret-key"
    assert web3.provider.exception_retry_configuration is None


def test_create_web3_bad_url():
    with pytest.raises(AssertionError):
        create_web3("wss://example.com")


def test_url_domain_hides_api_key():
    assert get_url_domain("https://sepolia.infura.io/v3/secret-key") == "sepolia.infura.io"
    assert get_url_domain("http://localhost:8545") == "localhost:8545"


def test_setup_console_logging(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    root = setup_console_logging()
    assert root is logging.getLogger()
    assert logging.getLogger("urllib3.connectionpool").level == logging.WARNING
