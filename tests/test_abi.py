"""ABI loading and binding the position reader contract."""
import json

import pytest
from web3 import EthereumTesterProvider, Web3

from eth_lp.abi import get_abi_by_filename, get_contract, get_deployed_contract, get_function_names
from eth_lp.reader import create_position_reader

READER_ADDRESS = "0x2c13ef1683f8c8488ccd9f697c4f511b28a47f2a"


@pytest.fixture
def web3():
    """Set up a local unit testing blockchain."""
    # https://web3py.readthedocs.io/en/stable/examples.html#contract-unit-tests-in-python
    return Web3(EthereumTesterProvider())


def test_bundled_abi():
    abi = get_abi_by_filename("PositionReader.json")
    assert type(abi) == list
    assert set(get_function_names(abi)) == {"getUniswapV2Position", "getUniswapV3Position"}


def test_contract_class_cached(web3):
    assert get_contract(web3, "PositionReader.json") is get_contract(web3, "PositionReader.json")


def test_deployed_contract_checksums_address(web3):
    contract = get_deployed_contract(web3, "PositionReader.json", READER_ADDRESS)
    assert contract.address == Web3.to_checksum_address(READER_ADDRESS)
    assert contract.functions.getUniswapV3Position


def test_create_position_reader(web3):
    reader = create_position_reader(web3, READER_ADDRESS, block_identifier=7583716)
    assert reader.block_identifier == 7583716
    assert reader.contract.address == Web3.to_checksum_address(READER_ADDRESS)


def test_custom_abi_file(web3, tmp_path):
    """Absolute paths load ABI files from the filesystem."""
    path = tmp_path / "reader.json"
    path.write_text(json.dumps({"abi": get_abi_by_filename("PositionReader.json")}))

    reader = create_position_reader(web3, READER_ADDRESS, abi_fname=path)
    assert reader.contract.functions.getUniswapV2Position


def test_custom_abi_missing_functions(web3, tmp_path):
    abi = [entry for entry in get_abi_by_filename("PositionReader.json") if entry["name"] != "getUniswapV2Position"]
    path = tmp_path / "partial.json"
    path.write_text(json.dumps(abi))

    with pytest.raises(AssertionError):
        create_position_reader(web3, READER_ADDRESS, abi_fname=path)


def test_read_without_deployed_contract(web3, caplog):
    """Calling an address without code fails on decoding, which is logged and gives no result."""
    reader = create_position_reader(web3, READER_ADDRESS)
    assert reader.read_uniswap_v3_amounts(1) is None
    assert "Error fetching Uniswap v3 position 1" in caplog.text
