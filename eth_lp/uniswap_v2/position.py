"""Uniswap v2 LP token share."""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from eth_typing import HexAddress


@dataclass(frozen=True, slots=True)
class UniswapV2Position:
    """LP token holding in a Uniswap v2 pair.

    All values are raw token units.
    """

    #: Pair contract
    pair: HexAddress

    #: LP token holder
    owner: HexAddress

    #: Side a
    token0: HexAddress

    #: Side b
    token1: HexAddress

    #: Pair reserve of token0
    reserve0: int

    #: Pair reserve of token1
    reserve1: int

    #: Total minted LP tokens
    total_supply: int

    #: LP tokens held by the owner
    balance: int


@dataclass(frozen=True, slots=True)
class UniswapV2PositionAmounts:
    """Owner's share of the pair reserves."""

    pair: HexAddress

    owner: HexAddress

    #: Raw token0 amount redeemable by the owner
    amount0: int

    #: Raw token1 amount redeemable by the owner
    amount1: int

    #: Owner's share of the pool, 1 = 100%
    share: Decimal


def calculate_uniswap_v2_amounts(position: Optional[UniswapV2Position]) -> Optional[UniswapV2PositionAmounts]:
    """Calculate how much of the pair reserves the LP tokens are worth.

    Same rounding as `UniswapV2Pair.burn()`: amounts are rounded down.

    :return:
        `None` if there is no position
    """
    if position is None:
        return None

    assert position.total_supply > 0, f"Pair {position.pair} has no LP supply"
    assert 0 <= position.balance <= position.total_supply, f"Bad LP balance {position.balance}, total supply is {position.total_supply}"

    return UniswapV2PositionAmounts(
        pair=position.pair,
        owner=position.owner,
        amount0=position.reserve0 * position.balance // position.total_supply,
        amount1=position.reserve1 * position.balance // position.total_supply,
        share=Decimal(position.balance) / Decimal(position.total_supply),
    )
