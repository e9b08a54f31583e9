"""Uniswap v3 position to token amounts conversion.

Given a position tick range, the pool current tick and the position liquidity,
calculate how much of token0 and token1 the position holds.

- Below the range, all of the position value is in token0

- Inside the range, the value is split between both tokens

- At or above the upper bound, all of the value is in token1

Example:

.. code-block:: python

    position = UniswapV3Position(
        current_tick=50,
        lower_tick=0,
        upper_tick=100,
        liquidity=1000,
        owner="0x90427805C25c749f6ea6d7d9017841412F4A6434",
    )
    amounts = calculate_position_amounts(1, position)
    print(amounts.amount0, amounts.amount1)

"""
import math
from dataclasses import dataclass
from typing import Any, Optional

from eth_lp.uniswap_v3.utils import (
    get_token0_amount_in_range,
    get_token1_amount_in_range,
    tick_to_price,
)


@dataclass(frozen=True, slots=True)
class UniswapV3Position:
    """Uniswap v3 liquidity position as returned by the position reader contract."""

    #: Pool current tick
    current_tick: int

    #: Position range lower tick
    lower_tick: int

    #: Position range upper tick
    upper_tick: int

    #: Position liquidity, the L in the whitepaper
    liquidity: float

    #: Position NFT owner, passed through
    owner: str

    def __post_init__(self):
        assert self.lower_tick <= self.upper_tick, f"Bad tick range {self.lower_tick} - {self.upper_tick}"

    def is_in_range(self) -> bool:
        """Is the pool price inside the position range."""
        return self.lower_tick < self.current_tick < self.upper_tick


@dataclass(frozen=True, slots=True)
class PositionAmounts:
    """Token amounts held by a Uniswap v3 position.

    Amounts are in raw token units (no decimal conversion).
    """

    #: Position NFT id, passed through
    token_id: Any

    #: Amount of token0
    amount0: float

    #: Amount of token1
    amount1: float

    #: Position owner.
    #:
    #: `None` if there was no position for the token id.
    owner: Optional[str] = None

    def __repr__(self):
        return f"<Position {self.token_id} owner:{self.owner} amount0:{self.amount0} amount1:{self.amount1}>"

    def has_position(self) -> bool:
        return self.owner is not None

    def as_dict(self) -> dict:
        """Render as a plain dict.

        The `owner` key is only present if the position exists.
        """
        data = {
            "tokenId": self.token_id,
            "amount0": self.amount0,
            "amount1": self.amount1,
        }
        if self.owner is not None:
            data["owner"] = self.owner
        return data


def calculate_position_amounts(token_id: Any, position: Optional[UniswapV3Position]) -> PositionAmounts:
    """Calculate token0 and token1 amounts in a Uniswap v3 position.

    Uses floating point tick math `price = 1.0001 ** tick`.

    :param token_id:
        Position NFT id. Only passed through to the result.

    :param position:
        The position data, or `None` if there is no position for this token id.

    :return:
        Token amounts. Zero amounts and no owner if there was no position.
    """

    if position is None:
        return PositionAmounts(token_id, 0, 0)

    liquidity = position.liquidity
    amount0 = amount1 = None

    if liquidity > 0:
        lower_price = tick_to_price(position.lower_tick)
        upper_price = tick_to_price(position.upper_tick)
        current_price = tick_to_price(position.current_tick)

        sa = math.sqrt(lower_price)
        sb = math.sqrt(upper_price)
        sp = math.sqrt(current_price)

        if current_price <= lower_price:
            amount0 = get_token0_amount_in_range(liquidity, sa, sb)
            amount1 = 0
        elif current_price < upper_price:
            amount0 = get_token0_amount_in_range(liquidity, sp, sb)
            amount1 = get_token1_amount_in_range(liquidity, sp, sa)
        else:
            amount0 = 0
            amount1 = get_token1_amount_in_range(liquidity, sb, sa)

    return PositionAmounts(
        token_id,
        amount0 or 0,
        amount1 or 0,
        owner=position.owner,
    )
