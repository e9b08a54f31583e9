"""Uniswap v3 tick and liquidity helper functions.

All functions work on Python floats. They are meant for
reporting, not for settlement-exact amounts.
"""

#: Price ratio between two adjacent ticks
TICK_BASE = 1.0001


def tick_to_price(tick):
    """Returns price corresponding to a tick"""
    return TICK_BASE**tick


def get_token0_amount_in_range(liquidity, sp, sb):
    """Returns token0 (base token) amount in a liquidity range

    This is derived formula based on: https://atiselsts.github.io/pdfs/uniswap-v3-liquidity-math.pdf

    :param liquidity: current virtual liquidity
    :param sp: square root of the lower bound of the active range, or the current price
    :param sb: square root upper price
    """
    return liquidity * (sb - sp) / (sp * sb)


def get_token1_amount_in_range(liquidity, sp, sa):
    """Returns token1 (quote token) amount in a liquidity range

    This is derived formula based on: https://atiselsts.github.io/pdfs/uniswap-v3-liquidity-math.pdf

    :param liquidity: current virtual liquidity
    :param sp: square root of the upper bound of the active range, or the current price
    :param sa: square root lower price
    """
    return liquidity * (sp - sa)
