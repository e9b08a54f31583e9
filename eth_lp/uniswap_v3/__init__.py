"""Uniswap v3 position math."""
