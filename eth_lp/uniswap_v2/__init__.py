"""Uniswap v2 LP share math."""
