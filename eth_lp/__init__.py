"""eth_lp package root.

Read Uniswap liquidity positions from a position reader contract
and convert them to token amounts.

"""

import sys


#: Minimum required Python version to run this package
MIN_PYTHON_VERSION = (3, 10)


def _check_python_version():
    """Try early abort if the Python version is too old."""

    # Use Python tuple comparison for version numbers
    if sys.version_info < MIN_PYTHON_VERSION:
        raise RuntimeError(f"eth_lp needs Python {MIN_PYTHON_VERSION[0]}.{MIN_PYTHON_VERSION[1]} or later")


_check_python_version()
