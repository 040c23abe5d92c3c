"""
Host platform detection
"""

import platform
from typing import Tuple


def get_client_arch() -> Tuple[str, str]:
    """Return the (architecture, OS name) pair, as reported by uname -m / uname -s"""
    return platform.machine(), platform.system()
