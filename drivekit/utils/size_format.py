"""
Human readable byte sizes
"""

from decimal import Decimal
from typing import Dict

BYTES_PER_KB = 1024
SUFFIXES = ("B", "KB", "MB", "GB", "TB", "PB")


class ByteSizeFormatter:
    """
    Memoized byte-size formatter.

    Values are scaled by 1024 until they drop below one unit or the largest
    suffix (PB) is reached, so anything beyond a petabyte is still reported
    in PB. Results are cached per raw input and the cache is never cleared.
    The cache is not locked; concurrent callers must serialize access.
    """

    def __init__(self):
        self.cache: Dict[int, str] = {}

    def __call__(self, b: int) -> str:
        description = self.cache.get(b)
        if description is not None:
            return description

        description = self._describe(b)
        self.cache[b] = description
        return description

    format = __call__

    @staticmethod
    def _describe(b: int) -> str:
        # float() overflows past ~1.8e308; Decimal takes any int
        value = Decimal(b)
        max_index = len(SUFFIXES) - 1
        i = 0
        while value / BYTES_PER_KB >= 1 and i < max_index:
            value /= BYTES_PER_KB
            i += 1
        return f"{value:.2f}{SUFFIXES[i]}"


pretty_bytes = ByteSizeFormatter()
