"""
Example company colors.
"""

from types import MappingProxyType

MY_COMPANY_COLORS = MappingProxyType({
    "red": "#701B06",
    "blue": "#78A8D1",
    "yellow": "#D5BF98",
})

__all__ = ["MY_COMPANY_COLORS"]
