#!/usr/bin/env python3

"""
Display strings for ranges and range sets.

Two styles are supported:

    lus:  [ lower  upper s ]
    53:   <5' end5   end3 3'>

Padding width and default style live on a RangeFormatter instance, which is
built from configuration and passed to whatever needs it.
"""

from dataclasses import dataclass

from .exceptions import ConfigurationError
from .strand import strand_symbol

STRING_METHODS = ('lus', '53')


@dataclass
class RangeFormatter:
    """Render coordinate-bearing objects as padded strings."""
    width: int = 6
    method: str = 'lus'

    def __post_init__(self):
        """Validate formatter settings."""
        if self.method not in STRING_METHODS:
            raise ConfigurationError(f"Unknown string method: {self.method}")
        if isinstance(self.width, bool) or not isinstance(self.width, int) or self.width < 0:
            raise ConfigurationError(f"Integer width must be a non-negative integer: {self.width}")

    @classmethod
    def from_config(cls, config) -> 'RangeFormatter':
        """Create a formatter from a RangeConfig."""
        return cls(width=config.integer_width, method=config.string_method)

    def format(self, item, method: str = "") -> str:
        """Format item with the given method, or the default one."""
        method = method or self.method
        if method == 'lus':
            return self.format_lus(item)
        if method == '53':
            return self.format_53(item)
        raise ConfigurationError(f"Unknown string method: {method}")

    def format_lus(self, item) -> str:
        """Format as [ lower upper strand ]."""
        lower, upper = item.lower, item.upper
        if lower is None or upper is None:
            return '[ ? ? ? ]'
        return f"[ {self._pair(lower, upper)} {strand_symbol(item.strand)} ]"

    def format_53(self, item) -> str:
        """Format as <5' end5 end3 3'>."""
        end5, end3 = item.end5, item.end3
        if end5 is None or end3 is None:
            return "<5' ? ? 3'>"
        return f"<5' {self._pair(end5, end3)} 3'>"

    def _pair(self, left: int, right: int) -> str:
        return f"{str(left).ljust(self.width)} {str(right).rjust(self.width)}"
