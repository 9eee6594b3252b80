#!/usr/bin/env python3

"""
Coordinate-bearing interface shared by ranges and range sets.

Anything exposing ``lower``, ``upper`` and ``strand`` satisfies the
CoordinateBearing protocol. CoordinateMixin derives everything else from
those three values once, so the same conversions and pairwise algebra work
for a single Range, a RangeSet, or a mix of both.

Coordinates are interbase: ``[lower, upper)`` on a zero-based line. The
1-based views (start/end and end5/end3) are computed on demand.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Protocol, runtime_checkable

from .exceptions import InvalidArgumentError, SequenceError, StrandError
from .formatting import RangeFormatter
from .strand import MINUS, PLUS, consensus_strand, validate_non_negative_int, validate_positive_int


@runtime_checkable
class CoordinateBearing(Protocol):
    """Structural type for objects with interbase bounds and a strand."""

    @property
    def lower(self) -> Optional[int]: ...

    @property
    def upper(self) -> Optional[int]: ...

    @property
    def strand(self) -> Optional[int]: ...


def require_coordinates(item, argument: str = "range"):
    """Return item if it exposes lower/upper/strand, otherwise raise."""
    if not isinstance(item, CoordinateBearing):
        raise InvalidArgumentError("object must expose lower, upper and strand", argument, item)
    return item


def _make_range(lower: int, upper: int, strand: Optional[int]):
    from .range import Range
    return Range.from_lower_upper(lower, upper, strand)


class CoordinateMixin(ABC):
    """Derived coordinates, comparisons and combinations for range-like classes."""

    @property
    @abstractmethod
    def lower(self) -> Optional[int]:
        """Lower bound in interbase coordinates."""

    @property
    @abstractmethod
    def upper(self) -> Optional[int]:
        """Upper bound in interbase coordinates."""

    @property
    @abstractmethod
    def strand(self) -> Optional[int]:
        """Strand: 1, -1, 0 or None."""

    # Derived quantities

    @property
    def length(self) -> Optional[int]:
        """Distance between upper and lower bound."""
        lower, upper = self.lower, self.upper
        if lower is None or upper is None:
            return None
        return upper - lower

    @property
    def phase(self) -> Optional[int]:
        """Length modulo 3."""
        length = self.length
        if length is None:
            return None
        return length % 3

    # 1-based conversion

    @property
    def start(self) -> Optional[int]:
        """1-based start (lower + 1)."""
        lower = self.lower
        return None if lower is None else lower + 1

    @start.setter
    def start(self, value: int) -> None:
        validate_positive_int(value, "start")
        self.lower = value - 1

    @property
    def end(self) -> Optional[int]:
        """1-based end, identical to the upper bound."""
        return self.upper

    @end.setter
    def end(self, value: int) -> None:
        self.upper = value

    # 5'/3' conversion

    @property
    def end5(self) -> Optional[int]:
        """1-based 5' end, or None when orientation is not known."""
        return self._get_end(PLUS)

    @end5.setter
    def end5(self, value: int) -> None:
        self._set_end(PLUS, value, "end5")

    @property
    def end3(self) -> Optional[int]:
        """1-based 3' end, or None when orientation is not known."""
        return self._get_end(MINUS)

    @end3.setter
    def end3(self, value: int) -> None:
        self._set_end(MINUS, value, "end3")

    def _get_end(self, test: int) -> Optional[int]:
        # test is the strand on which this end is the start
        strand = self.strand
        if not strand:
            # Without orientation only a single base has unambiguous ends
            if self.length == 1:
                return self.start
            return None
        if strand == test:
            return self.start
        return self.end

    def _set_end(self, test: int, value: int, argument: str) -> None:
        strand = self.strand
        if not strand:
            raise StrandError(f"cannot assign {argument} without an oriented strand", strand)
        validate_positive_int(value, argument)
        if strand == test:
            self.start = value
        else:
            self.end = value

    # Sequence extraction

    def sequence(self, buffer):
        """
        Extract ``buffer[lower:upper]``.

        Args:
            buffer: str, bytes or any sliceable sequence with a length
                (e.g. an indexed FASTA record)

        Returns:
            The subsequence (str for non-bytes buffers), or None if the
            bounds are undefined

        Raises:
            SequenceError: If the buffer is shorter than the upper bound
        """
        lower, upper = self.lower, self.upper
        if lower is None or upper is None:
            logging.warning("Unable to get sequence; lower or upper bound not defined")
            return None

        buffer_length = len(buffer)
        if buffer_length < upper:
            raise SequenceError("sequence does not contain range", buffer_length, upper)

        fragment = buffer[lower:upper]
        if isinstance(fragment, (str, bytes)):
            return fragment
        return str(fragment)

    # Comparisons

    def overlaps(self, other) -> bool:
        """True if the two half-open ranges share at least one position."""
        require_coordinates(other)
        if not (self._defined() and _defined(other)):
            return False
        return self.lower < other.upper and self.upper > other.lower

    def contains(self, point: int) -> bool:
        """True if lower <= point <= upper."""
        validate_non_negative_int(point, "point")
        if not self._defined():
            return False
        return self.lower <= point <= self.upper

    def outside(self, other) -> bool:
        """True if this range is a superset of other."""
        require_coordinates(other)
        if not (self._defined() and _defined(other)):
            return False
        return self.lower <= other.lower and self.upper >= other.upper

    def inside(self, other) -> bool:
        """True if this range is a subset of other."""
        require_coordinates(other)
        if not (self._defined() and _defined(other)):
            return False
        return self.lower >= other.lower and self.upper <= other.upper

    def equals(self, other) -> bool:
        """True if lower, upper and strand all match."""
        require_coordinates(other)
        return (self.lower == other.lower
                and self.upper == other.upper
                and self.strand == other.strand)

    def relative(self, other) -> int:
        """
        Order two ranges by lower bound, breaking ties on the upper bound.

        Returns:
            -1, 0 or 1
        """
        require_coordinates(other)
        if not (self._defined() and _defined(other)):
            raise InvalidArgumentError("cannot order ranges with undefined bounds", "range", other)
        return (_cmp(self.lower, other.lower)
                or _cmp(self.upper, other.upper))

    def relative_point(self, point: int) -> int:
        """-1 if the range lies below point, 1 if above, 0 if point falls within."""
        validate_non_negative_int(point, "point")
        if not self._defined():
            raise InvalidArgumentError("cannot order a range with undefined bounds", "range", self)
        if self.upper <= point:
            return -1
        if self.lower >= point:
            return 1
        return 0

    # Combinations

    def intersection(self, other):
        """
        Range covered by both self and other, or None if they do not overlap.

        The strand is the reconciled strand of the inputs; opposite strands
        give an Unknown strand rather than an error.
        """
        if not self.overlaps(other):
            return None
        return _make_range(max(self.lower, other.lower),
                           min(self.upper, other.upper),
                           consensus_strand(self, other))

    def union(self, other):
        """Range spanning self and other, or None if they do not overlap."""
        if not self.overlaps(other):
            return None
        return _make_range(min(self.lower, other.lower),
                           max(self.upper, other.upper),
                           consensus_strand(self, other))

    def to_display_string(self, formatter: Optional[RangeFormatter] = None, method: str = "") -> str:
        """Render with the given formatter (default width 6, 'lus' style)."""
        return (formatter or RangeFormatter()).format(self, method)

    def _defined(self) -> bool:
        return _defined(self)


def _defined(item) -> bool:
    return item.lower is not None and item.upper is not None


def _cmp(left: int, right: int) -> int:
    return (left > right) - (left < right)
